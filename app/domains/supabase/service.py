import logging
from functools import partial
from anyio import to_thread
from supabase.client import Client
from configs.supabase import provide_supabase_client
from domains.banner.files import FileManagerInterface, FileStorageError
from storage3.utils import StorageException

logger = logging.getLogger(__name__)


def _error_code(exc: StorageException) -> int | str | None:
    if exc.args and isinstance(exc.args[0], dict):
        return exc.args[0].get("statusCode") or exc.args[0].get("error")
    return None


class SupabaseFileManager(FileManagerInterface):
    supabase_client: Client
    bucket_name: str

    def __init__(self, bucket_name: str = "", client: Client | None = None):
        self.supabase_client = client or provide_supabase_client()
        self.bucket_name = bucket_name

    def _bucket(self):
        return self.supabase_client.storage.from_(self.bucket_name)

    def get_image_src(self, file_name: str) -> str:
        return self._bucket().get_public_url(file_name)

    async def save_file(
        self, file_name: str, content: bytes, content_type: str | None = None
    ) -> None:
        try:
            await to_thread.run_sync(
                partial(
                    self._bucket().upload,
                    file_name,
                    content,
                    {"content-type": content_type or "application/octet-stream"},
                )
            )
        except StorageException as exc:
            raise FileStorageError(
                f"Failed to upload {file_name}: {exc}", code=_error_code(exc)
            ) from exc

    async def delete_file(self, file_name: str) -> bool:
        if not file_name:
            return False
        try:
            await to_thread.run_sync(self._bucket().remove, [file_name])
        except StorageException as e:
            logger.warning(f"Failed to delete {file_name} from storage: {e}")
            return False
        return True


def provide_supabase_file_manager(bucket_name: str) -> SupabaseFileManager:
    return SupabaseFileManager(bucket_name=bucket_name)
