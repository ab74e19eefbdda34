import logging
import uuid
from abc import ABC, abstractmethod
from pathlib import Path

import anyio

logger = logging.getLogger(__name__)


class FileStorageError(Exception):
    """A storage backend failed to write a file."""

    def __init__(self, message: str, code: int | str | None = None):
        self.code = code
        super().__init__(message)


class FileManagerInterface(ABC):
    def generate_file_name(self, extension: str) -> str:
        extension = extension.lstrip(".").lower()
        name = uuid.uuid4().hex
        return f"{name}.{extension}" if extension else name

    @abstractmethod
    def get_image_src(self, file_name: str) -> str:
        """Return the location the stored image is served from."""

    @abstractmethod
    async def save_file(
        self, file_name: str, content: bytes, content_type: str | None = None
    ) -> None:
        """Store ``content`` under ``file_name``, raising FileStorageError on failure."""

    @abstractmethod
    async def delete_file(self, file_name: str) -> bool:
        """Remove a stored file, returning False instead of raising when it cannot."""


class LocalFileManager(FileManagerInterface):
    """Keeps banner images in a directory served by the static files router."""

    def __init__(self, upload_dir: str | Path, base_url: str = "/banners"):
        self.upload_dir = Path(upload_dir)
        self.base_url = base_url.rstrip("/")

    def _path(self, file_name: str) -> Path:
        # stored names are flat; never let one escape the upload directory
        return self.upload_dir / Path(file_name).name

    def get_image_src(self, file_name: str) -> str:
        return f"{self.base_url}/{Path(file_name).name}"

    async def save_file(
        self, file_name: str, content: bytes, content_type: str | None = None
    ) -> None:
        path = anyio.Path(self._path(file_name))
        try:
            await path.parent.mkdir(parents=True, exist_ok=True)
            await path.write_bytes(content)
        except OSError as e:
            raise FileStorageError(f"Cannot write {path}: {e}", code=e.errno) from e

    async def delete_file(self, file_name: str) -> bool:
        if not file_name:
            return False
        path = anyio.Path(self._path(file_name))
        try:
            await path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning(f"Cannot delete {path}: {e}")
            return False
        return True
