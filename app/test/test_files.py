from pathlib import Path
from unittest.mock import MagicMock

import pytest
from storage3.utils import StorageException

from domains.banner.files import FileStorageError, LocalFileManager
from domains.supabase.service import SupabaseFileManager


def test_generated_names_are_unique_and_keep_extension(file_manager):
    names = {file_manager.generate_file_name(".JPG") for _ in range(50)}
    assert len(names) == 50
    assert all(name.endswith(".jpg") for name in names)


def test_generated_name_without_extension(file_manager):
    assert "." not in file_manager.generate_file_name("")


def test_image_src_uses_base_url(upload_dir: Path):
    manager = LocalFileManager(upload_dir, base_url="/static/banners/")
    assert manager.get_image_src("abc.png") == "/static/banners/abc.png"


async def test_save_and_delete_file(file_manager, upload_dir: Path):
    await file_manager.save_file("abc.png", b"data", "image/png")
    assert (upload_dir / "abc.png").read_bytes() == b"data"

    assert await file_manager.delete_file("abc.png") is True
    assert not (upload_dir / "abc.png").exists()


async def test_delete_missing_or_empty_name_returns_false(file_manager):
    assert await file_manager.delete_file("missing.png") is False
    assert await file_manager.delete_file("") is False


async def test_file_names_cannot_escape_upload_dir(file_manager, upload_dir: Path, tmp_path: Path):
    outside = tmp_path / "secret.txt"
    outside.write_text("keep me")

    assert await file_manager.delete_file("../secret.txt") is False
    assert outside.exists()

    await file_manager.save_file("../evil.png", b"x")
    assert (upload_dir / "evil.png").exists()
    assert not (tmp_path / "evil.png").exists()


async def test_save_failure_raises_storage_error_with_errno(tmp_path: Path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    manager = LocalFileManager(blocker / "uploads")

    with pytest.raises(FileStorageError) as exc_info:
        await manager.save_file("abc.png", b"data")
    assert exc_info.value.code is not None


@pytest.fixture
def bucket() -> MagicMock:
    return MagicMock()


@pytest.fixture
def supabase_manager(bucket: MagicMock) -> SupabaseFileManager:
    client = MagicMock()
    client.storage.from_.return_value = bucket
    return SupabaseFileManager(bucket_name="banner", client=client)


async def test_supabase_save_uploads_bytes(supabase_manager, bucket):
    await supabase_manager.save_file("abc.png", b"data", "image/png")
    bucket.upload.assert_called_once_with("abc.png", b"data", {"content-type": "image/png"})


async def test_supabase_save_failure_carries_status_code(supabase_manager, bucket):
    bucket.upload.side_effect = StorageException({"statusCode": 413, "message": "too large"})

    with pytest.raises(FileStorageError) as exc_info:
        await supabase_manager.save_file("abc.png", b"data")
    assert exc_info.value.code == 413


async def test_supabase_delete(supabase_manager, bucket):
    assert await supabase_manager.delete_file("abc.png") is True
    bucket.remove.assert_called_once_with(["abc.png"])

    bucket.remove.side_effect = StorageException({"statusCode": 404})
    assert await supabase_manager.delete_file("abc.png") is False
    assert await supabase_manager.delete_file("") is False


def test_supabase_image_src_is_public_url(supabase_manager, bucket):
    bucket.get_public_url.return_value = "https://cdn.example.com/banner/abc.png"
    assert supabase_manager.get_image_src("abc.png") == "https://cdn.example.com/banner/abc.png"
