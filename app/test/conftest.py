from collections.abc import AsyncIterator, Callable
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from litestar.datastructures import UploadFile
from litestar.testing import AsyncTestClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app import create_app
from configs.sqlalchemy import provide_sqlalchemy_config
from database.models.base import BaseModel
from domains.banner.files import FileManagerInterface, FileStorageError, LocalFileManager
from domains.banner.languages import ConfigLanguageProvider
from domains.banner.module import BannerModuleConfig
from domains.banner.service import BannerRepository, BannerService

if TYPE_CHECKING:
    from litestar import Litestar


class FailingUploadFileManager(LocalFileManager):
    async def save_file(self, file_name, content, content_type=None) -> None:
        raise FileStorageError(f"disk full while writing {file_name}", code=28)


class StubbornFileManager(LocalFileManager):
    """Refuses to delete the names it is given, records every attempt."""

    def __init__(self, upload_dir, refuse: set[str]):
        super().__init__(upload_dir)
        self.refuse = refuse
        self.deleted: list[str] = []

    async def delete_file(self, file_name: str) -> bool:
        self.deleted.append(file_name)
        if file_name in self.refuse:
            return False
        return await super().delete_file(file_name)


class UnreachableFileManager(StubbornFileManager):
    """Storage whose host is down: writes fail, and so do deletes of the given names."""

    async def save_file(self, file_name, content, content_type=None) -> None:
        raise ConnectionError("storage host unreachable")

    async def delete_file(self, file_name: str) -> bool:
        if file_name in self.refuse:
            self.deleted.append(file_name)
            raise ConnectionError("storage host unreachable")
        return await super().delete_file(file_name)


def _upload(filename: str = "banner.png", data: bytes = b"\x89PNG fake") -> UploadFile:
    return UploadFile(content_type="image/png", filename=filename, file_data=data)


@pytest.fixture
def make_upload() -> Callable[..., UploadFile]:
    return _upload


@pytest.fixture
def failing_file_manager(upload_dir: Path) -> FailingUploadFileManager:
    return FailingUploadFileManager(upload_dir)


@pytest.fixture
def stubborn_file_manager(upload_dir: Path) -> Callable[[set[str]], StubbornFileManager]:
    return lambda refuse: StubbornFileManager(upload_dir, refuse)


@pytest.fixture
def unreachable_file_manager(upload_dir: Path) -> Callable[..., UnreachableFileManager]:
    return lambda refuse=(): UnreachableFileManager(upload_dir, set(refuse))


@pytest.fixture
def db_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'banners.db'}"


@pytest.fixture
async def engine(db_url: str) -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine(db_url)
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, expire_on_commit=False)


@pytest.fixture
def language_provider() -> ConfigLanguageProvider:
    return ConfigLanguageProvider(["en", "fr"])


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def file_manager(upload_dir: Path) -> LocalFileManager:
    return LocalFileManager(upload_dir, base_url="/banners")


@pytest.fixture
async def make_service(
    session_maker: async_sessionmaker[AsyncSession],
    file_manager: LocalFileManager,
    language_provider: ConfigLanguageProvider,
) -> AsyncIterator[Callable[..., BannerService]]:
    """Build services on their own sessions, the way each request would get one."""
    sessions: list[AsyncSession] = []

    def factory(manager: FileManagerInterface | None = None) -> BannerService:
        session = session_maker()
        sessions.append(session)
        return BannerService(
            repository=BannerRepository(session=session),
            file_manager=manager or file_manager,
            language_provider=language_provider,
        )

    yield factory
    for session in sessions:
        await session.close()


@pytest.fixture
def service(make_service: Callable[..., BannerService]) -> BannerService:
    return make_service()


@pytest.fixture
async def test_client(
    engine: AsyncEngine,
    db_url: str,
    file_manager: LocalFileManager,
    language_provider: ConfigLanguageProvider,
) -> AsyncIterator["AsyncTestClient[Litestar]"]:
    app = create_app(
        banner_config=BannerModuleConfig(
            language_provider=language_provider, file_manager=file_manager
        ),
        db_config=provide_sqlalchemy_config(connection_string=db_url),
        seed_count=0,
    )
    async with AsyncTestClient(app=app) as client:
        yield client
