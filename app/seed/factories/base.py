from abc import ABC, abstractmethod
from typing import Type
from advanced_alchemy.repository import SQLAlchemyAsyncRepository
from litestar.plugins.sqlalchemy import SQLAlchemyAsyncConfig
from domains.banner.languages import LanguageProviderInterface


class BaseFactory(ABC):
    repository: Type[SQLAlchemyAsyncRepository]

    def __init__(
        self,
        db_config: SQLAlchemyAsyncConfig,
        language_provider: LanguageProviderInterface,
    ):
        self.db_config = db_config
        self.language_provider = language_provider

    @abstractmethod
    async def seed(self, count: int) -> None:
        """Insert a specified number of rows into the table."""
        pass

    @abstractmethod
    async def drop_all(self) -> None:
        """Delete all rows from the table."""
        pass
