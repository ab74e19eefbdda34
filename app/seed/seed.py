import logging
from typing import List, Tuple, Type
from litestar.plugins.sqlalchemy import SQLAlchemyAsyncConfig
from domains.banner.languages import LanguageProviderInterface
from seed.factories.base import BaseFactory

logger = logging.getLogger(__name__)


class Seeder:
    async def seed_all(
        self,
        factory_classes: List[Tuple[Type[BaseFactory], int]],
        db_config: SQLAlchemyAsyncConfig,
        language_provider: LanguageProviderInterface,
    ) -> None:
        """
        Seed all models using their respective factories.

        :param factory_classes: List of tuples where each tuple contains a factory class and the count of records to seed.
        """
        for FactoryClass, count in factory_classes:
            logger.info(f"Seeding {count} {FactoryClass.__name__}")
            factory = FactoryClass(db_config, language_provider)
            await factory.drop_all()
            await factory.seed(count)
            logger.info(f"Seeding {FactoryClass.__name__} complete!")
