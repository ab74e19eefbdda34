from sqlalchemy import func, select

from configs.sqlalchemy import provide_sqlalchemy_config
from database.models.banner import Banner, BannerTranslation
from seed.factories.banner import BannerFactory
from seed.seed import Seeder


async def count_rows(session_maker, model) -> int:
    async with session_maker() as session:
        return (await session.execute(select(func.count()).select_from(model))).scalar_one()


async def test_seeder_replaces_existing_banners(engine, db_url, session_maker, language_provider):
    db_config = provide_sqlalchemy_config(connection_string=db_url)
    seeder = Seeder()

    await seeder.seed_all([(BannerFactory, 3)], db_config=db_config, language_provider=language_provider)
    await seeder.seed_all([(BannerFactory, 2)], db_config=db_config, language_provider=language_provider)

    assert await count_rows(session_maker, Banner) == 2
    assert await count_rows(session_maker, BannerTranslation) == 4
    await db_config.get_engine().dispose()


def test_factory_builds_one_translation_per_language(db_url, language_provider):
    factory = BannerFactory(provide_sqlalchemy_config(connection_string=db_url), language_provider)
    banner = factory.build(position=4)

    assert banner.name
    assert banner.position == 4
    assert [t.language for t in banner.translations] == ["en", "fr"]
    assert all(t.title for t in banner.translations)
