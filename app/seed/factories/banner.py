from faker import Faker
from sqlalchemy import delete
from database.models.banner import Banner, BannerTranslation
from seed.factories.base import BaseFactory
from domains.banner.service import BannerRepository

fake = Faker()


class BannerFactory(BaseFactory):
    repository = BannerRepository

    def build(self, position: int = 0) -> Banner:
        banner = Banner(
            name=fake.sentence(nb_words=3).rstrip("."),
            link_url=fake.url(),
            position=position,
            is_active=fake.boolean(chance_of_getting_true=80),
        )
        for language in self.language_provider.get_languages():
            translation = banner.get_translation(language)
            translation.title = fake.sentence(nb_words=4)
            translation.content = fake.text(max_nb_chars=200)
            translation.hint = fake.sentence(nb_words=6)
        return banner

    async def seed(self, count: int) -> None:
        async with self.db_config.get_session() as session:
            try:
                await self.repository(session=session).add_many(
                    [self.build(position=index) for index in range(count)]
                )
            except Exception:
                await session.rollback()
                raise
            await session.commit()

    async def drop_all(self) -> None:
        async with self.db_config.get_session() as session:
            # bulk deletes skip ORM cascades, so clear the children first
            await session.execute(delete(BannerTranslation))
            await session.execute(delete(Banner))
            await session.commit()
