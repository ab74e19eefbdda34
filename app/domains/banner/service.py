import logging
import uuid
from collections.abc import AsyncGenerator, Mapping
from dataclasses import dataclass
from typing import Any, Optional
from advanced_alchemy.exceptions import RepositoryError
from advanced_alchemy.repository import SQLAlchemyAsyncRepository
from litestar.datastructures import UploadFile
from litestar.exceptions import NotFoundException
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from database.models.banner import Banner, BannerTranslation
from domains.banner.dtos import BannerForm
from domains.banner.exceptions import (
    BannerBindException,
    BannerPersistException,
    FileUploadException,
)
from domains.banner.files import FileManagerInterface, FileStorageError
from domains.banner.languages import LanguageProviderInterface
from domains.banner.provider import BannerDataProvider, BannerOrder

logger = logging.getLogger(__name__)


class BannerRepository(SQLAlchemyAsyncRepository[Banner]):
    model_type = Banner


@dataclass
class SaveResult:
    """Outcome of a save or delete; truthy only on success."""

    success: bool
    banner: Optional[Banner] = None
    error: Optional[Exception] = None

    def __bool__(self) -> bool:
        return self.success


@dataclass
class StoredUpload:
    translation: BannerTranslation
    file_name: str
    previous: Optional[str]
    replaces: Optional[str]


class BannerService:
    """Create, update and delete banners together with their translations.

    The service keeps one working model, set by ``get_model``, so an
    instance must not be shared between requests.
    """

    def __init__(
        self,
        repository: BannerRepository,
        file_manager: FileManagerInterface,
        language_provider: LanguageProviderInterface,
    ):
        self.repository = repository
        self.file_manager = file_manager
        self.language_provider = language_provider
        self._model: Banner | None = None

    def get_data_provider(
        self,
        order_by: BannerOrder = BannerOrder.POSITION,
        order_direction: str = "asc",
    ) -> BannerDataProvider:
        return BannerDataProvider(
            self.repository, order_by=order_by, order_direction=order_direction
        )

    async def _find_model(self, item_id: uuid.UUID) -> Banner:
        model = await self.repository.get_one_or_none(Banner.id == item_id)
        if model is None:
            raise NotFoundException(f"No banner found with id {item_id}")
        return model

    async def get_model(self, item_id: uuid.UUID | None = None) -> Banner:
        """Return a blank banner when ``item_id`` is None, otherwise the stored one."""
        if item_id is None:
            model = Banner()
            model.load_default_values()
            for language in self.language_provider.get_languages():
                model.get_translation(language)
            self._model = model
        else:
            self._model = await self._find_model(item_id)
        return self._model

    async def _save_uploaded_file(
        self, model: BannerTranslation, uploaded_file: UploadFile | None
    ) -> str | None:
        if uploaded_file is None:
            return model.file_name

        filename = uploaded_file.filename or ""
        extension = filename.split(".")[-1] if "." in filename else "jpg"
        file_name = self.file_manager.generate_file_name(extension)
        content = await uploaded_file.read()
        try:
            await self.file_manager.save_file(
                file_name, content, uploaded_file.content_type
            )
        except FileStorageError as exc:
            raise FileUploadException(exc.code) from exc
        return file_name

    def _load(self, data: Mapping[str, Any]) -> BannerForm:
        if self._model is None:
            raise BannerBindException("Call get_model() before save()")
        if not isinstance(data, Mapping):
            raise BannerBindException("Cannot load data to primary model")
        try:
            form = BannerForm.model_validate(data)
        except ValidationError as exc:
            raise BannerBindException(
                f"Cannot load data to primary model: {exc}"
            ) from exc
        unknown = set(form.translations) - set(self.language_provider.get_languages())
        if unknown:
            raise BannerBindException(
                f"Unsupported languages: {', '.join(sorted(unknown))}"
            )
        return form

    def _validate(self, model: Banner) -> None:
        if not model.name:
            raise BannerPersistException("Banner name cannot be blank")

    async def _save_internal(
        self, data: Mapping[str, Any], uploads: list[StoredUpload]
    ) -> Banner:
        form = self._load(data)
        model = self._model
        for attribute, value in form.model_dump(
            exclude={"translations"}, exclude_unset=True
        ).items():
            setattr(model, attribute, value)
        # nothing is written to storage for a banner that cannot be saved
        self._validate(model)

        for language, data_set in form.translations.items():
            translation = model.get_translation(language)
            previous = translation.file_name
            file_name = await self._save_uploaded_file(translation, data_set.image_file)
            if file_name != previous:
                uploads.append(
                    StoredUpload(
                        translation=translation,
                        file_name=file_name,
                        previous=previous,
                        replaces=None if translation.is_new_record else previous,
                    )
                )
                translation.file_name = file_name
            for attribute, value in data_set.model_dump(
                exclude={"image_file"}, exclude_unset=True
            ).items():
                setattr(translation, attribute, value)

        try:
            return await self.repository.add(model, auto_commit=True, auto_refresh=True)
        except RepositoryError as exc:
            raise BannerPersistException(f"Cannot save banner: {exc}") from exc

    async def _restore(self, model: Banner | None) -> Banner | None:
        """Roll the session back and reload ``model`` so it can be read again.

        Returns None when the model cannot be reloaded.
        """
        session = self.repository.session
        try:
            await session.rollback()
            if model is not None and not model.is_new_record:
                await session.refresh(model)
        except Exception:
            logger.exception("Cannot restore banner after a failed write")
            return None
        return model

    async def save(self, data: Mapping[str, Any]) -> SaveResult:
        uploads: list[StoredUpload] = []
        try:
            banner = await self._save_internal(data, uploads)
        except Exception as exc:
            logger.exception(f"Failed to save banner: {exc}")
            for upload in uploads:
                upload.translation.file_name = upload.previous
                await self._delete_file(upload.file_name)
            self._model = await self._restore(self._model)
            return SaveResult(success=False, banner=self._model, error=exc)

        for upload in uploads:
            if upload.replaces:
                await self._delete_file(upload.replaces)
        return SaveResult(success=True, banner=banner)

    async def _delete_file(self, file_name: str) -> None:
        try:
            deleted = await self.file_manager.delete_file(file_name)
        except Exception as exc:
            logger.warning(f'Cannot delete "{file_name}" file: {exc}')
            return
        if not deleted:
            logger.warning(f'Cannot delete "{file_name}" file')

    async def delete(self, item_id: uuid.UUID) -> SaveResult:
        model = await self._find_model(item_id)
        try:
            for translation in model.translations:
                if translation.file_name:
                    await self._delete_file(translation.file_name)
            await self.repository.delete(model.id, auto_commit=True)
            return SaveResult(success=True, banner=model)
        except Exception as exc:
            logger.exception(f"Failed to delete banner {item_id}: {exc}")
            return SaveResult(success=False, banner=await self._restore(model), error=exc)


def banner_service_provider(service_class: type[BannerService] = BannerService):
    async def provide_banner_service(
        db_session: AsyncSession,
        file_manager: FileManagerInterface,
        language_provider: LanguageProviderInterface,
    ) -> AsyncGenerator[BannerService, None]:
        yield service_class(
            repository=BannerRepository(session=db_session),
            file_manager=file_manager,
            language_provider=language_provider,
        )

    return provide_banner_service
