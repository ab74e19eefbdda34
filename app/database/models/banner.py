from __future__ import annotations
import uuid
from typing import Optional
from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from database.models.base import BaseModel, BaseSchema


class Banner(BaseModel):
    __tablename__ = "banners"
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    link_url: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    translations: Mapped[list["BannerTranslation"]] = relationship(
        "BannerTranslation",
        back_populates="banner",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="BannerTranslation.language",
    )

    def load_default_values(self) -> None:
        """Apply python-side column defaults to a freshly built instance."""
        for column in self.__table__.columns:
            if column.primary_key or column.default is None:
                continue
            if getattr(self, column.key) is not None:
                continue
            if column.default.is_scalar:
                setattr(self, column.key, column.default.arg)

    def find_translation(self, language: str) -> "BannerTranslation | None":
        return next(
            (item for item in self.translations if item.language == language), None
        )

    def get_translation(self, language: str) -> "BannerTranslation":
        translation = self.find_translation(language)
        if translation is None:
            translation = BannerTranslation(language=language)
            self.translations.append(translation)
        return translation


class BannerTranslation(BaseModel):
    __tablename__ = "banner_translations"
    __table_args__ = (
        UniqueConstraint("banner_id", "language", name="uq_banner_translation_language"),
    )

    banner_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("banners.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language: Mapped[str] = mapped_column(String(16), nullable=False)
    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    content: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    hint: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    file_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    banner: Mapped["Banner"] = relationship("Banner", back_populates="translations")


class BannerTranslationSchema(BaseSchema):
    banner_id: Optional[uuid.UUID] = None
    language: str
    title: Optional[str] = None
    content: Optional[str] = None
    hint: Optional[str] = None
    file_name: Optional[str] = None
    image_src: Optional[str] = None


class BannerSchema(BaseSchema):
    name: Optional[str] = None
    link_url: Optional[str] = None
    position: int = 0
    is_active: bool = True
    translations: list[BannerTranslationSchema] = []
