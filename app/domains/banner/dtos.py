from typing import Optional
from litestar.datastructures import UploadFile
from pydantic import BaseModel, ConfigDict, field_validator


class BannerTranslationForm(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")
    title: Optional[str] = None
    content: Optional[str] = None
    hint: Optional[str] = None
    image_file: Optional[UploadFile] = None

    @field_validator("image_file", mode="before")
    def empty_upload(cls, v):
        # browsers post an empty string for an untouched file input
        if v == "":
            return None
        return v


class BannerForm(BaseModel):
    """Fields an admin may post for a banner; anything else is rejected."""

    model_config = ConfigDict(extra="forbid")
    name: Optional[str] = None
    link_url: Optional[str] = None
    position: int = 0
    is_active: bool = True
    translations: dict[str, BannerTranslationForm] = {}

    @field_validator("name", "link_url")
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("position")
    def non_negative(cls, v):
        if v < 0:
            raise ValueError("position must be non-negative")
        return v
