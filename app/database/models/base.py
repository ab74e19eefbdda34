import datetime
from typing import Optional
from litestar.plugins.sqlalchemy import base
from sqlalchemy import DateTime, Uuid, inspect
from sqlalchemy.orm import Mapped, mapped_column
from litestar.dto import dto_field
from pydantic import BaseModel as _BaseModel, ConfigDict
import uuid


class BaseModel(base.DefaultBase):
    __abstract__ = True
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        nullable=False,
        unique=True,
        primary_key=True,
        info=dto_field("read-only"),
        default=uuid.uuid4,
    )
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime, default=datetime.datetime.now, info=dto_field("read-only")
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime,
        default=datetime.datetime.now,
        onupdate=datetime.datetime.now,
        info=dto_field("read-only"),
    )

    @property
    def is_new_record(self) -> bool:
        """True until the instance has been flushed to the database."""
        state = inspect(self)
        return state.transient or state.pending


class BaseSchema(_BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: Optional[uuid.UUID] = None
    created_at: Optional[datetime.datetime] = None
    updated_at: Optional[datetime.datetime] = None
