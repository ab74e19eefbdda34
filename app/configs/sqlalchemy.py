import os
from litestar.plugins.sqlalchemy import AsyncSessionConfig, SQLAlchemyAsyncConfig
from dotenv import load_dotenv
from database.models.base import BaseModel

load_dotenv()
session_config = AsyncSessionConfig(expire_on_commit=False)


def provide_sqlalchemy_config(
    connection_string: str | None = None, create_all: bool = False
) -> SQLAlchemyAsyncConfig:
    return SQLAlchemyAsyncConfig(
        connection_string=connection_string or os.environ.get("DB_URL"),
        session_config=session_config,
        metadata=BaseModel.metadata,
        create_all=create_all,
    )  # Create 'db_session' dependency.


sqlalchemy_config = provide_sqlalchemy_config(
    create_all=os.environ.get("ENVIRONMENT") == "dev"
)
