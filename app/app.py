import os
from litestar.exceptions import ValidationException
from litestar import Litestar, MediaType, Request, Response, get
from litestar.types import ControllerRouterHandler
from litestar.plugins.sqlalchemy import SQLAlchemyAsyncConfig, SQLAlchemyPlugin
from litestar.exceptions.responses import create_exception_response
from litestar.plugins.structlog import StructlogPlugin, StructlogConfig
from litestar.static_files import create_static_files_router
from dotenv import load_dotenv
from configs import openapi
from configs.banner import banner_module_config
from configs.sqlalchemy import sqlalchemy_config
from domains.banner.files import LocalFileManager
from domains.banner.module import BannerModule, BannerModuleConfig
from seed.factories.banner import BannerFactory
from seed.seed import Seeder

load_dotenv()


def validation_exception_handler(
    request: Request, exc: ValidationException
) -> Response:
    if isinstance(exc.extra, list) and len(exc.extra) > 0 and "input" in exc.extra[0]:
        content = {
            "status_code": 400,
            "Message": "Bad request",
            "details": [
                {"type": error["type"], "field": error["loc"], "msg": error["msg"]}
                for error in exc.extra
            ],
        }
        return Response(
            media_type=MediaType.JSON,
            content=content,
            status_code=400,
        )
    else:
        return create_exception_response(request=request, exc=exc)


@get(path="/schema", include_in_schema=False)
async def schema(request: Request) -> dict:
    schema = request.openapi_schema
    return schema.to_schema()


def create_app(
    banner_config: BannerModuleConfig | None = None,
    db_config: SQLAlchemyAsyncConfig | None = None,
    seed_count: int | None = None,
) -> Litestar:
    banner_config = banner_config or banner_module_config()
    db_config = db_config or sqlalchemy_config
    seeder = Seeder()
    if seed_count is None:
        seed_count = int(os.environ.get("BANNER_SEED_COUNT", "0"))

    async def seed_banners() -> None:
        if seed_count:
            await seeder.seed_all(
                factory_classes=[(BannerFactory, seed_count)],
                db_config=db_config,
                language_provider=banner_config.language_provider,
            )

    routes: list[ControllerRouterHandler] = [schema]
    file_manager = banner_config.file_manager
    if isinstance(file_manager, LocalFileManager):
        # uploaded banner images are served straight from disk
        file_manager.upload_dir.mkdir(parents=True, exist_ok=True)
        routes.append(
            create_static_files_router(
                path=file_manager.base_url or "/",
                directories=[file_manager.upload_dir],
                include_in_schema=False,
                tags=["static"],
            )
        )
    return Litestar(
        route_handlers=routes,
        openapi_config=openapi.config,
        on_app_init=[BannerModule(banner_config).on_app_init],
        on_startup=[seed_banners],
        debug=os.environ.get("ENVIRONMENT") == "dev",
        exception_handlers={
            ValidationException: validation_exception_handler,
        },
        plugins=[
            SQLAlchemyPlugin(config=db_config),
            StructlogPlugin(config=StructlogConfig()),
        ],
    )


