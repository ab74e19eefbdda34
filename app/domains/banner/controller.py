import uuid
from typing import Any
from advanced_alchemy.filters import LimitOffset
from litestar import Controller, Request, delete, get, post
from litestar.di import Provide
from litestar.exceptions import InternalServerException, ValidationException
from litestar.pagination import OffsetPagination
from litestar.params import Parameter
from litestar.status_codes import HTTP_200_OK, HTTP_201_CREATED
from database.models.banner import Banner, BannerSchema
from database.utils import provide_pagination_params
from domains.banner.files import FileManagerInterface
from domains.banner.provider import BannerOrder
from domains.banner.service import BannerService, SaveResult
from domains.banner.utils import unflatten_form


def to_schema(banner: Banner, file_manager: FileManagerInterface) -> BannerSchema:
    schema = BannerSchema.model_validate(banner)
    for translation in schema.translations:
        if translation.file_name:
            translation.image_src = file_manager.get_image_src(translation.file_name)
    return schema


async def read_payload(request: Request) -> dict[str, Any]:
    if request.content_type[0] == "application/json":
        data = await request.json()
        if not isinstance(data, dict):
            raise ValidationException("Expected a JSON object")
        return data
    form = await request.form()
    try:
        return unflatten_form(form.multi_items())
    except ValueError as e:
        raise ValidationException(str(e))


def check_saved(result: SaveResult) -> Banner:
    if not result:
        raise ValidationException(f"Cannot save banner: {result.error}")
    return result.banner


class BannerAdminController(Controller):
    path = "/"
    tags = ["Banner"]

    @get(
        "/",
        dependencies={"pagination": Provide(provide_pagination_params)},
    )
    async def list_banners(
        self,
        banner_service: BannerService,
        file_manager: FileManagerInterface,
        pagination: LimitOffset,
        order_by: BannerOrder = Parameter(
            default=BannerOrder.POSITION, query="orderBy", title="Order By"
        ),
        order_direction: str = Parameter(
            default="asc",
            query="orderDirection",
            title="Order Direction",
            pattern="^(asc|desc)$",
        ),
    ) -> OffsetPagination[BannerSchema]:
        page = await banner_service.get_data_provider(
            order_by=order_by, order_direction=order_direction
        ).paginate(pagination)
        return OffsetPagination(
            items=[to_schema(item, file_manager) for item in page.items],
            total=page.total,
            limit=page.limit,
            offset=page.offset,
        )

    @get("/new")
    async def new_banner(
        self, banner_service: BannerService, file_manager: FileManagerInterface
    ) -> BannerSchema:
        return to_schema(await banner_service.get_model(), file_manager)

    @get("/{banner_id:uuid}")
    async def get_banner(
        self,
        banner_id: uuid.UUID,
        banner_service: BannerService,
        file_manager: FileManagerInterface,
    ) -> BannerSchema:
        return to_schema(await banner_service.get_model(banner_id), file_manager)

    @post("/", status_code=HTTP_201_CREATED)
    async def create_banner(
        self,
        request: Request,
        banner_service: BannerService,
        file_manager: FileManagerInterface,
    ) -> BannerSchema:
        payload = await read_payload(request)
        await banner_service.get_model()
        banner = check_saved(await banner_service.save(payload))
        return to_schema(banner, file_manager)

    @post("/{banner_id:uuid}", status_code=HTTP_200_OK)
    async def update_banner(
        self,
        banner_id: uuid.UUID,
        request: Request,
        banner_service: BannerService,
        file_manager: FileManagerInterface,
    ) -> BannerSchema:
        payload = await read_payload(request)
        await banner_service.get_model(banner_id)
        banner = check_saved(await banner_service.save(payload))
        return to_schema(banner, file_manager)

    @delete("/{banner_id:uuid}")
    async def delete_banner(
        self, banner_id: uuid.UUID, banner_service: BannerService
    ) -> None:
        result = await banner_service.delete(banner_id)
        if not result:
            raise InternalServerException(f"Cannot delete banner {banner_id}")
