from enum import Enum
from typing import TYPE_CHECKING
from advanced_alchemy.filters import LimitOffset, OrderBy
from litestar.pagination import OffsetPagination
from database.models.banner import Banner

if TYPE_CHECKING:
    from domains.banner.service import BannerRepository


class BannerOrder(str, Enum):
    ID = "id"
    NAME = "name"
    POSITION = "position"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


class BannerDataProvider:
    """Paginated, sortable listing of every banner with its translations."""

    def __init__(
        self,
        repository: "BannerRepository",
        order_by: BannerOrder = BannerOrder.POSITION,
        order_direction: str = "asc",
    ):
        if order_direction.lower() not in {"asc", "desc"}:
            raise ValueError("order_direction must be either 'asc' or 'desc'")
        self.repository = repository
        self.order_by = BannerOrder(order_by)
        self.order_direction = order_direction.lower()

    def _order(self) -> list[OrderBy]:
        order = [OrderBy(field_name=self.order_by.value, sort_order=self.order_direction)]
        if self.order_by != BannerOrder.ID:
            # keeps pages stable when the sort column has ties
            order.append(OrderBy(field_name="id", sort_order="asc"))
        return order

    async def get_models(self, pagination: LimitOffset) -> list[Banner]:
        return list(await self.repository.list(pagination, *self._order()))

    async def get_total_count(self) -> int:
        return await self.repository.count()

    async def paginate(self, pagination: LimitOffset) -> OffsetPagination[Banner]:
        items, total = await self.repository.list_and_count(
            pagination, *self._order()
        )
        return OffsetPagination(
            items=list(items),
            total=total,
            limit=pagination.limit,
            offset=pagination.offset,
        )
