from litestar.params import Parameter
from advanced_alchemy.filters import LimitOffset

MAX_PAGE_SIZE = 100


# Pagination dependency
async def provide_pagination_params(
    page: int = Parameter(ge=1, default=1, query="page"),
    page_size: int = Parameter(
        ge=1,
        le=MAX_PAGE_SIZE,
        default=20,
        query="pageSize",
        description=f"Number of banners per page (max {MAX_PAGE_SIZE})",
    ),
) -> LimitOffset:
    """Translate page/pageSize query parameters into a LimitOffset filter"""
    return LimitOffset(page_size, (page - 1) * page_size)
