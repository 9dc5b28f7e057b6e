"""FastAPI dependency reading pagination parameters from the query string."""

from typing import Annotated, Optional

from fastapi import Depends, Query

from ..config import Settings, get_settings
from ..errors.problem_details import UnprocessableEntityError
from .params import PaginationParams


def pagination_params(
    settings: Annotated[Settings, Depends(get_settings)],
    sort: Annotated[Optional[str], Query(description="Comma delimited fields to sort by. Use ' desc' after a field name for descending")] = None,
    page: Annotated[Optional[int], Query(ge=1, description="Page to display")] = None,
    limit: Annotated[Optional[int], Query(ge=1, description="Number of records per page")] = None,
    per_page: Annotated[Optional[int], Query(ge=1, description="Alias of limit")] = None
) -> PaginationParams:
    """Collect sort and page parameters for a route.

    Usage:
        @router.get("/users")
        async def list_users(params: Pagination):
            query = paginate(AQLQuery.for_("doc", "users"), "doc", params)
    """
    for name, value in (("limit", limit), ("per_page", per_page)):
        if value is not None and value > settings.max_page_size:
            raise UnprocessableEntityError(
                f"{name} must be at most {settings.max_page_size}",
                field=name
            )

    return PaginationParams(sort=sort, page=page, limit=limit, per_page=per_page)


Pagination = Annotated[PaginationParams, Depends(pagination_params)]
