"""aql-paginate: sorting and pagination for AQL query builders."""

from .aql import AQLQuery
from .config import Settings, get_settings
from .pagination import (
    Pagination,
    PaginationParams,
    SortableQuery,
    compute_skip,
    pagination_params,
    paginate,
    parse_sort
)

__version__ = "1.0.0"

__all__ = [
    "AQLQuery",
    "Settings",
    "get_settings",
    "Pagination",
    "PaginationParams",
    "SortableQuery",
    "compute_skip",
    "pagination_params",
    "paginate",
    "parse_sort"
]
