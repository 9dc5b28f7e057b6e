"""Sort and page clauses for AQL queries."""

from .params import PaginationParams
from .paginate import SortableQuery, parse_sort, compute_skip, paginate
from .dependencies import Pagination, pagination_params

__all__ = [
    "PaginationParams",
    "SortableQuery",
    "parse_sort",
    "compute_skip",
    "paginate",
    "Pagination",
    "pagination_params"
]
