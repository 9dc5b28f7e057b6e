"""Append SORT and LIMIT clauses to an AQL query expression."""

import logging
from typing import Any, Collection, List, Mapping, Optional, Protocol, Tuple, TypeVar, Union

from ..config import Settings, get_settings
from ..errors.problem_details import InvalidSortFieldError
from .params import PaginationParams

logger = logging.getLogger(__name__)

Q = TypeVar("Q", bound="SortableQuery")


class SortableQuery(Protocol):
    """A query expression that can be sorted and limited."""

    def sort(self: Q, path: str, direction: Optional[str] = None) -> Q: ...

    def limit(self: Q, offset: int, count: int) -> Q: ...


def parse_sort(sort: Optional[str]) -> List[Tuple[str, Optional[str]]]:
    """Split a sort parameter into ``(field, direction)`` pairs.

    ``"date, name desc"`` gives ``[("date", None), ("name", "desc")]``.
    Each entry is split on runs of any whitespace, so leading spaces,
    doubled spaces and tabs all act as one separator: ``"a  desc"`` and
    ``"a\\tdesc"`` both give ``("a", "desc")``. Tokens after the direction
    are ignored and an empty entry yields an empty field name. Nothing is
    validated.
    """
    if not sort:
        return []

    pairs = []
    for entry in sort.split(","):
        tokens = entry.split()
        field = tokens[0] if tokens else ""
        direction = tokens[1] if len(tokens) > 1 else None
        pairs.append((field, direction))
    return pairs


def compute_skip(page: int, page_size: int) -> int:
    """Number of records preceding ``page``."""
    return (page - 1) * page_size


def paginate(
    query: Q,
    doc: str,
    params: Union[PaginationParams, Mapping[str, Any], None] = None,
    *,
    allowed_fields: Optional[Collection[str]] = None,
    settings: Optional[Settings] = None
) -> Q:
    """Add sorting and pagination to an AQL query.

    Args:
        query: Expression exposing ``sort`` and ``limit``; it is never mutated
            here, each call's return value is threaded into the next.
        doc: AQL variable the sort fields belong to, e.g. ``"doc"``.
        params: Request parameters (``sort``, ``page``, ``limit`` or
            ``per_page``), as a mapping or :class:`PaginationParams`.
        allowed_fields: Optional allow-list of sortable field names; a
            single string names one field. When omitted, any field name is
            accepted as given.
        settings: Source of the default page and page size.

    Returns:
        The expression with ``SORT`` and ``LIMIT`` clauses appended.

    Raises:
        InvalidSortFieldError: If ``allowed_fields`` is given and a sort
            field is not in it.
        pydantic.ValidationError: If a mapping holds non-numeric page values.

    Example:
        >>> query = AQLQuery.for_("doc", "users")
        >>> params = {"sort": "date, name desc", "limit": 100, "page": 5}
        >>> paginate(query, "doc", params).return_("doc").to_aql()
        'FOR doc IN users SORT doc.date, doc.name desc LIMIT 400, 100 RETURN doc'
    """
    settings = settings or get_settings()
    params = PaginationParams.from_params(params)

    page = params.resolve_page(settings)
    page_size = params.resolve_page_size(settings)

    fields = parse_sort(params.sort)
    if allowed_fields is not None:
        # A bare string names one field, not a set of characters
        allowed = frozenset([allowed_fields] if isinstance(allowed_fields, str) else allowed_fields)
        for field, _ in fields:
            if field not in allowed:
                raise InvalidSortFieldError(field, allowed)

    for field, direction in fields:
        path = f"{doc}.{field}"
        logger.debug(f"Sorting by {path} {direction or ''}".rstrip())
        query = query.sort(path, direction)

    if page or page_size:
        skip = compute_skip(page, page_size)
        logger.debug(f"Limiting to {page_size} records from offset {skip} (page {page})")
        query = query.limit(skip, page_size)

    return query
