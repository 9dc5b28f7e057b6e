"""Request parameters driving sort and pagination."""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..config import Settings, get_settings


class PaginationParams(BaseModel):
    """Sort and page parameters as they arrive from a request.

    Both ``limit`` and ``per_page`` name the page size; ``limit`` wins when
    both are given. Missing values are filled in from :class:`Settings` by
    :meth:`resolve_page` and :meth:`resolve_page_size`.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    sort: Optional[str] = Field(default=None, description="Comma delimited fields to sort by, e.g. 'date, name desc'")
    page: Optional[int] = Field(default=None, description="Page to display")
    limit: Optional[int] = Field(default=None, description="Number of records per page")
    per_page: Optional[int] = Field(default=None, description="Alias of limit, used when limit is absent")

    @classmethod
    def from_params(
        cls, params: Union["PaginationParams", Mapping[str, Any], None]
    ) -> "PaginationParams":
        """Coerce a mapping of request parameters into a model instance."""
        if params is None:
            return cls()
        if isinstance(params, cls):
            return params
        return cls.model_validate(dict(params))

    def resolve_page(self, settings: Optional[Settings] = None) -> int:
        """Page to display.

        Args:
            settings: Source of the default page; the global settings when omitted

        Returns:
            ``page`` if given, otherwise ``settings.default_page``
        """
        if self.page is not None:
            return self.page
        return (settings or get_settings()).default_page

    def resolve_page_size(self, settings: Optional[Settings] = None) -> int:
        """Number of records per page.

        Args:
            settings: Source of the default page size; the global settings when omitted

        Returns:
            ``limit`` if given, else ``per_page``, else ``settings.default_page_size``
        """
        if self.limit is not None:
            return self.limit
        if self.per_page is not None:
            return self.per_page
        return (settings or get_settings()).default_page_size
