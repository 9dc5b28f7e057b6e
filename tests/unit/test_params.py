"""Tests for the pagination parameter model."""

import pytest
from pydantic import ValidationError

from aql_paginate.config import Settings
from aql_paginate.pagination import PaginationParams


class TestPaginationParams:
    """Test PaginationParams defaults and precedence."""

    def test_empty(self):
        params = PaginationParams()

        assert params.sort is None
        assert params.page is None
        assert params.limit is None
        assert params.per_page is None

    def test_resolved_defaults(self):
        params = PaginationParams()

        assert params.resolve_page(Settings()) == 1
        assert params.resolve_page_size(Settings()) == 30

    def test_resolved_defaults_from_settings(self):
        settings = Settings(default_page=3, default_page_size=12)
        params = PaginationParams()

        assert params.resolve_page(settings) == 3
        assert params.resolve_page_size(settings) == 12

    def test_limit_wins_over_per_page(self):
        params = PaginationParams(limit=10, per_page=50)

        assert params.resolve_page_size(Settings()) == 10

    def test_per_page_used_without_limit(self):
        params = PaginationParams(per_page=50)

        assert params.resolve_page_size(Settings()) == 50

    def test_explicit_zero_kept(self):
        params = PaginationParams(page=0, limit=0)

        assert params.resolve_page(Settings()) == 0
        assert params.resolve_page_size(Settings()) == 0

    def test_frozen(self):
        params = PaginationParams(page=2)

        with pytest.raises(ValidationError):
            params.page = 3


class TestFromParams:
    """Test coercion of raw request parameters."""

    def test_none(self):
        assert PaginationParams.from_params(None) == PaginationParams()

    def test_model_returned_as_is(self):
        params = PaginationParams(sort="a")

        assert PaginationParams.from_params(params) is params

    def test_mapping(self):
        params = PaginationParams.from_params({"sort": "a desc", "page": "2", "per_page": 5})

        assert params.sort == "a desc"
        assert params.page == 2
        assert params.per_page == 5

    def test_extra_keys_ignored(self):
        params = PaginationParams.from_params({"q": "search", "limit": 7})

        assert params.limit == 7
        assert not hasattr(params, "q")

    def test_invalid_number(self):
        with pytest.raises(ValidationError):
            PaginationParams.from_params({"limit": "many"})
