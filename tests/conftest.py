"""Pytest configuration and shared fixtures for the aql-paginate tests."""

import logging
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from aql_paginate.aql import AQLQuery
from aql_paginate.config import Settings, get_settings
from aql_paginate.errors import register_exception_handlers
from aql_paginate.pagination import Pagination, paginate


logging.getLogger("aql_paginate").setLevel(logging.DEBUG)


@pytest.fixture
def test_settings() -> Settings:
    """Settings with the stock defaults and a small page size ceiling."""
    return Settings(
        default_page=1,
        default_page_size=30,
        max_page_size=100,
        log_level="ERROR"
    )


class RecordingQuery:
    """Immutable query stand-in that remembers the clauses applied to it."""

    def __init__(self, calls=()):
        self.calls = tuple(calls)

    def sort(self, path, direction=None):
        return RecordingQuery(self.calls + (("sort", path, direction),))

    def limit(self, offset, count):
        return RecordingQuery(self.calls + (("limit", offset, count),))


@pytest.fixture
def recording_query() -> RecordingQuery:
    return RecordingQuery()


@pytest.fixture
def mock_query() -> Mock:
    """Fluent mock whose sort and limit return the same mock."""
    query = Mock(spec=["sort", "limit"])
    query.sort.return_value = query
    query.limit.return_value = query
    return query


@pytest.fixture
def users_query() -> AQLQuery:
    return AQLQuery.for_("doc", "users")


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Small app exposing a paginated route that echoes the rendered AQL."""
    app = FastAPI()
    register_exception_handlers(app)
    app.dependency_overrides[get_settings] = lambda: test_settings

    @app.get("/users")
    async def list_users(params: Pagination) -> dict:
        query = paginate(
            AQLQuery.for_("doc", "users"), "doc", params,
            allowed_fields={"name", "date", "age"},
            settings=test_settings
        )
        return {"aql": query.return_("doc").to_aql()}

    return app


@pytest.fixture
def test_client(app: FastAPI) -> TestClient:
    return TestClient(app)
