from unittest.mock import AsyncMock, MagicMock

import pytest


def make_query(result=None, error: Exception | None = None) -> MagicMock:
    """Chainable query double: every with_* returns itself, resolve() is awaited."""
    query = MagicMock(name="query")
    query.with_sort.return_value = query
    query.with_populate.return_value = query
    query.with_projection.return_value = query
    if error is not None:
        query.resolve = AsyncMock(side_effect=error)
    else:
        query.resolve = AsyncMock(return_value=result)
    return query


def make_store(find=None, find_one=None) -> MagicMock:
    store = MagicMock(name="store")
    if find is not None:
        store.find.return_value = find
    if find_one is not None:
        store.find_one.return_value = find_one
    return store


@pytest.fixture
def res():
    sink = MagicMock(name="res")
    sink.status.return_value = sink
    return sink


@pytest.fixture(name="make_query")
def make_query_fixture():
    return make_query


@pytest.fixture(name="make_store")
def make_store_fixture():
    return make_store
