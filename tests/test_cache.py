import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

import cache
from cache import cache_book, cache_list, get_book, get_list, get_redis, make_book_key


@pytest.mark.asyncio
async def test_helpers_are_no_ops_without_a_client():
    await cache_list("authors:list", ["x"], None)
    assert await get_list("authors:list", None) is None
    assert await get_book("abc", None) is None


@pytest.mark.asyncio
async def test_book_round_trip_through_client():
    r = AsyncMock()
    payload = {"title": "Death Wave", "author": "Bova, Ben", "copies": []}

    await cache_book("abc", payload, r, ttl=60)

    r.set.assert_awaited_once_with(make_book_key("abc"), json.dumps(payload), ex=60)

    r.get.return_value = json.dumps(payload)
    assert await get_book("abc", r) == payload
    r.get.assert_awaited_with("book:abc")


@pytest.mark.asyncio
async def test_redis_errors_are_treated_as_a_miss():
    r = AsyncMock()
    r.get.side_effect = RedisConnectionError("down")
    r.set.side_effect = RedisConnectionError("down")

    await cache_list("books:list", [{"title": "x"}], r)
    assert await get_list("books:list", r) is None


@pytest.mark.asyncio
async def test_get_redis_is_none_when_caching_disabled(monkeypatch):
    monkeypatch.setattr(cache.settings, "cache_enabled", False)
    request = MagicMock()
    request.app.state.redis = AsyncMock()

    assert await get_redis(request) is None


@pytest.mark.asyncio
async def test_get_redis_reuses_app_client(monkeypatch):
    monkeypatch.setattr(cache.settings, "cache_enabled", True)
    client = AsyncMock()
    request = MagicMock()
    request.app.state.redis = client

    assert await get_redis(request) is client
