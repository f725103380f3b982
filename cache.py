import json
import logging
from typing import Any

from fastapi import Request
from redis import asyncio as aioredis
from redis.exceptions import RedisError

from config import settings

Redis = aioredis.Redis
from_url = aioredis.from_url

logger = logging.getLogger(__name__)

_redis: Redis | None = None
DEFAULT_TTL = settings.cache_ttl
AUTHORS_LIST_KEY = "authors:list"
BOOKS_LIST_KEY = "books:list"


async def init_redis() -> Redis:
    """Create a single async Redis client for the process."""
    global _redis
    if _redis is None:
        _redis = from_url(
            settings.redis_url,
            decode_responses=True,
        )
    return _redis


async def close_redis():
    global _redis
    if _redis is not None:
        await _redis.aclose()
        _redis = None


async def get_redis(request: Request) -> Redis | None:
    """FastAPI dependency: return app-scoped Redis client, None when disabled."""
    if not settings.cache_enabled:
        return None
    redis_client = getattr(request.app.state, "redis", None)
    if redis_client is None:
        redis_client = await init_redis()
        request.app.state.redis = redis_client
    return redis_client


def make_book_key(book_id: str) -> str:
    return f"book:{book_id}"


async def cache_list(
    key: str, data: Any, r: Redis | None = None, ttl: int = DEFAULT_TTL
):
    if r is None:
        return
    try:
        await r.set(key, json.dumps(data), ex=ttl)
    except RedisError:
        logger.warning("Cache write failed for %s", key, exc_info=True)


async def get_list(key: str, r: Redis | None = None) -> Any | None:
    if r is None:
        return None
    try:
        raw = await r.get(key)
    except RedisError:
        logger.warning("Cache read failed for %s", key, exc_info=True)
        return None
    return json.loads(raw) if raw else None


async def cache_book(
    book_id: str, book_data: dict, r: Redis | None = None, ttl: int = DEFAULT_TTL
):
    await cache_list(make_book_key(book_id), book_data, r=r, ttl=ttl)


async def get_book(book_id: str, r: Redis | None = None) -> dict | None:
    return await get_list(make_book_key(book_id), r=r)
