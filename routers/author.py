from typing import List
from fastapi import APIRouter, Depends
from dependencies import get_author_store
from pages.authors import get_author_list
from store import DocumentStore
from cache import AUTHORS_LIST_KEY, Redis, cache_list, get_list, get_redis

router = APIRouter(prefix="/authors", tags=["authors"])


@router.get("/", response_model=List[str])
async def get_authors_router(
    author_store: DocumentStore = Depends(get_author_store),
    r: Redis | None = Depends(get_redis),
):
    cached = await get_list(AUTHORS_LIST_KEY, r)
    if cached is not None:
        return cached
    authors = await get_author_list(author_store)
    # an empty list may be a swallowed store error, never cache it
    if authors:
        await cache_list(AUTHORS_LIST_KEY, authors, r)
    return authors
