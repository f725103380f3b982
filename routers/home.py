import logging
from fastapi import APIRouter, Depends, HTTPException
from dependencies import (
    get_author_store,
    get_book_instance_store,
    get_book_store,
    get_genre_store,
)
from pages.home import get_home_counts
from schemas.home import HomeCounts
from store import DocumentStore, StoreError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["home"])


@router.get("/home", response_model=HomeCounts)
async def get_home_router(
    book_store: DocumentStore = Depends(get_book_store),
    book_instance_store: DocumentStore = Depends(get_book_instance_store),
    author_store: DocumentStore = Depends(get_author_store),
    genre_store: DocumentStore = Depends(get_genre_store),
):
    try:
        return await get_home_counts(
            book_store=book_store,
            book_instance_store=book_instance_store,
            author_store=author_store,
            genre_store=genre_store,
        )
    except StoreError:
        logger.exception("Error fetching catalog counts")
        raise HTTPException(status_code=500, detail="Error fetching catalog counts")
