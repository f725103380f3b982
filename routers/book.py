from typing import List
from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from dependencies import get_book_instance_store, get_book_store
from pages.book_details import show_book_dtls
from pages.books import get_book_list
from responses import ResponseWriter
from schemas.book import BookDetailRead, BookListItem
from store import DocumentStore
from cache import (
    BOOKS_LIST_KEY,
    Redis,
    cache_book,
    cache_list,
    get_book,
    get_list,
    get_redis,
)

router = APIRouter(prefix="/books", tags=["books"])


@router.get("/", response_model=List[BookListItem])
async def get_books_router(
    book_store: DocumentStore = Depends(get_book_store),
    r: Redis | None = Depends(get_redis),
):
    cached = await get_list(BOOKS_LIST_KEY, r)
    if cached is not None:
        return cached
    books = await get_book_list(book_store)
    if books:
        await cache_list(BOOKS_LIST_KEY, books, r)
    return books


@router.get(
    "/{book_id}",
    response_model=BookDetailRead,
    responses={
        404: {"description": "Book or its copies not found"},
        500: {"description": "Error fetching book"},
    },
)
async def get_book_router(
    book_id: str,
    book_store: DocumentStore = Depends(get_book_store),
    book_instance_store: DocumentStore = Depends(get_book_instance_store),
    r: Redis | None = Depends(get_redis),
):
    cached = await get_book(book_id, r)
    if cached is not None:
        return cached
    res = ResponseWriter()
    await show_book_dtls(
        res,
        book_id,
        book_store=book_store,
        book_instance_store=book_instance_store,
    )
    if res.status_code == 200 and isinstance(res.body, dict):
        await cache_book(book_id, jsonable_encoder(res.body), r)
    return res.to_response()
