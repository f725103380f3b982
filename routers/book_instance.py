from typing import List
from fastapi import APIRouter, Depends
from dependencies import get_book_instance_store
from pages.books_status import show_all_books_status
from responses import ResponseWriter
from store import DocumentStore

router = APIRouter(prefix="/book-instances", tags=["book instances"])


@router.get(
    "/available",
    response_model=List[str],
    responses={500: {"description": "Error fetching available book instances"}},
)
async def get_available_instances_router(
    book_instance_store: DocumentStore = Depends(get_book_instance_store),
):
    res = ResponseWriter()
    await show_all_books_status(res, book_instance_store)
    return res.to_response()
