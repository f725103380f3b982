import logging

from helpers import populated_field
from store import DocumentStore

logger = logging.getLogger(__name__)


async def get_book_list(book_store: DocumentStore) -> list[dict]:
    try:
        books = await (
            book_store.find({})
            .with_projection("title author")
            .with_sort([("title", "ascending")])
            .with_populate("author")
            .resolve()
        )
        return [
            {
                "title": book.get("title"),
                "author": populated_field(book.get("author"), "name"),
            }
            for book in books
        ]
    except Exception:
        logger.exception("Error fetching book list")
        return []
