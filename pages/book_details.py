import logging

from helpers import populated_field
from responses import ResponseSink
from store import DocumentStore

logger = logging.getLogger(__name__)


async def show_book_dtls(
    res: ResponseSink,
    id: str,
    *,
    book_store: DocumentStore,
    book_instance_store: DocumentStore,
) -> None:
    """Send ``{title, author, copies}`` for one book, or a 404/500 message.

    A non-string id is a caller bug: nothing is queried and nothing is sent.
    """
    if not isinstance(id, str):
        return

    try:
        book = await book_store.find_one({"_id": id}).with_populate("author").resolve()
        if book is None:
            res.status(404).send(f"Book {id} not found")
            return

        copies = await (
            book_instance_store.find({"book": id})
            .with_projection("imprint status")
            .resolve()
        )
    except Exception:
        logger.exception("Error fetching book %s", id)
        res.status(500).send(f"Error fetching book {id}")
        return

    # an empty copy list is a valid answer, only a missing one is not
    if not copies and not isinstance(copies, list):
        res.status(404).send(f"Book details not found for book {id}")
        return

    res.send(
        {
            "title": book.get("title"),
            "author": populated_field(book.get("author"), "name"),
            "copies": copies,
        }
    )
