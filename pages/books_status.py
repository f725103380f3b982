import logging

from helpers import populated_field
from responses import ResponseSink
from store import DocumentStore

logger = logging.getLogger(__name__)

AVAILABLE = "Available"


async def show_all_books_status(
    res: ResponseSink, book_instance_store: DocumentStore
) -> None:
    """Send every available copy as '<book title> : <status>'."""
    try:
        instances = await (
            book_instance_store.find({"status": AVAILABLE})
            .with_populate("book")
            .resolve()
        )
    except Exception:
        logger.exception("Error fetching available book instances")
        res.status(500).send("Error fetching available book instances")
        return

    res.send(
        [
            f"{populated_field(instance.get('book'), 'title')} : {instance.get('status')}"
            for instance in instances
        ]
    )
