import logging
from collections.abc import Mapping

from helpers import author_display_name, year_of
from store import DocumentStore

logger = logging.getLogger(__name__)


def format_author(author: Mapping) -> str:
    birth = year_of(author.get("date_of_birth"))
    death = year_of(author.get("date_of_death"))
    return f"{author_display_name(author)} : {birth} - {death}"


async def get_author_list(author_store: DocumentStore) -> list[str]:
    """Every author as 'Family, First : birth - death', sorted by family name.

    Store failures are logged and give an empty list.
    """
    try:
        authors = await (
            author_store.find({})
            .with_sort([("family_name", "ascending")])
            .resolve()
        )
        return [format_author(author) for author in authors]
    except Exception:
        logger.exception("Error fetching author list")
        return []
