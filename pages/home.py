from pages.books_status import AVAILABLE
from schemas.home import HomeCounts
from store import DocumentStore


async def get_home_counts(
    *,
    book_store: DocumentStore,
    book_instance_store: DocumentStore,
    author_store: DocumentStore,
    genre_store: DocumentStore,
) -> HomeCounts:
    # StoreError propagates; the router owns the HTTP mapping
    return HomeCounts(
        book_count=await book_store.count({}),
        book_instance_count=await book_instance_store.count({}),
        book_instance_available_count=await book_instance_store.count(
            {"status": AVAILABLE}
        ),
        author_count=await author_store.count({}),
        genre_count=await genre_store.count({}),
    )
