import pytest

from pages.book_details import show_book_dtls

MOCK_BOOK = {"title": "Mock Book Title", "author": {"name": "Mock Author"}}
MOCK_COPIES = [
    {"imprint": "First Edition", "status": "Available"},
    {"imprint": "Second Edition", "status": "Checked Out"},
]


@pytest.fixture
def book_query(make_query):
    return make_query(MOCK_BOOK)


@pytest.fixture
def book_store(make_store, book_query):
    return make_store(find_one=book_query)


@pytest.mark.asyncio
async def test_sends_book_details_when_book_and_copies_exist(
    res, make_query, make_store, book_store, book_query
):
    copies_query = make_query(MOCK_COPIES)
    instance_store = make_store(find=copies_query)

    await show_book_dtls(
        res, "12345", book_store=book_store, book_instance_store=instance_store
    )

    book_store.find_one.assert_called_once_with({"_id": "12345"})
    book_query.with_populate.assert_called_once_with("author")
    instance_store.find.assert_called_once_with({"book": "12345"})
    copies_query.with_projection.assert_called_once_with("imprint status")
    res.status.assert_not_called()
    res.send.assert_called_once_with(
        {"title": "Mock Book Title", "author": "Mock Author", "copies": MOCK_COPIES}
    )


@pytest.mark.asyncio
async def test_empty_copy_list_is_still_a_success(
    res, make_query, make_store, book_store
):
    instance_store = make_store(find=make_query([]))

    await show_book_dtls(
        res, "12345", book_store=book_store, book_instance_store=instance_store
    )

    res.status.assert_not_called()
    res.send.assert_called_once_with(
        {"title": "Mock Book Title", "author": "Mock Author", "copies": []}
    )


@pytest.mark.asyncio
async def test_404_when_book_not_found(res, make_query, make_store):
    book_store = make_store(find_one=make_query(None))
    instance_store = make_store()

    await show_book_dtls(
        res, "12345", book_store=book_store, book_instance_store=instance_store
    )

    res.status.assert_called_once_with(404)
    res.send.assert_called_once_with("Book 12345 not found")
    instance_store.find.assert_not_called()


@pytest.mark.asyncio
async def test_404_when_copies_missing(res, make_query, make_store, book_store):
    instance_store = make_store(find=make_query(None))

    await show_book_dtls(
        res, "12345", book_store=book_store, book_instance_store=instance_store
    )

    res.status.assert_called_once_with(404)
    res.send.assert_called_once_with("Book details not found for book 12345")


@pytest.mark.asyncio
async def test_500_when_book_query_raises(res, make_store):
    book_store = make_store()
    book_store.find_one.side_effect = RuntimeError("Database error")

    await show_book_dtls(
        res, "12345", book_store=book_store, book_instance_store=make_store()
    )

    res.status.assert_called_once_with(500)
    res.send.assert_called_once_with("Error fetching book 12345")


@pytest.mark.asyncio
async def test_500_when_copies_query_raises(res, make_store, book_store):
    instance_store = make_store()
    instance_store.find.side_effect = RuntimeError("Database error")

    await show_book_dtls(
        res, "12345", book_store=book_store, book_instance_store=instance_store
    )

    res.status.assert_called_once_with(500)
    res.send.assert_called_once_with("Error fetching book 12345")


@pytest.mark.asyncio
async def test_500_when_copies_resolve_raises(
    res, make_query, make_store, book_store
):
    instance_store = make_store(find=make_query(error=RuntimeError("Database error")))

    await show_book_dtls(
        res, "12345", book_store=book_store, book_instance_store=instance_store
    )

    res.status.assert_called_once_with(500)
    res.send.assert_called_once_with("Error fetching book 12345")


@pytest.mark.asyncio
async def test_non_string_id_is_a_no_op(res, make_store):
    book_store = make_store()

    result = await show_book_dtls(
        res, 12345, book_store=book_store, book_instance_store=make_store()
    )

    assert result is None
    book_store.find_one.assert_not_called()
    res.status.assert_not_called()
    res.send.assert_not_called()
