from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_async_db
from models import Author, Book, BookInstance, Genre
from store import DocumentStore


def get_author_store(db: AsyncSession = Depends(get_async_db)) -> DocumentStore:
    return DocumentStore(db, Author)


def get_book_store(db: AsyncSession = Depends(get_async_db)) -> DocumentStore:
    return DocumentStore(db, Book)


def get_book_instance_store(
    db: AsyncSession = Depends(get_async_db),
) -> DocumentStore:
    return DocumentStore(db, BookInstance)


def get_genre_store(db: AsyncSession = Depends(get_async_db)) -> DocumentStore:
    return DocumentStore(db, Genre)
