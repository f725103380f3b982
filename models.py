import uuid
from datetime import date

from sqlalchemy import CheckConstraint, Column, Date, ForeignKey, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from database import Base
from helpers import author_display_name

INSTANCE_STATUSES = ("Available", "Maintenance", "Loaned", "Reserved")


def new_id() -> str:
    return uuid.uuid4().hex


class Author(Base):
    __tablename__ = "authors"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    family_name: Mapped[str] = mapped_column(String(100), nullable=False, default="", index=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date)
    date_of_death: Mapped[date | None] = mapped_column(Date)

    books: Mapped[list["Book"]] = relationship("Book", back_populates="author")

    # document field -> column attribute
    __document_fields__ = {
        "_id": "id",
        "first_name": "first_name",
        "family_name": "family_name",
        "date_of_birth": "date_of_birth",
        "date_of_death": "date_of_death",
    }

    @property
    def name(self) -> str:
        return author_display_name(
            {"first_name": self.first_name, "family_name": self.family_name}
        )

    def to_document(self) -> dict:
        return {
            "_id": self.id,
            "first_name": self.first_name,
            "family_name": self.family_name,
            "date_of_birth": self.date_of_birth,
            "date_of_death": self.date_of_death,
            "name": self.name,
        }


book_genre_relation = Table(
    "book_genre_relation",
    Base.metadata,
    Column("book_id", ForeignKey("books.id", ondelete="CASCADE"), primary_key=True),
    Column("genre_id", ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True),
)


class Genre(Base):
    __tablename__ = "genres"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    books: Mapped[list["Book"]] = relationship(
        secondary=book_genre_relation,
        back_populates="genre",
    )

    __document_fields__ = {"_id": "id", "name": "name"}

    def to_document(self) -> dict:
        return {"_id": self.id, "name": self.name}


class Book(Base):
    __tablename__ = "books"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(), nullable=False, index=True)
    summary: Mapped[str | None] = mapped_column(Text)
    isbn: Mapped[str | None] = mapped_column(String(17), index=True)
    author_id: Mapped[str] = mapped_column(
        ForeignKey("authors.id", ondelete="CASCADE"), nullable=False, index=True
    )

    author: Mapped["Author"] = relationship("Author", back_populates="books")
    genre: Mapped[list["Genre"]] = relationship(
        secondary=book_genre_relation,
        back_populates="books",
    )
    instances: Mapped[list["BookInstance"]] = relationship(
        "BookInstance", back_populates="book", cascade="all, delete-orphan"
    )

    __document_fields__ = {
        "_id": "id",
        "title": "title",
        "summary": "summary",
        "isbn": "isbn",
        "author": "author_id",
    }

    def to_document(self) -> dict:
        return {
            "_id": self.id,
            "title": self.title,
            "summary": self.summary,
            "isbn": self.isbn,
            "author": self.author_id,
        }


class BookInstance(Base):
    __tablename__ = "book_instances"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    book_id: Mapped[str] = mapped_column(
        ForeignKey("books.id", ondelete="CASCADE"), nullable=False, index=True
    )
    imprint: Mapped[str] = mapped_column(String(), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Maintenance", index=True)
    due_back: Mapped[date | None] = mapped_column(Date)

    book: Mapped["Book"] = relationship("Book", back_populates="instances")

    __document_fields__ = {
        "_id": "id",
        "book": "book_id",
        "imprint": "imprint",
        "status": "status",
        "due_back": "due_back",
    }

    __table_args__ = (
        CheckConstraint(
            "status IN (" + ", ".join(f"'{s}'" for s in INSTANCE_STATUSES) + ")",
            name="ck_book_instances_status",
        ),
    )

    def to_document(self) -> dict:
        return {
            "_id": self.id,
            "book": self.book_id,
            "imprint": self.imprint,
            "status": self.status,
            "due_back": self.due_back,
        }
