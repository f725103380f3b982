"""
Seed the catalog database with a small sample library.

Usage:
    python scripts/seed.py [--reset]

Creates the tables if needed. With --reset all tables are dropped first.
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config import configure_logging  # noqa: E402
from database import Base, SessionLocal, sync_engine  # noqa: E402
from models import Author, Book, BookInstance, Genre  # noqa: E402

logger = logging.getLogger("seed")

AUTHORS = [
    ("Patrick", "Rothfuss", date(1973, 6, 6), None),
    ("Ben", "Bova", date(1932, 11, 8), None),
    ("Isaac", "Asimov", date(1920, 1, 2), date(1992, 4, 6)),
    ("Bob", "Billings", None, None),
    ("Jim", "Jones", date(1971, 12, 16), None),
]

GENRES = ["Fantasy", "Science Fiction", "French Poetry"]

# title, summary, isbn, author index, genre indexes
BOOKS = [
    ("The Name of the Wind (The Kingkiller Chronicle, #1)",
     "I have stolen princesses back from sleeping barrow kings.",
     "9781473211896", 0, [0]),
    ("The Wise Man's Fear (The Kingkiller Chronicle, #2)",
     "Picking up the tale of Kvothe Kingkiller once again.",
     "9788401352836", 0, [0]),
    ("The Slow Regard of Silent Things (Kingkiller Chronicle)",
     "Deep below the University, there is a dark place.",
     "9780756411336", 0, [0]),
    ("Apes and Angels",
     "Humankind headed out to the stars not for conquest, nor exploration.",
     "9780765379528", 1, [1]),
    ("Death Wave",
     "In Ben Bova's previous novel New Earth, Jordan Kell led the first human mission.",
     "9780765379504", 1, [1]),
    ("Test Book 1", "Summary of test book 1", "ISBN111111", 4, [0, 1]),
    ("Test Book 2", "Summary of test book 2", "ISBN222222", 4, []),
]

# book index, imprint, status
INSTANCES = [
    (0, "London Gollancz, 2014.", "Available"),
    (1, "Gollancz, 2011.", "Loaned"),
    (2, "Gollancz, 2015.", "Available"),
    (3, "New York Tom Doherty Associates, 2016.", "Available"),
    (3, "New York Tom Doherty Associates, 2016.", "Available"),
    (3, "New York Tom Doherty Associates, 2016.", "Available"),
    (4, "New York, NY Tom Doherty Associates, LLC, 2015.", "Available"),
    (4, "New York, NY Tom Doherty Associates, LLC, 2015.", "Maintenance"),
    (4, "New York, NY Tom Doherty Associates, LLC, 2015.", "Loaned"),
    (0, "Imprint XXX2", "Available"),
    (1, "Imprint XXX3", "Available"),
]


def seed(reset: bool = False) -> None:
    if reset:
        logger.info("Dropping all tables")
        Base.metadata.drop_all(bind=sync_engine)
    Base.metadata.create_all(bind=sync_engine)

    with SessionLocal() as db:
        authors = [
            Author(first_name=first, family_name=family, date_of_birth=born, date_of_death=died)
            for first, family, born, died in AUTHORS
        ]
        genres = [Genre(name=name) for name in GENRES]
        books = [
            Book(
                title=title,
                summary=summary,
                isbn=isbn,
                author=authors[author_idx],
                genre=[genres[i] for i in genre_idxs],
            )
            for title, summary, isbn, author_idx, genre_idxs in BOOKS
        ]
        instances = [
            BookInstance(book=books[book_idx], imprint=imprint, status=status)
            for book_idx, imprint, status in INSTANCES
        ]
        db.add_all(authors + genres + books + instances)
        db.commit()

    logger.info(
        "Seeded %d authors, %d genres, %d books, %d copies",
        len(AUTHORS), len(GENRES), len(BOOKS), len(INSTANCES),
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the library catalog")
    parser.add_argument("--reset", action="store_true", help="Drop tables before seeding")
    args = parser.parse_args()
    configure_logging()
    seed(reset=args.reset)
