"""
Demo data for local runs.

Enabled with ``BOOKSERVER_SEED_DEMO=true``. The users below have
well-known plaintext passwords; never enable this outside development.
"""

from __future__ import annotations

import logging

from .auth.store import CredentialStore
from .catalog.schemas import Author, Book
from .catalog.store import BookStore

logger = logging.getLogger(__name__)

DEMO_USERS = {
    "sabnaj": "1234",
    "Admin": "5678",
}


def _demo_books():
    sornaly = Author(name="Sadia Sornaly", home="Korea")
    shahana = Author(name="Shahana", home="America")
    return [
        Book(
            name="Book 1",
            authors=[sornaly, shahana],
            isbn="ISBN 1",
            genre="Thriller",
            publisher="Unknown",
        ),
        Book(
            name="Book 2",
            authors=[sornaly],
            isbn="ISBN 2",
            genre="Science Fiction",
            publisher="Tor Books",
        ),
    ]


def seed_demo_data(credentials: CredentialStore, books: BookStore) -> None:
    """Insert the demo users and books, skipping any that already exist."""
    for username, password in DEMO_USERS.items():
        if not credentials.exists(username):
            credentials.create(username, password)
    for book in _demo_books():
        if book.isbn not in books:
            books.add(book)
    logger.info("Seeded demo data: %d users, %d books", len(credentials), len(books))
