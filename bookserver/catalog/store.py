"""
In-memory book store for the catalogue API.

Books are kept in a dict keyed by ISBN. All access goes through a
single ``threading.RLock`` so that each existence check and the
mutation that depends on it happen in one critical section. FastAPI
runs sync routes on a threadpool, so concurrent requests do reach this
object in parallel.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Optional

from ..errors import AlreadyExists, InvalidInput, NotFound
from .schemas import Book

logger = logging.getLogger(__name__)


def _validate(book: Book) -> None:
    if not book.name or not book.isbn or not book.authors:
        raise InvalidInput("Invalid Data Entry: name, isbn and authors are required")


class BookStore:
    """Thread-safe mapping of ISBN to ``Book``."""

    def __init__(self, books: Optional[Dict[str, Book]] = None):
        self._books: Dict[str, Book] = {}
        self._lock = threading.RLock()
        for book in (books or {}).values():
            self.add(book)

    def get_all(self) -> Dict[str, Book]:
        """Return a snapshot of the collection.

        The returned dict and its books are copies, so callers may
        iterate or serialise it while other requests mutate the store.
        """
        with self._lock:
            return {isbn: book.model_copy(deep=True) for isbn, book in self._books.items()}

    def get(self, isbn: str) -> Book:
        with self._lock:
            book = self._books.get(isbn)
            if book is None:
                raise NotFound("Book does not exist")
            return book.model_copy(deep=True)

    def add(self, book: Book) -> Book:
        _validate(book)
        with self._lock:
            if book.isbn in self._books:
                raise AlreadyExists("Book already exists")
            self._books[book.isbn] = book.model_copy(deep=True)
        logger.debug("Added book isbn=%s", book.isbn)
        return book

    def update(self, isbn: str, book: Book) -> Book:
        """Replace the record stored under ``isbn`` as a whole.

        The ISBN key never changes: a body without an ISBN takes the
        addressed one, and a body naming a different ISBN is rejected.
        """
        if not isbn:
            raise InvalidInput("Invalid ISBN")
        if book.isbn and book.isbn != isbn:
            raise InvalidInput("ISBN in body does not match the addressed book")
        book = book.model_copy(update={"isbn": isbn}, deep=True)
        _validate(book)
        with self._lock:
            if isbn not in self._books:
                raise NotFound("Book does not exist")
            self._books[isbn] = book
        logger.debug("Updated book isbn=%s", isbn)
        return book.model_copy(deep=True)

    def delete(self, isbn: str) -> None:
        if not isbn:
            raise InvalidInput("Invalid ISBN")
        with self._lock:
            if isbn not in self._books:
                raise NotFound("Book does not exist")
            del self._books[isbn]
        logger.debug("Deleted book isbn=%s", isbn)

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def __contains__(self, isbn: object) -> bool:
        with self._lock:
            return isbn in self._books
