"""
Route definitions for the catalogue API.

Endpoints:
- GET    /getBooks                         : all books, keyed by ISBN
- GET    /getBooks/X                       : one book
- POST   /newBook                          : add a book
- PUT    /updateBook?isbn=X, /updateBook/X : replace a book
- DELETE /deleteBook?isbn=X, /deleteBook/X : remove a book

Read and write routes live on separate routers so that the app factory
can put the session guard in front of the write routes only.
"""

from __future__ import annotations

from typing import Dict, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from .schemas import Book
from .store import BookStore


def get_book_store(request: Request) -> BookStore:
    return request.app.state.book_store


router = APIRouter(tags=["catalog"])
write_router = APIRouter(tags=["catalog"])


@router.get("/getBooks", response_model=Dict[str, Book])
def list_books(store: BookStore = Depends(get_book_store)) -> Dict[str, Book]:
    return store.get_all()


@router.get("/getBooks/{isbn}", response_model=Book)
def get_book(isbn: str, store: BookStore = Depends(get_book_store)) -> Book:
    return store.get(isbn)


@write_router.post("/newBook", status_code=201, response_class=PlainTextResponse)
def add_book(book: Book, store: BookStore = Depends(get_book_store)):
    store.add(book)
    return PlainTextResponse(f"Book {book.isbn} added", status_code=201)


def _update(isbn: Optional[str], book: Book, store: BookStore) -> PlainTextResponse:
    store.update((isbn or "").strip(), book)
    return PlainTextResponse("Book updated successfully")


@write_router.put("/updateBook", response_class=PlainTextResponse)
def update_book(
    book: Book,
    isbn: Optional[str] = Query(default=None),
    store: BookStore = Depends(get_book_store),
):
    return _update(isbn, book, store)


@write_router.put("/updateBook/{isbn}", response_class=PlainTextResponse)
def update_book_by_path(isbn: str, book: Book, store: BookStore = Depends(get_book_store)):
    return _update(isbn, book, store)


def _delete(isbn: Optional[str], store: BookStore) -> PlainTextResponse:
    store.delete((isbn or "").strip())
    return PlainTextResponse("Book deleted successfully")


@write_router.delete("/deleteBook", response_class=PlainTextResponse)
def delete_book(
    isbn: Optional[str] = Query(default=None),
    store: BookStore = Depends(get_book_store),
):
    return _delete(isbn, store)


@write_router.delete("/deleteBook/{isbn}", response_class=PlainTextResponse)
def delete_book_by_path(isbn: str, store: BookStore = Depends(get_book_store)):
    return _delete(isbn, store)
