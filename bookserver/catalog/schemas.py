"""
Pydantic schema definitions for the catalog module.

A ``Book`` is keyed by its ISBN and embeds its authors by value; an
``Author`` has no identity of its own. Older clients send the
publisher as ``pub``; both spellings are accepted on input and
``publisher`` is always used on output.
"""

from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Author(BaseModel):
    """An author as embedded in a book record."""

    name: str
    home: str = ""


class Book(BaseModel):
    """A single book entry.

    Only ``name``, ``isbn`` and a non-empty ``authors`` list are required
    by the store; the schema itself accepts empty values so that the
    store can report them as ``InvalidInput`` with a readable message.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    authors: List[Author] = Field(default_factory=list)
    isbn: str = ""
    genre: str = ""
    publisher: str = Field(
        default="",
        validation_alias=AliasChoices("publisher", "pub"),
    )
