import logging

import pytest
from fastapi.testclient import TestClient

from bookserver.auth.store import CredentialStore
from bookserver.catalog.store import BookStore
from bookserver.config import Settings
from bookserver.main import create_app

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"
TEST_AUDIENCE = "bookserver-test"


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Configure logging for tests."""
    logging.basicConfig(level=logging.INFO)


@pytest.fixture
def settings():
    return Settings(jwt_secret=TEST_SECRET, jwt_audience=TEST_AUDIENCE)


@pytest.fixture
def credential_store():
    return CredentialStore()


@pytest.fixture
def book_store():
    return BookStore()


@pytest.fixture
def app(settings, credential_store, book_store):
    return create_app(settings, credential_store=credential_store, book_store=book_store)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def guarded_client(settings, credential_store, book_store):
    guarded = settings.model_copy(update={"require_session": True})
    app = create_app(guarded, credential_store=credential_store, book_store=book_store)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def dune():
    return {
        "name": "Dune",
        "isbn": "ISBN-9",
        "authors": [{"name": "Herbert"}],
    }
