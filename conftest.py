import pytest
from fastapi.testclient import TestClient

from address_book import AddressBook
from main import create_app


@pytest.fixture
def book():
    address_book = AddressBook()
    yield address_book
    address_book.clear()


@pytest.fixture
def client(book):
    return TestClient(create_app(book))
