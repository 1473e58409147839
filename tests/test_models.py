import pytest

from book import Book, BookStatus
from member import Member


def test_book_strips_text_and_leaves_status_unset():
    book = Book(5, "  Dune ", " Frank Herbert  ")
    assert book.title == "Dune"
    assert book.author == "Frank Herbert"
    assert book.status is None
    assert not book.is_available and not book.is_borrowed


def test_book_status_accepts_strings():
    assert Book(1, "T", "A", status="Borrowed").status == BookStatus.BORROWED
    with pytest.raises(ValueError):
        Book(1, "T", "A", status="Lost")


def test_book_copy_is_independent():
    book = Book(1, "Dune", "Frank Herbert", status=BookStatus.AVAILABLE)
    snapshot = book.copy()
    book.status = BookStatus.BORROWED

    assert snapshot == Book(1, "Dune", "Frank Herbert", status="Available")
    assert snapshot is not book


def test_book_dict_round_trip():
    book = Book(1, "Dune", "Frank Herbert", status=BookStatus.BORROWED)
    data = book.to_dict()

    assert data == {"id": 1, "title": "Dune", "author": "Frank Herbert", "status": "Borrowed"}
    assert Book.from_dict(data) == book


def test_member_copies_borrowed_books():
    book = Book(1, "Dune", "Frank Herbert", status=BookStatus.BORROWED)
    member = Member(3, " Carol ", borrowed_books=[book])
    book.title = "Changed"

    assert member.name == "Carol"
    assert member.borrowed_books[0].title == "Dune"
    assert member.find_borrowed_index(1) == 0
    assert member.find_borrowed_index(2) == -1


def test_member_from_dict():
    member = Member.from_dict({
        "id": 3,
        "name": "Carol",
        "borrowed_books": [{"id": 1, "title": "Dune", "author": "Frank Herbert", "status": "Borrowed"}],
    })

    assert member.to_dict()["borrowed_books"][0]["title"] == "Dune"
    assert Member.from_dict({"id": 4, "name": "Dan"}).borrowed_books == []
