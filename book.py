from __future__ import annotations

from enum import Enum


class BookStatus(str, Enum):
    """Circulation state of a book."""
    AVAILABLE = "Available"
    BORROWED = "Borrowed"


class Book:
    """Represents a single book held by the library."""

    def __init__(self, id: int, title: str, author: str, status: BookStatus | str | None = None) -> None:
        self.id = int(id)
        self.title = title.strip()
        self.author = author.strip()
        # None means "unset"; the library fills in Available on add.
        self.status = BookStatus(status) if status else None

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author} (ID: {self.id})"

    def __repr__(self) -> str:
        return f"Book(id={self.id!r}, title={self.title!r}, author={self.author!r}, status={self.status!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @property
    def is_available(self) -> bool:
        return self.status == BookStatus.AVAILABLE

    @property
    def is_borrowed(self) -> bool:
        return self.status == BookStatus.BORROWED

    def copy(self) -> "Book":
        """Return an independent snapshot of this book."""
        return Book(id=self.id, title=self.title, author=self.author, status=self.status)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "status": self.status.value if self.status else None,
        }

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return Book(
            id=data["id"],
            title=data["title"],
            author=data["author"],
            status=data.get("status"),
        )
