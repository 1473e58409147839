from __future__ import annotations

from typing import List, Optional

from book import Book


class Member:
    """A library member and the snapshots of the books they currently hold."""

    def __init__(self, id: int, name: str, borrowed_books: Optional[List[Book]] = None) -> None:
        self.id = int(id)
        self.name = name.strip()
        self.borrowed_books: List[Book] = [b.copy() for b in borrowed_books or []]

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.name} (ID: {self.id})"

    def __repr__(self) -> str:
        return f"Member(id={self.id!r}, name={self.name!r}, borrowed_books={self.borrowed_books!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Member):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def copy(self) -> "Member":
        return Member(id=self.id, name=self.name, borrowed_books=self.borrowed_books)

    def find_borrowed_index(self, book_id: int) -> int:
        """Index of the first borrowed snapshot with ``book_id``, or -1."""
        for idx, book in enumerate(self.borrowed_books):
            if book.id == book_id:
                return idx
        return -1

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "borrowed_books": [b.to_dict() for b in self.borrowed_books],
        }

    @staticmethod
    def from_dict(data: dict) -> "Member":
        return Member(
            id=data["id"],
            name=data["name"],
            borrowed_books=[Book.from_dict(b) for b in data.get("borrowed_books") or []],
        )
