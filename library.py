import logging
import threading
from typing import List, Optional, Dict, Any

from book import Book, BookStatus
from member import Member

logger = logging.getLogger(__name__)

DEMO_MEMBERS = [
    (1, "Alice"),
    (2, "Bob"),
]

DEMO_BOOKS = [
    (101, "The Go Programming Language", "Alan A. A. Donovan"),
    (102, "Clean Code", "Robert C. Martin"),
    (103, "Introduction to Algorithms", "Cormen et al."),
]


class Library:
    """Manages the book and member collections behind a single lock.

    Every public method holds ``self._lock`` for its whole body, so callers on
    different threads observe operations one at a time. Objects handed out are
    copies; mutate the library only through its methods.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.books: Dict[int, Book] = {}
        self.members: Dict[int, Member] = {}

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Book) -> None:
        """Insert or replace a book by ID. An unset status becomes Available."""
        stored = book.copy()
        if stored.status is None:
            stored.status = BookStatus.AVAILABLE
        with self._lock:
            replaced = stored.id in self.books
            self.books[stored.id] = stored
        logger.info("Book %s %s: %s", stored.id, "replaced" if replaced else "added", stored.title)

    def remove_book(self, book_id: int) -> None:
        with self._lock:
            book = self.books.get(book_id)
            if book is None:
                logger.warning("Remove rejected: book %s not found", book_id)
                raise BookNotFoundError(book_id)
            if book.is_borrowed:
                logger.warning("Remove rejected: book %s is borrowed", book_id)
                raise BookBorrowedError(book_id)
            del self.books[book_id]
        logger.info("Book %s removed", book_id)

    def borrow_book(self, book_id: int, member_id: int) -> None:
        with self._lock:
            book = self.books.get(book_id)
            if book is None:
                logger.warning("Borrow rejected: book %s not found", book_id)
                raise BookNotFoundError(book_id)
            if book.is_borrowed:
                logger.warning("Borrow rejected: book %s already borrowed", book_id)
                raise BookUnavailableError(book_id)
            member = self.members.get(member_id)
            if member is None:
                logger.warning("Borrow rejected: member %s not found", member_id)
                raise MemberNotFoundError(member_id)

            book.status = BookStatus.BORROWED
            member.borrowed_books.append(book.copy())
        logger.info("Book %s borrowed by member %s", book_id, member_id)

    def return_book(self, book_id: int, member_id: int) -> None:
        with self._lock:
            book = self.books.get(book_id)
            if book is None:
                logger.warning("Return rejected: book %s not found", book_id)
                raise BookNotFoundError(book_id)
            member = self.members.get(member_id)
            if member is None:
                logger.warning("Return rejected: member %s not found", member_id)
                raise MemberNotFoundError(member_id)

            idx = member.find_borrowed_index(book_id)
            if idx == -1:
                logger.warning("Return rejected: member %s did not borrow book %s", member_id, book_id)
                raise BookNotBorrowedError(book_id, member_id)

            del member.borrowed_books[idx]
            book.status = BookStatus.AVAILABLE
        logger.info("Book %s returned by member %s", book_id, member_id)

    def list_available_books(self) -> List[Book]:
        with self._lock:
            return [b.copy() for b in self.books.values() if b.is_available]

    def list_borrowed_books(self, member_id: int) -> List[Book]:
        with self._lock:
            member = self.members.get(member_id)
            if member is None:
                raise MemberNotFoundError(member_id)
            return [b.copy() for b in member.borrowed_books]

    # ------------------------- Members ------------------------- #
    def add_member(self, member: Member) -> None:
        """Insert or replace a member by ID."""
        stored = member.copy()
        with self._lock:
            self.members[stored.id] = stored
        logger.info("Member %s registered: %s", stored.id, stored.name)

    def member_exists(self, member_id: int) -> bool:
        with self._lock:
            return member_id in self.members

    def list_members(self) -> List[Member]:
        with self._lock:
            return [m.copy() for m in self.members.values()]

    # ------------------------- Lookups ------------------------- #
    def find_book(self, book_id: int) -> Optional[Book]:
        with self._lock:
            book = self.books.get(book_id)
            return book.copy() if book else None

    def find_member(self, member_id: int) -> Optional[Member]:
        with self._lock:
            member = self.members.get(member_id)
            return member.copy() if member else None

    def get_statistics(self) -> Dict[str, Any]:
        """Get library statistics."""
        with self._lock:
            borrowed = sum(1 for b in self.books.values() if b.is_borrowed)
            return {
                "total_books": len(self.books),
                "available_books": len(self.books) - borrowed,
                "borrowed_books": borrowed,
                "total_members": len(self.members),
            }

    # ------------------------- Utilities ------------------------- #
    def seed_demo_data(self) -> None:
        """Register the demo members and books used by the console."""
        for member_id, name in DEMO_MEMBERS:
            self.add_member(Member(id=member_id, name=name))
        for book_id, title, author in DEMO_BOOKS:
            self.add_book(Book(id=book_id, title=title, author=author))
        logger.debug("Seeded %d members and %d books", len(DEMO_MEMBERS), len(DEMO_BOOKS))


class LibraryError(Exception):
    """Base class for rejected library operations."""


class NotFoundError(LibraryError, LookupError):
    pass


class ConflictError(LibraryError, ValueError):
    pass


class BookNotFoundError(NotFoundError):
    def __init__(self, book_id: int) -> None:
        self.book_id = book_id
        super().__init__(f"book with id {book_id} not found")


class MemberNotFoundError(NotFoundError):
    def __init__(self, member_id: int) -> None:
        self.member_id = member_id
        super().__init__(f"member with id {member_id} not found")


class BookNotBorrowedError(NotFoundError):
    def __init__(self, book_id: int, member_id: int) -> None:
        self.book_id = book_id
        self.member_id = member_id
        super().__init__(f"member {member_id} did not borrow book {book_id}")


class BookUnavailableError(ConflictError):
    def __init__(self, book_id: int) -> None:
        self.book_id = book_id
        super().__init__(f"book {book_id} is already borrowed")


class BookBorrowedError(ConflictError):
    def __init__(self, book_id: int) -> None:
        self.book_id = book_id
        super().__init__(f"cannot remove book {book_id} while it is borrowed")
