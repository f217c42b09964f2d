"""Catalog dataclasses: books and volumes as served by the catalog endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Book:
    id: int
    num_chapters: int  # 0 for single-page books with no chapter divisions
    full_name: str
    toc_name: str
    grid_name: str

    @classmethod
    def from_json(cls, data: dict) -> "Book":
        """Build a Book from a books endpoint record (camelCase keys)."""
        return cls(
            id=int(data["id"]),
            num_chapters=int(data.get("numChapters", 0)),
            full_name=data.get("fullName", ""),
            toc_name=data.get("tocName", data.get("fullName", "")),
            grid_name=data.get("gridName", data.get("tocName", "")),
        )


@dataclass(frozen=True)
class Volume:
    """A top-level grouping of books, e.g. a testament.

    ``books`` is derived once both catalogs are loaded; it holds the books
    whose ids fall in ``[min_book_id, max_book_id]``, in id order.
    """

    id: int
    min_book_id: int
    max_book_id: int
    full_name: str
    books: tuple[Book, ...] = field(default=(), compare=False)

    @classmethod
    def from_json(cls, data: dict) -> "Volume":
        return cls(
            id=int(data["id"]),
            min_book_id=int(data["minBookId"]),
            max_book_id=int(data["maxBookId"]),
            full_name=data.get("fullName", ""),
        )

    def contains(self, book_id: int) -> bool:
        return self.min_book_id <= book_id <= self.max_book_id
