"""Catalog store: the book and volume catalogs, loaded once per session.

The two catalogs are fetched concurrently and joined; volume book lists
are derived only after both arrive, whichever finishes first. Until
``load()`` completes every accessor raises ``CatalogNotLoadedError``.
"""

from __future__ import annotations

import asyncio
import bisect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import replace

from .fetch_json import fetch_json_async
from .types import Book, Volume

logger = logging.getLogger(__name__)

JsonFetcher = Callable[[str], Awaitable[object]]


class CatalogNotLoadedError(RuntimeError):
    """An accessor was called before the catalog finished loading."""


class CatalogLoadError(RuntimeError):
    """One of the catalog fetches failed; nothing was loaded."""


def _parse_books(data) -> dict[int, Book]:
    # books.php returns {"101": {...}, ...}; accept a plain list as well
    records = data.values() if isinstance(data, dict) else data
    books = [Book.from_json(r) for r in records]
    return {b.id: b for b in books}


def _parse_volumes(data) -> list[Volume]:
    volumes = [Volume.from_json(r) for r in data]
    volumes.sort(key=lambda v: v.id)
    return volumes


def derive_volume_books(
    volumes: list[Volume], books: dict[int, Book]
) -> list[Volume]:
    """Attach each volume's books by slicing its ``[min, max]`` id range."""
    derived = []
    for volume in volumes:
        volume_books = tuple(
            books[book_id]
            for book_id in range(volume.min_book_id, volume.max_book_id + 1)
            if book_id in books
        )
        derived.append(replace(volume, books=volume_books))
    return derived


class CatalogStore:
    def __init__(
        self,
        books_url: str,
        volumes_url: str,
        fetch: JsonFetcher = fetch_json_async,
    ):
        self.books_url = books_url
        self.volumes_url = volumes_url
        self._fetch = fetch
        self._books: dict[int, Book] | None = None
        self._volumes: list[Volume] | None = None
        self._book_ids: list[int] = []

    @classmethod
    def from_records(cls, books, volumes) -> "CatalogStore":
        """Build an already-loaded store from raw endpoint records."""
        store = cls("", "")
        store._commit(books, volumes)
        return store

    @property
    def loaded(self) -> bool:
        return self._books is not None and self._volumes is not None

    async def load(self) -> None:
        """Fetch both catalogs and derive volume book lists.

        Raises ``CatalogLoadError`` if either fetch fails or its data is
        malformed; the store stays unloaded in that case.
        """
        if self.loaded:
            return

        try:
            books_data, volumes_data = await asyncio.gather(
                self._fetch(self.books_url),
                self._fetch(self.volumes_url),
            )
        except Exception as exc:
            raise CatalogLoadError(f"Failed to load catalog: {exc}") from exc

        try:
            self._commit(books_data, volumes_data)
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise CatalogLoadError(f"Malformed catalog data: {exc!r}") from exc

        logger.info(
            "Catalog loaded: %d volumes, %d books",
            len(self._volumes), len(self._books),
        )

    def _commit(self, books_data, volumes_data) -> None:
        # Parse fully before assigning so a bad payload leaves the store unloaded
        books = _parse_books(books_data)
        volumes = derive_volume_books(_parse_volumes(volumes_data), books)
        self._books = books
        self._volumes = volumes
        self._book_ids = sorted(books)

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    def _require_loaded(self) -> None:
        if not self.loaded:
            raise CatalogNotLoadedError("Catalog accessed before load() completed")

    @property
    def volumes(self) -> list[Volume]:
        self._require_loaded()
        return list(self._volumes)

    def lookup_book(self, book_id) -> Book | None:
        self._require_loaded()
        return self._books.get(book_id)

    def lookup_volume(self, volume_id) -> Volume | None:
        self._require_loaded()
        for volume in self._volumes:
            if volume.id == volume_id:
                return volume
        return None

    def chapter_count(self, book_id) -> int:
        """Number of chapters in *book_id*; raises KeyError for unknown books."""
        book = self.lookup_book(book_id)
        if book is None:
            raise KeyError(f"Unknown book id: {book_id}")
        return book.num_chapters

    def volume_for_book(self, book_id) -> Volume | None:
        self._require_loaded()
        for volume in self._volumes:
            if volume.contains(book_id):
                return volume
        return None

    def volume_id_range(self) -> tuple[int, int] | None:
        """(first volume id, last volume id), or None for an empty catalog."""
        self._require_loaded()
        if not self._volumes:
            return None
        return self._volumes[0].id, self._volumes[-1].id

    def following_book(self, book_id: int) -> Book | None:
        """The book after *book_id* in catalog order (id order), if any.

        Book ids are contiguous inside a volume but jump between volumes, so
        the successor is found by position rather than by ``book_id + 1``.
        """
        self._require_loaded()
        index = bisect.bisect_right(self._book_ids, book_id)
        if index >= len(self._book_ids):
            return None
        return self._books[self._book_ids[index]]

    def preceding_book(self, book_id: int) -> Book | None:
        self._require_loaded()
        index = bisect.bisect_left(self._book_ids, book_id) - 1
        if index < 0:
            return None
        return self._books[self._book_ids[index]]
