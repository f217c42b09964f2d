"""Parse a URL fragment into a NavigationState.

Grammar: ``#``, ``#volumeId``, ``#volumeId:bookId``,
``#volumeId:bookId:chapter``. Anything that does not validate against the
loaded catalog becomes ``HOME``; parsing never raises.
"""

from __future__ import annotations

import logging
import math
import re

from scriptures.catalog import CatalogStore

from .types import HOME, BookState, ChapterState, NavigationState, VolumeState

logger = logging.getLogger(__name__)

# Plain ASCII decimal notation only; float() alone also takes "1_1" and non-ASCII digits
_NUMBER = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def _to_number(token: str) -> float:
    """Permissive numeric parse: anything non-numeric becomes NaN."""
    token = token.strip()
    if not _NUMBER.fullmatch(token):
        return math.nan
    return float(token)


def _as_id(value: float) -> int | None:
    # NaN, infinities and fractions are never valid ids
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return None


def split_fragment(fragment: str) -> list[str]:
    """Strip the leading ``#`` and split on ``:``; empty fragment → []."""
    fragment = fragment[1:] if fragment.startswith("#") else fragment
    if not fragment:
        return []
    return fragment.split(":")


def chapter_valid(catalog: CatalogStore, book_id: int, chapter) -> bool:
    """True if *chapter* can be displayed for *book_id*.

    Chapters run 1..num_chapters; chapter 0 is valid only for books that
    have no chapters at all.
    """
    book = catalog.lookup_book(book_id)
    if book is None or not isinstance(chapter, int):
        return False
    if chapter < 0 or chapter > book.num_chapters:
        return False
    if chapter == 0 and book.num_chapters > 0:
        return False
    return True


def parse_fragment(fragment: str, catalog: CatalogStore) -> NavigationState:
    ids = split_fragment(fragment)

    if not ids:
        return HOME

    if len(ids) == 1:
        volume_id = _as_id(_to_number(ids[0]))
        bounds = catalog.volume_id_range()
        if volume_id is None or bounds is None:
            logger.debug("Fragment %r: invalid volume id, showing home", fragment)
            return HOME
        first, last = bounds
        if volume_id < first or volume_id > last:
            logger.debug("Fragment %r: volume out of range, showing home", fragment)
            return HOME
        return VolumeState(volume_id)

    # The volume token is accepted but not checked against the book's volume
    book_id = _as_id(_to_number(ids[1]))
    if book_id is None or catalog.lookup_book(book_id) is None:
        logger.debug("Fragment %r: unknown book, showing home", fragment)
        return HOME

    if len(ids) == 2:
        return BookState(book_id)

    chapter = _as_id(_to_number(ids[2]))
    if not chapter_valid(catalog, book_id, chapter):
        logger.debug("Fragment %r: invalid chapter, showing home", fragment)
        return HOME
    return ChapterState(book_id, chapter)
