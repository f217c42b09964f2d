"""Previous/next chapter across book and volume boundaries."""

from __future__ import annotations

from scriptures.catalog import Book, CatalogStore

from .types import ChapterRef


def chapter_title(book: Book, chapter: int) -> str:
    """``"{tocName} {chapter}"``, or just the toc name for chapter 0."""
    if chapter > 0:
        return f"{book.toc_name} {chapter}"
    return book.toc_name


def next_chapter(catalog: CatalogStore, book_id: int, chapter: int) -> ChapterRef | None:
    """The chapter after (*book_id*, *chapter*), or None at the end of the catalog.

    Crosses into the next book in catalog order (and so the next volume)
    when the current book is exhausted. A book with no chapters is entered at chapter 0.
    """
    book = catalog.lookup_book(book_id)
    if book is None:
        return None

    if chapter < book.num_chapters:
        return ChapterRef(book.id, chapter + 1, chapter_title(book, chapter + 1))

    following = catalog.following_book(book.id)
    if following is None:
        return None
    target = 1 if following.num_chapters > 0 else 0
    return ChapterRef(following.id, target, chapter_title(following, target))


def previous_chapter(catalog: CatalogStore, book_id: int, chapter: int) -> ChapterRef | None:
    """The chapter before (*book_id*, *chapter*), or None at the catalog start."""
    book = catalog.lookup_book(book_id)
    if book is None:
        return None

    if chapter > 1:
        return ChapterRef(book.id, chapter - 1, chapter_title(book, chapter - 1))

    preceding = catalog.preceding_book(book.id)
    if preceding is None:
        return None
    target = preceding.num_chapters
    return ChapterRef(preceding.id, target, chapter_title(preceding, target))
