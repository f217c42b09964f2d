"""Structured view content handed to the renderer.

The router never builds markup. It describes each view with these
dataclasses and leaves presentation to whatever renderer is plugged in.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from scriptures.catalog import Book, CatalogStore, Volume
from scriptures.navigation import ChapterRef, chapter_title


@dataclass(frozen=True)
class NavLink:
    title: str
    fragment: str  # e.g. "#1:5:3"


@dataclass(frozen=True)
class BookEntry:
    book_id: int
    grid_name: str
    fragment: str


@dataclass(frozen=True)
class VolumeEntry:
    volume_id: int
    full_name: str
    fragment: str
    books: list[BookEntry] = field(default_factory=list)


@dataclass(frozen=True)
class VolumeGridView:
    volumes: list[VolumeEntry]
    breadcrumbs: list[NavLink]


@dataclass(frozen=True)
class ChapterPickerView:
    book_id: int
    title: str
    chapters: list[NavLink]
    breadcrumbs: list[NavLink]


@dataclass(frozen=True)
class ChapterView:
    book_id: int
    chapter: int
    title: str
    markup: str
    previous: NavLink | None
    next: NavLink | None
    breadcrumbs: list[NavLink]


ViewContent = VolumeGridView | ChapterPickerView | ChapterView


def volume_fragment(volume_id: int) -> str:
    return f"#{volume_id}"


def book_fragment(volume_id: int, book_id: int) -> str:
    return f"#{volume_id}:{book_id}"


def chapter_fragment(volume_id: int, book_id: int, chapter: int) -> str:
    return f"#{volume_id}:{book_id}:{chapter}"


def _volume_id_for(catalog: CatalogStore, book_id: int) -> int:
    volume = catalog.volume_for_book(book_id)
    # Fragments tolerate any volume token, 0 is only used for orphan books
    return volume.id if volume is not None else 0


def chapter_link(catalog: CatalogStore, ref: ChapterRef | None) -> NavLink | None:
    if ref is None:
        return None
    volume_id = _volume_id_for(catalog, ref.book_id)
    return NavLink(ref.title, chapter_fragment(volume_id, ref.book_id, ref.chapter))


def breadcrumbs(
    catalog: CatalogStore,
    volume: Volume | None = None,
    book: Book | None = None,
    chapter: int | None = None,
) -> list[NavLink]:
    """Home > Volume > Book > Chapter, as deep as the arguments go."""
    crumbs = [NavLink("The Scriptures", "#")]
    if book is not None and volume is None:
        volume = catalog.volume_for_book(book.id)
    if volume is not None:
        crumbs.append(NavLink(volume.full_name, volume_fragment(volume.id)))
    if book is not None:
        volume_id = volume.id if volume is not None else 0
        crumbs.append(NavLink(book.full_name, book_fragment(volume_id, book.id)))
        if chapter is not None and chapter > 0:
            crumbs.append(
                NavLink(str(chapter), chapter_fragment(volume_id, book.id, chapter))
            )
    return crumbs


def volume_grid(catalog: CatalogStore, volume_id: int | None = None) -> VolumeGridView:
    """Every volume with its books, or just *volume_id* when given."""
    volumes = catalog.volumes
    if volume_id is not None:
        volumes = [v for v in volumes if v.id == volume_id]

    entries = [
        VolumeEntry(
            volume_id=v.id,
            full_name=v.full_name,
            fragment=volume_fragment(v.id),
            books=[
                BookEntry(b.id, b.grid_name, book_fragment(v.id, b.id))
                for b in v.books
            ],
        )
        for v in volumes
    ]

    scoped = volumes[0] if volume_id is not None and volumes else None
    return VolumeGridView(entries, breadcrumbs(catalog, volume=scoped))


def chapter_picker(catalog: CatalogStore, book: Book) -> ChapterPickerView:
    volume_id = _volume_id_for(catalog, book.id)
    chapters = [
        NavLink(str(n), chapter_fragment(volume_id, book.id, n))
        for n in range(1, book.num_chapters + 1)
    ]
    return ChapterPickerView(
        book_id=book.id,
        title=book.full_name,
        chapters=chapters,
        breadcrumbs=breadcrumbs(catalog, book=book),
    )


def chapter_view(
    catalog: CatalogStore,
    book: Book,
    chapter: int,
    markup: str,
    previous: ChapterRef | None,
    following: ChapterRef | None,
) -> ChapterView:
    return ChapterView(
        book_id=book.id,
        chapter=chapter,
        title=chapter_title(book, chapter),
        markup=markup,
        previous=chapter_link(catalog, previous),
        next=chapter_link(catalog, following),
        breadcrumbs=breadcrumbs(catalog, book=book, chapter=chapter),
    )
