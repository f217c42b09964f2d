"""Dispatch navigation states to views.

``navigate()`` parses a fragment and ``dispatch()`` carries out the
transition. Every dispatch takes a fresh navigation token; a chapter fetch
that completes after a newer dispatch has started is dropped, so a slow
response can never overwrite the current view.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from scriptures.catalog import Book, CatalogStore, FetchError
from scriptures.navigation import (
    HOME,
    BookState,
    ChapterState,
    HomeState,
    NavigationState,
    VolumeState,
    chapter_valid,
    next_chapter,
    parse_fragment,
    previous_chapter,
)

from .content import ChapterView, ViewContent, chapter_picker, chapter_view, volume_grid

logger = logging.getLogger(__name__)

Renderer = Callable[[ViewContent], None]
ChapterFetcher = Callable[[int, int], Awaitable[str]]


class Router:
    def __init__(
        self,
        catalog: CatalogStore,
        render: Renderer,
        fetch_chapter: ChapterFetcher,
        on_chapter_rendered: Callable[[ChapterView], None] | None = None,
    ):
        self.catalog = catalog
        self._render = render
        self._fetch_chapter = fetch_chapter
        self._on_chapter_rendered = on_chapter_rendered
        self._token = 0
        self.state: NavigationState | None = None

    async def navigate(self, fragment: str) -> NavigationState:
        """Parse *fragment* and show the view it selects."""
        state = parse_fragment(fragment, self.catalog)
        return await self.dispatch(state)

    async def dispatch(self, state: NavigationState) -> NavigationState:
        """Show *state*; returns the state actually shown.

        A book with at most one chapter is shown as that chapter, so the
        returned state can differ from the one passed in. Book and chapter
        states that do not match the catalog fall back to ``HOME``, as they
        would from ``parse_fragment()``.
        """
        self._token += 1
        token = self._token

        state = self._checked(state)
        if isinstance(state, BookState):
            book = self.catalog.lookup_book(state.book_id)
            if book.num_chapters <= 1:
                state = ChapterState(book.id, book.num_chapters)

        self.state = state

        if isinstance(state, HomeState):
            self._render(volume_grid(self.catalog))
        elif isinstance(state, VolumeState):
            self._render(volume_grid(self.catalog, state.volume_id))
        elif isinstance(state, BookState):
            book = self.catalog.lookup_book(state.book_id)
            self._render(chapter_picker(self.catalog, book))
        elif isinstance(state, ChapterState):
            book = self.catalog.lookup_book(state.book_id)
            await self._show_chapter(book, state.chapter, token)
        else:
            raise TypeError(f"Unknown navigation state: {state!r}")

        return state

    def _checked(self, state: NavigationState) -> NavigationState:
        if isinstance(state, BookState) and self.catalog.lookup_book(state.book_id) is None:
            logger.debug("Unknown book in %r, showing home", state)
            return HOME
        if isinstance(state, ChapterState) and not chapter_valid(
            self.catalog, state.book_id, state.chapter
        ):
            logger.debug("Invalid chapter in %r, showing home", state)
            return HOME
        return state

    def is_current(self, token: int) -> bool:
        return token == self._token

    async def _show_chapter(self, book: Book, chapter: int, token: int) -> bool:
        try:
            markup = await self._fetch_chapter(book.id, chapter)
        except FetchError as exc:
            logger.warning("Could not load %s %d: %s", book.full_name, chapter, exc)
            return False

        if not self.is_current(token):
            logger.debug(
                "Discarding stale response for book %d chapter %d", book.id, chapter
            )
            return False

        view = chapter_view(
            self.catalog,
            book,
            chapter,
            markup,
            previous_chapter(self.catalog, book.id, chapter),
            next_chapter(self.catalog, book.id, chapter),
        )
        self._render(view)
        if self._on_chapter_rendered is not None:
            self._on_chapter_rendered(view)
        return True
