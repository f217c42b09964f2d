"""Tests for Router: dispatch, chapter links, failures and stale responses."""

import asyncio

from scriptures.catalog import FetchError
from scriptures.navigation import HOME, BookState, ChapterState, VolumeState

from browser import ChapterPickerView, ChapterView, Router, VolumeGridView


def make_router(catalog, fetch=None, rendered=None):
    views = []

    async def default_fetch(book_id, chapter):
        return f"<p>book {book_id} chapter {chapter}</p>"

    router = Router(
        catalog,
        views.append,
        fetch or default_fetch,
        on_chapter_rendered=rendered.append if rendered is not None else None,
    )
    return router, views


class TestChapterNavigation:
    """#1:5:3 renders chapter 3 with links to 2 and 4; #1:5:11 falls back home."""

    def test_renders_chapter_with_links(self, catalog):
        rendered = []
        router, views = make_router(catalog, rendered=rendered)

        state = asyncio.run(router.navigate("#1:5:3"))

        assert state == ChapterState(5, 3)
        (view,) = views
        assert isinstance(view, ChapterView)
        assert view.title == "Deut. 3"
        assert view.markup == "<p>book 5 chapter 3</p>"
        assert view.previous.title == "Deut. 2"
        assert view.previous.fragment == "#1:5:2"
        assert view.next.title == "Deut. 4"
        assert view.next.fragment == "#1:5:4"
        assert rendered == [view]

    def test_out_of_range_chapter_goes_home(self, catalog):
        router, views = make_router(catalog)

        state = asyncio.run(router.navigate("#1:5:11"))

        assert state == HOME
        assert isinstance(views[0], VolumeGridView)
        assert len(views[0].volumes) == 3

    def test_links_cross_volumes(self, catalog):
        router, views = make_router(catalog)
        asyncio.run(router.navigate("#1:5:10"))
        assert views[0].next.fragment == "#2:6:1"

    def test_no_links_at_catalog_ends(self, catalog):
        router, views = make_router(catalog)
        asyncio.run(router.navigate("#1:1:1"))
        asyncio.run(router.navigate("#3:11:3"))
        assert views[0].previous is None
        assert views[1].next is None

    def test_breadcrumbs(self, catalog):
        router, views = make_router(catalog)
        asyncio.run(router.navigate("#1:5:3"))
        assert [c.title for c in views[0].breadcrumbs] == [
            "The Scriptures", "The Old Testament", "Deuteronomy", "3",
        ]


class TestGridAndPicker:
    def test_volume_scoped_grid(self, catalog):
        router, views = make_router(catalog)
        state = asyncio.run(router.navigate("#2"))
        assert state == VolumeState(2)
        assert [v.volume_id for v in views[0].volumes] == [2]
        assert [b.book_id for b in views[0].volumes[0].books] == [6, 7]
        assert views[0].volumes[0].books[0].fragment == "#2:6"

    def test_multi_chapter_book_shows_picker(self, catalog):
        router, views = make_router(catalog)
        state = asyncio.run(router.navigate("#3:11"))
        assert state == BookState(11)
        assert isinstance(views[0], ChapterPickerView)
        assert [c.fragment for c in views[0].chapters] == ["#3:11:1", "#3:11:2", "#3:11:3"]

    def test_single_chapter_book_opens_chapter(self, catalog):
        router, views = make_router(catalog)
        state = asyncio.run(router.navigate("#1:3"))
        assert state == ChapterState(3, 1)
        assert isinstance(views[0], ChapterView)

    def test_chapterless_book_opens_chapter_zero(self, catalog):
        fetched = []

        async def fetch(book_id, chapter):
            fetched.append((book_id, chapter))
            return "<p>title page</p>"

        router, views = make_router(catalog, fetch=fetch)
        state = asyncio.run(router.navigate("#1:4"))
        assert state == ChapterState(4, 0)
        assert fetched == [(4, 0)]
        assert views[0].title == "Title"


class TestDirectDispatch:
    """States passed straight to dispatch() get the same catalog checks as
    parsed fragments; anything that does not match shows home."""

    def test_unknown_book_shows_home(self, catalog):
        router, views = make_router(catalog)
        state = asyncio.run(router.dispatch(BookState(99)))
        assert state == HOME
        assert router.state == HOME
        assert isinstance(views[0], VolumeGridView)

    def test_out_of_range_chapter_shows_home(self, catalog):
        fetched = []

        async def fetch(book_id, chapter):
            fetched.append((book_id, chapter))
            return "<p>never</p>"

        router, views = make_router(catalog, fetch=fetch)

        async def run():
            return [
                await router.dispatch(ChapterState(5, 11)),
                await router.dispatch(ChapterState(5, 0)),
                await router.dispatch(ChapterState(99, 1)),
            ]

        assert asyncio.run(run()) == [HOME, HOME, HOME]
        assert fetched == []
        assert all(isinstance(v, VolumeGridView) for v in views)

    def test_valid_chapter_dispatched(self, catalog):
        router, views = make_router(catalog)
        assert asyncio.run(router.dispatch(ChapterState(5, 10))) == ChapterState(5, 10)
        assert views[0].title == "Deut. 10"


class TestFetchFailure:
    """A failed chapter fetch is logged and leaves the previous view alone."""

    def test_previous_view_kept(self, catalog, caplog):
        async def fetch(book_id, chapter):
            if chapter == 4:
                raise FetchError("Request failed (HTTP 500)")
            return "<p>ok</p>"

        rendered = []
        router, views = make_router(catalog, fetch=fetch, rendered=rendered)

        async def run():
            await router.navigate("#1:5:3")
            await router.navigate("#1:5:4")

        with caplog.at_level("WARNING"):
            asyncio.run(run())

        assert len(views) == 1
        assert views[0].title == "Deut. 3"
        assert len(rendered) == 1
        assert "Could not load Deuteronomy 4" in caplog.text


class TestStaleResponses:
    """A slow response for an older navigation must not overwrite a newer one."""

    def test_late_response_discarded(self, catalog):
        rendered = []

        async def run():
            slow_gate = asyncio.Event()

            async def fetch(book_id, chapter):
                if chapter == 3:
                    await slow_gate.wait()
                return f"<p>chapter {chapter}</p>"

            router, views = make_router(catalog, fetch=fetch, rendered=rendered)

            slow = asyncio.create_task(router.navigate("#1:5:3"))
            await asyncio.sleep(0)
            await router.navigate("#1:5:7")
            slow_gate.set()
            await slow
            return router, views

        router, views = asyncio.run(run())

        assert [v.chapter for v in views] == [7]
        assert [v.chapter for v in rendered] == [7]
        assert router.state == ChapterState(5, 7)

    def test_late_response_discarded_after_home(self, catalog):
        async def run():
            gate = asyncio.Event()

            async def fetch(book_id, chapter):
                await gate.wait()
                return "<p>late</p>"

            router, views = make_router(catalog, fetch=fetch)
            pending = asyncio.create_task(router.navigate("#1:5:3"))
            await asyncio.sleep(0)
            await router.navigate("#")
            gate.set()
            await pending
            return views

        views = asyncio.run(run())
        assert len(views) == 1
        assert isinstance(views[0], VolumeGridView)
