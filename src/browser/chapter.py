"""Fetch chapter markup from the scriptures service."""

from __future__ import annotations

from scriptures.catalog import fetch_text_async

from .config import EndpointConfig


async def fetch_chapter_markup(endpoints: EndpointConfig, book_id: int, chapter: int) -> str:
    """Return the raw chapter markup (with embedded geotag links).

    Raises ``FetchError`` on network or HTTP failure.
    """
    return await fetch_text_async(endpoints.chapter_url(book_id, chapter), endpoints.timeout)
