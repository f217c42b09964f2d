"""Fetch JSON from the catalog endpoints via requests."""

from __future__ import annotations

import asyncio

import requests


class FetchError(RuntimeError):
    """A GET request failed, returned an error status, or was not valid JSON."""


def fetch_json(url: str, timeout: int = 30):
    """GET *url* and return the decoded JSON body.

    Any status in 200-399 is treated as success. Raises ``FetchError`` for
    connection problems, other statuses, and undecodable bodies.
    """
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(f"Request to {url} failed: {exc}") from exc

    if not 200 <= resp.status_code < 400:
        raise FetchError(
            f"Request to {url} failed (HTTP {resp.status_code}): {resp.text[:200]}"
        )

    try:
        return resp.json()
    except ValueError as exc:
        raise FetchError(f"Response from {url} is not valid JSON") from exc


def fetch_text(url: str, timeout: int = 30) -> str:
    """GET *url* and return the raw body. Same failure rules as fetch_json()."""
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(f"Request to {url} failed: {exc}") from exc

    if not 200 <= resp.status_code < 400:
        raise FetchError(
            f"Request to {url} failed (HTTP {resp.status_code}): {resp.text[:200]}"
        )
    return resp.text


async def fetch_json_async(url: str, timeout: int = 30):
    """Awaitable fetch_json(): the blocking request runs in a worker thread."""
    return await asyncio.to_thread(fetch_json, url, timeout)


async def fetch_text_async(url: str, timeout: int = 30) -> str:
    return await asyncio.to_thread(fetch_text, url, timeout)
