"""Navigation states: the view a URL fragment selects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HomeState:
    pass


@dataclass(frozen=True)
class VolumeState:
    volume_id: int


@dataclass(frozen=True)
class BookState:
    book_id: int


@dataclass(frozen=True)
class ChapterState:
    book_id: int
    chapter: int  # 0 only for books without chapters


NavigationState = HomeState | VolumeState | BookState | ChapterState

HOME = HomeState()


@dataclass(frozen=True)
class ChapterRef:
    """An adjacent chapter, as returned by the sequencer."""

    book_id: int
    chapter: int
    title: str
