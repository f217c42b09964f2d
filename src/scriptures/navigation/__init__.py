from .parse_fragment import chapter_valid, parse_fragment, split_fragment
from .sequencer import chapter_title, next_chapter, previous_chapter
from .types import (
    HOME,
    BookState,
    ChapterRef,
    ChapterState,
    HomeState,
    NavigationState,
    VolumeState,
)

__all__ = [
    "parse_fragment",
    "split_fragment",
    "chapter_valid",
    "next_chapter",
    "previous_chapter",
    "chapter_title",
    "NavigationState",
    "HomeState",
    "VolumeState",
    "BookState",
    "ChapterState",
    "ChapterRef",
    "HOME",
]
