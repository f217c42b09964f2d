"""Plain-text rendering of view content, for terminals."""

from __future__ import annotations

from bs4 import BeautifulSoup

from .content import ChapterPickerView, ChapterView, NavLink, ViewContent, VolumeGridView


def _crumbs(links: list[NavLink]) -> str:
    return " > ".join(link.title for link in links)


def markup_to_text(markup: str) -> str:
    """Strip tags, keeping one line per block element."""
    soup = BeautifulSoup(markup, "html.parser")
    lines = (line.strip() for line in soup.get_text("\n").splitlines())
    return "\n".join(line for line in lines if line)


def render_text(view: ViewContent) -> str:
    lines = [_crumbs(view.breadcrumbs), ""]

    if isinstance(view, VolumeGridView):
        for volume in view.volumes:
            lines.append(f"{volume.full_name}  [{volume.fragment}]")
            for book in volume.books:
                lines.append(f"  {book.grid_name:<12} {book.fragment}")
            lines.append("")
    elif isinstance(view, ChapterPickerView):
        lines.append(view.title)
        lines.append("  " + "  ".join(link.title for link in view.chapters))
    elif isinstance(view, ChapterView):
        lines.append(view.title)
        lines.append("")
        lines.append(markup_to_text(view.markup))
        lines.append("")
        prev_txt = f"< {view.previous.title} [{view.previous.fragment}]" if view.previous else ""
        next_txt = f"{view.next.title} [{view.next.fragment}] >" if view.next else ""
        lines.append(f"{prev_txt}    {next_txt}".strip())
    else:
        raise TypeError(f"Unknown view type: {type(view)}")

    return "\n".join(lines).rstrip() + "\n"
