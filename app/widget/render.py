"""Render the markdown subset the assistant produces into safe HTML."""
from __future__ import annotations

import html
import re
from typing import Iterator, List, Optional

_NUMBERED_RE = re.compile(r"^(\d+)\.\s+(.+)$")
_BULLET_RE = re.compile(r"^[-*•]\s+(.+)$")
_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")


def _inline(text: str) -> str:
    # Escape first, then reintroduce the only markup we allow.
    return _BOLD_RE.sub(r"<strong>\1</strong>", html.escape(text))


def _is_list(block: str) -> bool:
    return block.startswith(("<ol>", "<ul>"))


def markdown_to_html(text: Optional[str]) -> str:
    """Convert ordered/bullet lists, ``**bold**`` and plain lines to HTML.

    Text lines after the first block are separated with ``<br>``. Output
    with no lists is wrapped in a single paragraph.
    """
    if not text:
        return ""

    blocks: List[str] = []
    list_tag: Optional[str] = None
    items: List[str] = []

    def close_list() -> None:
        nonlocal list_tag, items
        if list_tag and items:
            blocks.append(f"<{list_tag}>{''.join(items)}</{list_tag}>")
        list_tag = None
        items = []

    for line in text.split("\n"):
        trimmed = line.strip()

        numbered = _NUMBERED_RE.match(trimmed)
        if numbered:
            if list_tag != "ol":
                close_list()
                list_tag = "ol"
            items.append(f"<li>{_inline(numbered.group(2))}</li>")
            continue

        bullet = _BULLET_RE.match(trimmed)
        if bullet:
            if list_tag != "ul":
                close_list()
                list_tag = "ul"
            items.append(f"<li>{_inline(bullet.group(1))}</li>")
            continue

        close_list()
        if trimmed:
            blocks.append(_inline(trimmed))

    close_list()

    has_lists = any(_is_list(block) for block in blocks)
    parts: List[str] = []
    for index, block in enumerate(blocks):
        if index > 0 and not _is_list(block):
            block = "<br>" + block
        parts.append(block)
    joined = "".join(parts)

    if joined and not has_lists:
        return f"<p>{joined}</p>"
    return joined


def reveal_frames(text: str) -> Iterator[str]:
    """Yield the rendered reply one character at a time, line by line."""
    lines = text.split("\n")
    shown: List[str] = []
    for line in lines:
        for i in range(len(line) + 1):
            yield markdown_to_html("\n".join(shown + [line[:i]]))
        shown.append(line)
    yield markdown_to_html(text)
