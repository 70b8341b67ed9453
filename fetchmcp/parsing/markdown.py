"""Category-based HTML to Markdown conversion.

Elements are emitted by tag category in a fixed order (headings, paragraphs,
list items, code, links) rather than in document order. Within a category,
elements keep their document order.
"""

from __future__ import annotations

from bs4 import Tag

HEADING_SELECTOR = "h1, h2, h3, h4, h5, h6"
PARAGRAPH_SELECTOR = "p"
LIST_ITEM_SELECTOR = "ul li, ol li"
CODE_SELECTOR = "pre, code"
LINK_SELECTOR = "a[href]"


def clean_text(value: str) -> str:
    """Collapse whitespace runs to a single space and trim the ends."""
    return " ".join(value.split())


def _headings(root: Tag) -> list[str]:
    parts: list[str] = []
    for element in root.select(HEADING_SELECTOR):
        level = int(element.name[1])
        text = clean_text(element.get_text())
        if text:
            parts.append(f"{'#' * level} {text}\n\n")
    return parts


def _paragraphs(root: Tag) -> list[str]:
    parts: list[str] = []
    for element in root.select(PARAGRAPH_SELECTOR):
        text = clean_text(element.get_text())
        if text:
            parts.append(f"{text}\n\n")
    return parts


def _list_items(root: Tag) -> list[str]:
    parts: list[str] = []
    for element in root.select(LIST_ITEM_SELECTOR):
        text = clean_text(element.get_text())
        if text:
            parts.append(f"- {text}\n")
    return parts


def _code_blocks(root: Tag) -> list[str]:
    parts: list[str] = []
    for element in root.select(CODE_SELECTOR):
        # Code keeps its original whitespace.
        text = element.get_text()
        if text:
            parts.append(f"```\n{text}\n```\n\n")
    return parts


def _links(root: Tag) -> list[str]:
    parts: list[str] = []
    for element in root.select(LINK_SELECTOR):
        href = element.get("href") or ""
        if isinstance(href, list):
            href = " ".join(href)
        text = clean_text(element.get_text())
        if text and href and not href.startswith("#"):
            parts.append(f"[{text}]({href})\n")
    return parts


def extract_markdown(root: Tag) -> str:
    """Convert the subtree under ``root`` into Markdown fragments.

    ``root`` may be a single element (the ``<body>`` seen by a collector
    callback) or a whole parsed document.
    """
    parts: list[str] = []
    parts.extend(_headings(root))
    parts.extend(_paragraphs(root))
    parts.extend(_list_items(root))
    parts.extend(_code_blocks(root))
    parts.extend(_links(root))
    return "".join(parts)


def format_markdown(title: str, content: str) -> str:
    """Prefix ``content`` with a level-one title heading when a title exists."""
    if title:
        return f"# {title}\n\n{content}"
    return content


__all__ = [
    "clean_text",
    "extract_markdown",
    "format_markdown",
]
