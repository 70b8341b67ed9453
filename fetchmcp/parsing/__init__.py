"""Web page fetching and HTML to Markdown conversion."""

from __future__ import annotations

from .collector import Collector, CollectorError, HTMLElement
from .markdown import clean_text, extract_markdown, format_markdown
from .multi import MultiFetchItem, fetch_multi, split_urls
from .scraper import FetchError, ScrapeResult, Scraper, http_fallback_fetch, quick_fetch


__all__ = [
    "Collector",
    "CollectorError",
    "FetchError",
    "HTMLElement",
    "MultiFetchItem",
    "ScrapeResult",
    "Scraper",
    "clean_text",
    "extract_markdown",
    "fetch_multi",
    "format_markdown",
    "http_fallback_fetch",
    "quick_fetch",
    "split_urls",
]
