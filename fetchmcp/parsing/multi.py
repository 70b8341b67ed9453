"""Concurrent fetching of several pages with input-ordered results."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from .scraper import FetchError, ScrapeResult, quick_fetch

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MultiFetchItem:
    """Outcome of one URL in a multi-fetch; ``error`` is empty on success."""

    url: str
    title: str = ""
    markdown: str = ""
    error: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"url": self.url, "title": self.title, "markdown": self.markdown}
        if self.error:
            data["error"] = self.error
        return data


def split_urls(raw: str) -> list[str]:
    """Split a comma-separated URL list, dropping blank entries."""
    return [part.strip() for part in raw.split(",") if part.strip()]


def fetch_multi(
    urls: Sequence[str],
    fetch: Callable[[str], ScrapeResult] = quick_fetch,
) -> list[MultiFetchItem]:
    """Fetch every URL concurrently.

    One worker runs per URL and each outcome is stored at the URL's input
    position, so the returned list follows ``urls`` regardless of which
    fetch finishes first. A failed fetch only affects its own slot.
    """
    if not urls:
        return []

    results: list[MultiFetchItem] = [MultiFetchItem(url=url) for url in urls]

    def _run(index: int, url: str) -> None:
        try:
            page = fetch(url)
        except FetchError as exc:
            logger.warning("Fetch of %s failed: %s", url, exc)
            results[index] = MultiFetchItem(url=url, error=str(exc))
            return
        except Exception as exc:
            logger.exception("Unexpected error fetching %s", url)
            results[index] = MultiFetchItem(url=url, error=str(exc) or type(exc).__name__)
            return
        results[index] = MultiFetchItem(url=url, title=page.title, markdown=page.markdown)

    with ThreadPoolExecutor(max_workers=len(urls), thread_name_prefix="fetch-multi") as executor:
        futures = [executor.submit(_run, index, url) for index, url in enumerate(urls)]
        wait(futures)

    return results


__all__ = ["MultiFetchItem", "fetch_multi", "split_urls"]
