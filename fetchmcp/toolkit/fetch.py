"""Web page fetching tools.

``fetch`` and ``fetch_md`` convert a single page to Markdown; ``fetch_multi``
fetches a comma-separated list of pages concurrently.
"""

from __future__ import annotations

from functools import partial
from typing import Callable

from fetchmcp.mcp import ToolContext, ToolRegistry, ToolResult, build_tool, string_param
from fetchmcp.parsing.multi import fetch_multi, split_urls
from fetchmcp.parsing.scraper import FetchError, ScrapeResult, quick_fetch

Fetcher = Callable[[str], ScrapeResult]


def register_fetch_tools(registry: ToolRegistry, *, visit_timeout: float | None = None) -> None:
    """Register the page fetching tools.

    Args:
        registry: Registry to populate.
        visit_timeout: Timeout for the primary page visit, ``None`` for none.
    """
    fetcher: Fetcher = partial(quick_fetch, visit_timeout=visit_timeout)

    registry.register_tool(
        build_tool(
            name="fetch",
            description=(
                "Fetch a web page and convert it to Markdown. "
                "Returns JSON with the url, title and markdown."
            ),
            parameters=[string_param("url", "URL of the page to fetch.", required=True)],
            handler=partial(_fetch_handler, fetcher=fetcher),
        )
    )

    registry.register_tool(
        build_tool(
            name="fetch_md",
            description="Fetch a web page and return only its Markdown text.",
            parameters=[string_param("url", "URL of the page to fetch.", required=True)],
            handler=partial(_fetch_md_handler, fetcher=fetcher),
        )
    )

    registry.register_tool(
        build_tool(
            name="fetch_multi",
            description=(
                "Fetch several URLs in parallel and return the title and Markdown "
                "of each page, in the order given."
            ),
            parameters=[string_param("urls", "Comma-separated list of URLs.", required=True)],
            handler=partial(_fetch_multi_handler, fetcher=fetcher),
        )
    )


def _fetch_handler(ctx: ToolContext, *, fetcher: Fetcher) -> ToolResult:
    try:
        result = fetcher(ctx.string("url"))
    except FetchError as exc:
        return ctx.error(f"fetch failed: {exc}")
    return ctx.json(result.to_dict())


def _fetch_md_handler(ctx: ToolContext, *, fetcher: Fetcher) -> ToolResult:
    try:
        result = fetcher(ctx.string("url"))
    except FetchError as exc:
        return ctx.error(f"fetch failed: {exc}")
    return ctx.markdown(result.markdown)


def _fetch_multi_handler(ctx: ToolContext, *, fetcher: Fetcher) -> ToolResult:
    urls = split_urls(ctx.string("urls"))
    if not urls:
        return ctx.error("no valid URLs")
    items = fetch_multi(urls, fetch=fetcher)
    return ctx.json({"results": [item.to_dict() for item in items]})
