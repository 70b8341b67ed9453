"""Repository documentation download tools."""

from __future__ import annotations

from functools import partial

from fetchmcp.integrations.github.docs import DEFAULT_API_URL, DocsDownloadError, DocsResult, fetch_docs
from fetchmcp.mcp import ToolContext, ToolRegistry, ToolResult, build_tool, string_param

_PARAMETERS = (
    string_param("repo", "GitHub repository URL, e.g. https://github.com/user/repo", required=True),
    string_param("path", "Only include documents under this path, e.g. docs (optional)."),
)


def register_docs_tools(
    registry: ToolRegistry,
    *,
    token: str | None = None,
    api_url: str = DEFAULT_API_URL,
) -> None:
    """Register ``download_docs`` and ``download_docs_md``."""

    registry.register_tool(
        build_tool(
            name="download_docs",
            description=(
                "Download documentation files (.md, .txt) from a GitHub repository "
                "and return their contents as JSON."
            ),
            parameters=_PARAMETERS,
            handler=partial(_download_docs_handler, token=token, api_url=api_url),
        )
    )

    registry.register_tool(
        build_tool(
            name="download_docs_md",
            description=(
                "Download documentation files from a GitHub repository and return "
                "them merged into one Markdown document."
            ),
            parameters=_PARAMETERS,
            handler=partial(_download_docs_md_handler, token=token, api_url=api_url),
        )
    )


def _download(ctx: ToolContext, token: str | None, api_url: str) -> DocsResult:
    path = ctx.string("path") or None
    return fetch_docs(ctx.string("repo"), path, token=token, api_url=api_url)


def _download_docs_handler(ctx: ToolContext, *, token: str | None, api_url: str) -> ToolResult:
    try:
        result = _download(ctx, token, api_url)
    except DocsDownloadError as exc:
        return ctx.error(f"download failed: {exc}")
    return ctx.json(result.to_dict())


def _download_docs_md_handler(ctx: ToolContext, *, token: str | None, api_url: str) -> ToolResult:
    try:
        result = _download(ctx, token, api_url)
    except DocsDownloadError as exc:
        return ctx.error(f"download failed: {exc}")
    return ctx.markdown(result.to_markdown())
