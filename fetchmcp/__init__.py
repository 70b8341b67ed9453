"""MCP tool server for fetching web pages as Markdown."""

__version__ = "1.0.0"
