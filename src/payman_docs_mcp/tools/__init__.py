"""MCP tool registration - modular tool definitions."""

import logging

from mcp.server.fastmcp import FastMCP

from ..config import Config
from ..docs.fetcher import DocumentFetcher
from .core import register_core_tools
from .docs import register_docs_tools

logger = logging.getLogger(__name__)


def register_all_tools(mcp: FastMCP, config: Config) -> DocumentFetcher:
	"""Register all MCP tools around one shared document fetcher."""
	fetcher = DocumentFetcher.from_config(config)
	register_docs_tools(mcp, config, fetcher)
	register_core_tools(mcp, config, fetcher)
	logger.debug(f"Registered tools against {fetcher.base_url}")
	return fetcher
