"""Core health check tool."""

import json

from mcp.server.fastmcp import FastMCP

from ..config import Config
from ..docs.fetcher import DocumentFetcher
from ..docs.registry import TOPICS


def register_core_tools(mcp: FastMCP, config: Config, fetcher: DocumentFetcher) -> None:
	"""Register core tools."""

	@mcp.tool(name="health-check")
	async def health_check() -> str:
		"""
		Check the health of the payman-docs-mcp server.
		Returns configuration and document cache status.
		"""
		status = {
			"server": "running",
			"base_url": fetcher.base_url,
			"cache_ttl_seconds": fetcher.cache.ttl,
			"topics": len(TOPICS),
			"cached_documents": len(fetcher.cache),
			"fresh_documents": fetcher.cache.fresh_count(),
			"config_file_exists": config.config_file.exists(),
		}
		return json.dumps(status, indent=2)
