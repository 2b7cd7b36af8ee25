"""payman-docs-mcp MCP server."""

from mcp.server.fastmcp import FastMCP

from .config import load_config
from .tools import register_all_tools

mcp = FastMCP("payman-mcp")
config = load_config()
fetcher = register_all_tools(mcp, config)
