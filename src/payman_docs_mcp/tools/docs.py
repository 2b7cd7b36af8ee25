"""Documentation tools - fetch, search, code examples, troubleshooting, SDK help."""

import logging
from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ..config import Config
from ..docs import operations
from ..docs.fetcher import DocumentFetcher
from ..docs.registry import QUICKSTART_PATH, SdkName, TopicId

logger = logging.getLogger(__name__)


def register_docs_tools(mcp: FastMCP, config: Config, fetcher: Optional[DocumentFetcher] = None) -> DocumentFetcher:
	"""Register documentation tools and the overview resource.

	Returns the fetcher the tools share, so its cache can be inspected.
	"""
	fetcher = fetcher or DocumentFetcher.from_config(config)

	@mcp.tool(name="get-documentation", description="Get PaymanAI documentation on a specific topic")
	async def get_documentation(
		topic: Annotated[TopicId, Field(description="The documentation topic to retrieve")],
	) -> str:
		return await operations.get_documentation(fetcher, topic)

	@mcp.tool(name="search-documentation", description="Search through PaymanAI documentation")
	async def search_documentation(
		query: Annotated[str, Field(description="Search term")],
	) -> str:
		return await operations.search_documentation(fetcher, query)

	@mcp.tool(
		name="get-code-examples",
		description="Get Node.js or Python code examples for PaymanAI integration",
	)
	async def get_code_examples(
		feature: Annotated[str, Field(description="The feature or functionality you need code examples for")],
		language: Annotated[SdkName, Field(description="Programming language (nodejs or python)")] = "nodejs",
	) -> str:
		return await operations.get_code_examples(fetcher, feature, language)

	@mcp.tool(name="solve-problem", description="Get help with common PaymanAI integration issues")
	async def solve_problem(
		problem: Annotated[str, Field(description="Describe the issue you're experiencing")],
		sdk: Annotated[
			Optional[SdkName], Field(description="Which SDK you're using (nodejs or python)")
		] = None,
	) -> str:
		return operations.solve_problem(problem, sdk)

	@mcp.tool(name="get-sdk-help", description="Get help with Node.js or Python SDK usage")
	async def get_sdk_help(
		sdk: Annotated[SdkName, Field(description="Which SDK you need help with")],
		feature: Annotated[str, Field(description="Which SDK feature or class you need help with")],
	) -> str:
		return await operations.get_sdk_help(fetcher, sdk, feature)

	@mcp.resource(
		"payman://overview",
		name="payman-overview",
		description="Overview of PaymanAI",
		mime_type="text/markdown",
	)
	async def payman_overview() -> str:
		return await fetcher.fetch(QUICKSTART_PATH)

	return fetcher
