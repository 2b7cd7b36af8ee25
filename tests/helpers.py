"""Shared test fixtures and helpers for payman-docs-mcp tests."""

from typing import Callable, Mapping

from payman_docs_mcp.docs.cache import DocumentCache
from payman_docs_mcp.docs.fetcher import DocumentFetcher
from payman_docs_mcp.docs.registry import TOPICS


class FakeClock:
	"""Manually advanced clock for cache tests."""

	def __init__(self, start: float = 1000.0):
		self.value = start

	def __call__(self) -> float:
		return self.value

	def advance(self, seconds: float) -> None:
		self.value += seconds


def make_fetcher(docs: Mapping[str, str] | None = None, clock: FakeClock | None = None) -> DocumentFetcher:
	"""Fetcher whose cache already holds a body for every registered topic.

	Args:
		docs: Topic id -> markdown body; unlisted topics get a bland stub
		clock: Optional clock shared with the cache
	"""
	docs = docs or {}
	cache = DocumentCache(clock=clock or FakeClock())
	for topic in TOPICS.values():
		body = docs.get(topic.id, f"# {topic.title}\n\nNothing to see here.\n")
		cache.put(topic.path, body, cache.now())
	return DocumentFetcher(cache, base_url="https://docs.example.test")


def capture_tools(register_fn: Callable, *args) -> tuple[dict, dict]:
	"""Register tools on a mock MCP and return the captured functions.

	Returns:
		(tools, resources): tool name -> function and resource uri -> function
	"""
	tools: dict = {}
	resources: dict = {}

	class MockMCP:
		def tool(self, name=None, description=None):
			def decorator(fn):
				tools[name or fn.__name__] = fn
				return fn
			return decorator

		def resource(self, uri, **kwargs):
			def decorator(fn):
				resources[uri] = fn
				return fn
			return decorator

	register_fn(MockMCP(), *args)
	return tools, resources
