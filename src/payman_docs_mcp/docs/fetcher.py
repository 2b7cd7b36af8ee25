"""
Document Fetcher - retrieves markdown pages from the docs site.

Features:
- Async retrieval with aiohttp
- Cache-first lookups against DocumentCache
- Failed fetches degrade to a placeholder body and are never cached
"""

import asyncio
import logging
from typing import Iterable, Optional

import aiohttp

from ..config import DEFAULT_BASE_URL, Config
from .cache import DocumentCache

logger = logging.getLogger(__name__)


class DocumentFetchError(Exception):
	"""Raised when the docs site answers with a non-success status."""


def describe_error(error: BaseException) -> str:
	"""Error text for logs and placeholders; timeouts carry no message."""
	return str(error) or type(error).__name__


def placeholder(path: str, error: BaseException) -> str:
	"""Body returned in place of a document that could not be fetched."""
	return f"Documentation content not available for path: {path}.md\nError: {describe_error(error)}"


class DocumentFetcher:
	"""
	Fetches documentation pages, consulting the cache first.

	Usage:
		fetcher = DocumentFetcher(DocumentCache())
		body = await fetcher.fetch("/overview/quickstart")
		bodies = await fetcher.fetch_many(["/sdks/send-payments", "/sdks/create-payee"])
	"""

	def __init__(
		self,
		cache: DocumentCache,
		base_url: str = DEFAULT_BASE_URL,
		timeout: Optional[float] = None,
		user_agent: str = "payman-docs-mcp/1.0",
	):
		"""
		Initialize the fetcher.

		Args:
			cache: Cache shared by every operation of the server
			base_url: Docs site root; ``<base_url><path>.md`` is requested
			timeout: Total request timeout in seconds (None leaves it to aiohttp)
			user_agent: User agent string
		"""
		self.cache = cache
		self.base_url = base_url.rstrip("/")
		self.timeout = timeout
		self.user_agent = user_agent

	@classmethod
	def from_config(cls, config: Config) -> "DocumentFetcher":
		return cls(
			DocumentCache(ttl=config.cache_ttl_seconds),
			base_url=config.base_url,
			timeout=config.request_timeout,
		)

	def url_for(self, path: str) -> str:
		return f"{self.base_url}{path}.md"

	def _session(self) -> aiohttp.ClientSession:
		kwargs = {"headers": {"User-Agent": self.user_agent}}
		if self.timeout is not None:
			kwargs["timeout"] = aiohttp.ClientTimeout(total=self.timeout)
		return aiohttp.ClientSession(**kwargs)

	async def fetch(self, path: str, session: Optional[aiohttp.ClientSession] = None) -> str:
		"""Return the body for ``path``; never raises for remote failures."""
		cached = self.cache.get(path)
		if cached is not None:
			logger.debug(f"Using cached content for: {path}")
			return cached

		started_at = self.cache.now()
		url = self.url_for(path)
		try:
			logger.info(f"Fetching: {url}")
			if session is None:
				async with self._session() as own_session:
					content = await self._download(own_session, url)
			else:
				content = await self._download(session, url)
		except Exception as e:
			logger.error(f"Error fetching documentation {url}: {describe_error(e)}")
			return placeholder(path, e)

		self.cache.put(path, content, started_at)
		return content

	async def fetch_many(self, paths: Iterable[str]) -> list[str]:
		"""Fetch several paths concurrently; results follow the input order."""
		paths = list(paths)
		if all(self.cache.get(p) is not None for p in paths):
			return [await self.fetch(p) for p in paths]

		async with self._session() as session:
			return list(await asyncio.gather(*(self.fetch(p, session) for p in paths)))

	async def _download(self, session: aiohttp.ClientSession, url: str) -> str:
		async with session.get(url) as response:
			if not 200 <= response.status < 300:
				raise DocumentFetchError(f"Failed to fetch: {response.status}")
			return await response.text()
