"""CLI for payman-docs-mcp: serve, topics, and doctor commands."""

import argparse
import asyncio
import logging
import platform
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from . import __version__
from .config import load_config
from .docs.cache import DocumentCache
from .docs.fetcher import DocumentFetcher
from .docs.registry import QUICKSTART_PATH, list_topics
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
	"""Run the MCP server (stdio transport)."""
	config = load_config()
	setup_logging(config.log_level, config.log_dir)
	try:
		from .server import mcp
		logger.info("PaymanAI MCP Server running on stdio")
		mcp.run()
	except Exception:
		logger.exception("Fatal error in serve")
		sys.exit(1)


def render_topics(console: Console | None = None) -> None:
	"""Render the topic registry as a table."""
	console = console or Console()
	table = Table(title="PaymanAI Documentation Topics")
	table.add_column("Topic", style="cyan")
	table.add_column("Title")
	table.add_column("Path")
	table.add_column("Related", style="dim")
	for topic in list_topics():
		table.add_row(topic.id, topic.title, topic.path, ", ".join(topic.related))
	console.print(table)


def cmd_topics(args: argparse.Namespace) -> None:
	"""List the documentation topics served by get-documentation."""
	render_topics()


def _check_config_toml(config_dir: Path) -> tuple[str, str | None]:
	"""Validate config.toml. Returns (status, issue_or_none)."""
	import tomllib

	toml_path = config_dir / "config.toml"
	if not toml_path.exists():
		return "not found (optional)", None
	try:
		with open(toml_path, "rb") as f:
			tomllib.load(f)
		return "valid", None
	except tomllib.TOMLDecodeError as e:
		msg = f"config.toml parse error: {e}"
		return f"INVALID ({e})", msg


def _check_server_startup() -> tuple[str, str | None]:
	"""Try importing and counting registered tools. Returns (status, issue_or_none)."""
	try:
		from .server import mcp as server_instance
		# FastMCP stores tools internally - count them
		tools = server_instance._tool_manager._tools
		count = len(tools)
		return f"OK ({count} tools registered)", None
	except Exception as e:
		return f"FAILED ({e})", f"Server startup failed: {e}"


def _check_remote(fetcher: DocumentFetcher) -> tuple[str, str | None]:
	"""Fetch the quickstart page. Returns (status, issue_or_none)."""
	content = asyncio.run(fetcher.fetch(QUICKSTART_PATH))
	if QUICKSTART_PATH not in fetcher.cache:
		error_line = content.splitlines()[-1]
		return f"UNREACHABLE ({error_line})", f"Docs site unreachable: {fetcher.url_for(QUICKSTART_PATH)}"
	return f"OK ({len(content)} chars)", None


def cmd_doctor(args: argparse.Namespace) -> None:
	"""Health check - verify configuration and remote docs access."""
	print("payman-docs-mcp doctor")
	print(f"{'=' * 40}")

	try:
		config = load_config()
	except ValueError as e:
		print(f"  Config:  INVALID ({e})")
		sys.exit(1)
	issues: list[str] = []

	print(f"  Version: {__version__}")
	print(f"  Python:  {platform.python_version()}")
	print(f"  Config:  {config.config_dir}")
	print(f"  Logs:    {config.log_dir}")
	print()

	status, issue = _check_config_toml(config.config_dir)
	print(f"  config.toml:    {status}")
	if issue:
		issues.append(issue)

	status, issue = _check_server_startup()
	print(f"  Server:         {status}")
	if issue:
		issues.append(issue)

	fetcher = DocumentFetcher(
		DocumentCache(ttl=config.cache_ttl_seconds),
		base_url=config.base_url,
		timeout=config.request_timeout or 30,
	)
	status, issue = _check_remote(fetcher)
	print(f"  Docs site:      {status}")
	if issue:
		issues.append(issue)

	print()
	if issues:
		print(f"Found {len(issues)} issue(s):")
		for i in issues:
			print(f"  - {i}")
		sys.exit(1)
	print("All checks passed.")


def main() -> None:
	"""CLI entry point."""
	parser = argparse.ArgumentParser(
		prog="payman-docs-mcp",
		description="MCP server exposing PaymanAI documentation to AI assistants",
	)
	parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
	subparsers = parser.add_subparsers(dest="command")

	# serve
	serve_parser = subparsers.add_parser("serve", help="Run MCP server (stdio)")
	serve_parser.set_defaults(func=cmd_serve)

	# topics
	topics_parser = subparsers.add_parser("topics", help="List documentation topics")
	topics_parser.set_defaults(func=cmd_topics)

	# doctor
	doctor_parser = subparsers.add_parser("doctor", help="Health check")
	doctor_parser.set_defaults(func=cmd_doctor)

	args = parser.parse_args()

	if not args.command:
		parser.print_help()
		sys.exit(1)

	args.func(args)


if __name__ == "__main__":
	main()
