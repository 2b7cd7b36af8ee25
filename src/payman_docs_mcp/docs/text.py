"""Markdown matching heuristics used by the query operations."""

import re
from dataclasses import dataclass
from typing import Iterable, Optional

# Characters of context kept on each side of a search hit
EXCERPT_WINDOW = 150
# Characters of the document returned when no section holds the query
FALLBACK_EXCERPT_LENGTH = 200
# Characters before a code block searched for the feature name
CODE_LOOKBEHIND = 300
# Maximum distance between an SDK token and the feature in a relevant document
SDK_PROXIMITY = 500
# Lines kept after the feature line in an SDK help excerpt
SDK_EXCERPT_LINES = 20

HEADING_SPLIT = re.compile(r"^#+\s+", re.MULTILINE)
NEWLINES = re.compile(r"\n+")


@dataclass
class SectionMatch:
	"""The first section of a document that mentions a query."""
	heading: str
	excerpt: str


def split_sections(content: str) -> list[str]:
	"""Split markdown on heading markers; each section starts with its heading text."""
	return HEADING_SPLIT.split(content)


def make_excerpt(text: str, query: str, window: int = EXCERPT_WINDOW) -> str:
	"""
	Cut a one-line preview of ``text`` around the first occurrence of ``query``.

	The window spans ``window`` characters on each side of the hit, clipped to
	the text; "..." marks each clipped end.
	"""
	query_lower = query.lower()
	index = text.lower().find(query_lower)
	start = max(0, index - window)
	end = min(len(text), index + len(query_lower) + window)
	excerpt = NEWLINES.sub(" ", text[start:end])
	prefix = "..." if start > 0 else ""
	suffix = "..." if end < len(text) else ""
	return f"{prefix}{excerpt}{suffix}"


def find_section(content: str, query: str) -> Optional[SectionMatch]:
	"""Return heading and excerpt of the first section containing ``query``."""
	query_lower = query.lower()
	for section in split_sections(content):
		if query_lower not in section.lower():
			continue
		heading, _, body = section.partition("\n")
		return SectionMatch(heading=heading, excerpt=make_excerpt(body, query))
	return None


def code_block_pattern(tags: Iterable[str]) -> re.Pattern:
	"""Fenced code blocks whose info string starts with one of ``tags``."""
	alternatives = "|".join(re.escape(tag) for tag in tags)
	return re.compile(rf"```(?:{alternatives})\b[^\n]*\n(.*?)```", re.DOTALL | re.IGNORECASE)


def extract_code_blocks(content: str, tags: Iterable[str], feature: str) -> list[str]:
	"""
	Return trimmed bodies of blocks tagged with ``tags`` that relate to ``feature``.

	A block relates to the feature when its body mentions it, or when the
	``CODE_LOOKBEHIND`` characters of document text before the body do.
	"""
	feature_lower = feature.lower()
	blocks = []
	for match in code_block_pattern(tags).finditer(content):
		code = match.group(1).strip()
		if feature_lower in code.lower():
			blocks.append(code)
			continue
		preceding = content[max(0, match.start(1) - CODE_LOOKBEHIND):match.start(1)]
		if feature_lower in preceding.lower():
			blocks.append(code)
	return blocks


def mentions_near(content: str, tokens: Iterable[str], feature: str, distance: int = SDK_PROXIMITY) -> bool:
	"""True if any token's first occurrence lies within ``distance`` of the feature's."""
	content_lower = content.lower()
	feature_index = content_lower.find(feature.lower())
	if feature_index == -1:
		return False
	for token in tokens:
		token_index = content_lower.find(token)
		if token_index != -1 and abs(token_index - feature_index) < distance:
			return True
	return False


def feature_excerpt(content: str, feature: str, lines_after: int = SDK_EXCERPT_LINES) -> Optional[str]:
	"""
	Excerpt from the heading above the first line mentioning ``feature``.

	Runs from the nearest preceding heading line (or the first line) up to
	``lines_after`` lines past the feature line. None if no line mentions it.
	"""
	feature_lower = feature.lower()
	lines = content.split("\n")
	feature_index = next(
		(i for i, line in enumerate(lines) if feature_lower in line.lower()),
		None,
	)
	if feature_index is None:
		return None

	heading_index = feature_index
	while heading_index > 0 and not lines[heading_index].startswith("#"):
		heading_index -= 1
	return "\n".join(lines[heading_index:feature_index + lines_after])
