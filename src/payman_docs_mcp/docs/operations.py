"""
Documentation query operations.

Each operation composes the topic registry with fetched document bodies and
returns a markdown answer for the assistant host.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from . import registry
from .fetcher import DocumentFetcher
from .text import (
	FALLBACK_EXCERPT_LENGTH,
	extract_code_blocks,
	feature_excerpt,
	find_section,
	mentions_near,
)

logger = logging.getLogger(__name__)

RULE = "\n\n---\n\n"


def _pointer(topic_id: str) -> str:
	return f'use get-documentation with topic "{topic_id}"'


@dataclass
class SearchMatch:
	"""One search hit per topic."""
	topic: str
	title: str
	section: str
	excerpt: str


@dataclass
class CodeExample:
	"""Code blocks extracted from one topic's document."""
	topic: str
	title: str
	blocks: list[str]


@dataclass
class SdkHelpResult:
	"""A scored SDK help excerpt from one topic."""
	topic: str
	heading: str
	content: str
	relevance: int


async def get_documentation(fetcher: DocumentFetcher, topic: str) -> str:
	"""Full document for ``topic`` followed by its related topics."""
	path = registry.path_of(topic)
	logger.info(f"Getting doc for topic: {topic}, path: {path}")
	content = await fetcher.fetch(path)

	_, related = registry.metadata_of(topic)
	if not related:
		return content
	lines = [f"- {registry.get_topic(t).title} ({_pointer(t)})" for t in related]
	return content + "\n\n## Related Topics\n\n" + "\n".join(lines)


def match_document(topic: registry.Topic, content: str, query: str) -> Optional[SearchMatch]:
	"""SearchMatch for ``content`` if it contains ``query`` (case-insensitive)."""
	if query.lower() not in content.lower():
		return None

	section = find_section(content, query)
	heading = section.heading if section else ""
	excerpt = section.excerpt if section else ""
	return SearchMatch(
		topic=topic.id,
		title=topic.title,
		section=heading,
		excerpt=excerpt or content[:FALLBACK_EXCERPT_LENGTH] + "...",
	)


def suggest_topics(query: str) -> list[registry.Topic]:
	"""Topics whose identifier or title contains ``query``."""
	query_lower = query.lower()
	return [
		t for t in registry.list_topics()
		if query_lower in t.id or query_lower in t.title.lower()
	]


async def search_documentation(fetcher: DocumentFetcher, query: str) -> str:
	"""Search every registered document for ``query``."""
	logger.info(f'Searching for: "{query}"')
	topics = registry.list_topics()
	contents = await fetcher.fetch_many(t.path for t in topics)

	matches = [
		m for m in (match_document(t, c, query) for t, c in zip(topics, contents))
		if m is not None
	]

	if not matches:
		suggestion_text = ""
		suggestions = suggest_topics(query)
		if suggestions:
			suggestion_text = "\n\nYou might be interested in these topics:\n\n" + "\n".join(
				f"- {t.title} ({_pointer(t.id)})" for t in suggestions
			)
		return f'No results found for "{query}". Try a different search term.{suggestion_text}'

	blocks = []
	for m in matches:
		section_heading = f"### {m.section}\n\n" if m.section else ""
		blocks.append(
			f"## {m.title}\n\n{section_heading}{m.excerpt}\n\n"
			f'*For full documentation, use the get-documentation tool with topic "{m.topic}".*'
		)
	return f'# Search Results for "{query}"\n\n' + RULE.join(blocks)


def candidate_topics(feature: str) -> list[registry.Topic]:
	"""Topics named after ``feature``, or every topic when none is."""
	named = suggest_topics(feature)
	return named or list(registry.list_topics())


async def get_code_examples(fetcher: DocumentFetcher, feature: str, language: str = "nodejs") -> str:
	"""Code blocks in ``language`` that relate to ``feature``."""
	logger.info(f'Getting {language} code example for: "{feature}"')
	tags = registry.CODE_LANGUAGE_TAGS[language]
	topics = candidate_topics(feature)
	contents = await fetcher.fetch_many(t.path for t in topics)

	examples = []
	for topic, content in zip(topics, contents):
		blocks = extract_code_blocks(content, tags, feature)
		if blocks:
			examples.append(CodeExample(topic=topic.id, title=topic.title, blocks=blocks))

	if not examples:
		return (
			f'No {language} code examples found for "{feature}". Try searching for a different '
			"feature or check the full documentation using get-documentation."
		)

	fence = "javascript" if language == "nodejs" else "python"
	text = f'# {language.upper()} Code Examples for "{feature}"\n\n'
	for example in examples:
		text += f"## From {example.title}\n\n"
		for number, code in enumerate(example.blocks, start=1):
			text += f"### Example {number}\n\n```{fence}\n{code}\n```\n\n"
		text += f"*For more context, check the full documentation: {_pointer(example.topic)}.*{RULE}"
	return text


SDK_GUIDANCE = {
	"nodejs": (
		"- Check you're using the latest version: `npm view @paymanai/sdk version`\n"
		"- Update if needed: `npm install @paymanai/sdk@latest`\n"
		"- Verify your environment variables are set correctly\n"
		"- Use try/catch blocks to properly handle API errors\n"
	),
	"python": (
		"- Check you're using the latest version: `pip show paymanai`\n"
		"- Update if needed: `pip install --upgrade paymanai`\n"
		"- Handle exceptions properly with try/except blocks\n"
		"- Ensure your Python version is compatible (3.7+)\n"
	),
}

TROUBLESHOOTING_STEPS = (
	"1. **Check your API credentials** - Verify your API key is valid and correctly formatted\n"
	"2. **Look for specific error codes** - Error codes provide detailed information about what went wrong\n"
	"3. **Check your request format** - Ensure all required parameters are included and properly formatted\n"
	"4. **Review rate limits** - Make sure you're not exceeding API rate limits\n"
)


def match_categories(problem: str) -> list[registry.ProblemCategory]:
	problem_lower = problem.lower()
	return [
		c for c in registry.PROBLEM_CATEGORIES
		if any(keyword in problem_lower for keyword in c.keywords)
	]


def topics_for_problem(problem: str) -> list[str]:
	"""Deduplicated topics of every matching category, in first-seen order."""
	categories = match_categories(problem)
	if not categories:
		return list(registry.DEFAULT_PROBLEM_TOPICS)
	return list(dict.fromkeys(t for c in categories for t in c.topics))


def solve_problem(problem: str, sdk: Optional[str] = None) -> str:
	"""Static troubleshooting guide routed by the problem's keywords."""
	logger.info(f'Solving problem: "{problem}" for SDK: {sdk or "any"}')
	categories = match_categories(problem)

	text = f'# Solution for: "{problem}"\n\n'
	if categories:
		text += f"This appears to be a {'/'.join(c.name for c in categories)} related issue.\n\n"

	if sdk:
		text += f"## {sdk.upper()} SDK Specific Guidance\n\n"
		text += f"When working with the {sdk} SDK, make sure to:\n\n"
		text += SDK_GUIDANCE[sdk] + "\n"

	text += "## Troubleshooting Steps\n\n" + TROUBLESHOOTING_STEPS + "\n"

	text += "## Relevant Documentation\n\n"
	for topic_id in topics_for_problem(problem):
		text += f"- {registry.get_topic(topic_id).title}: {_pointer(topic_id)}\n"
	return text


def score_sdk_help(topic_id: str, content: str, sdk: str, feature: str) -> Optional[SdkHelpResult]:
	"""Scored excerpt for one document, or None if it is not relevant."""
	if not mentions_near(content, registry.SDK_IDENTIFIERS[sdk], feature):
		return None

	excerpt = feature_excerpt(content, feature)
	if excerpt is None:
		return None

	relevance = 2 if sdk in content.lower() else 1
	if feature.lower() in excerpt.lower():
		relevance += 3
	return SdkHelpResult(
		topic=topic_id,
		heading=excerpt.split("\n", 1)[0],
		content=excerpt,
		relevance=relevance,
	)


async def get_sdk_help(fetcher: DocumentFetcher, sdk: str, feature: str) -> str:
	"""Excerpts about ``feature`` from the SDK topics, most relevant first."""
	logger.info(f"Getting help for {sdk} SDK feature: {feature}")
	contents = await fetcher.fetch_many(registry.path_of(t) for t in registry.SDK_TOPICS)

	results = [
		r for r in (
			score_sdk_help(t, c, sdk, feature) for t, c in zip(registry.SDK_TOPICS, contents)
		)
		if r is not None
	]
	# sorted() is stable, so ties keep scan order
	results = sorted(results, key=lambda r: r.relevance, reverse=True)

	if not results:
		return (
			f"No specific help found for {feature} in the {sdk} SDK. Try checking the full SDK "
			"documentation with get-documentation or using more generic terms."
		)

	text = f"# {sdk.upper()} SDK Help: {feature}\n\n"
	for result in results:
		text += f"## From {registry.get_topic(result.topic).title}\n\n"
		text += f"{result.content}\n\n"
		text += f"*For complete documentation, {_pointer(result.topic)}*{RULE}"

	text += "## Additional Resources\n\n"
	text += f'- Setup and Installation: {_pointer("setup-and-installation")}\n'
	text += f'- Error Handling: {_pointer("error-handling")}\n'
	text += f'- For code examples, try the get-code-examples tool with feature="{feature}" and language="{sdk}"\n'
	return text
