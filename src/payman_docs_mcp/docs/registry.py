"""
Topic Registry - static tables describing the PaymanAI documentation set.

Every table here is built once at import time and exposed read-only.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping, get_args

TopicId = Literal[
	"quickstart",
	"playground",
	"setup-and-installation",
	"create-payees",
	"send-payments",
	"create-payee",
	"search-payees",
	"check-balances",
	"bill-payment-agent",
	"api-reference",
	"api-keys",
	"error-handling",
]

SdkName = Literal["nodejs", "python"]

TOPIC_IDS: tuple[str, ...] = get_args(TopicId)
SDK_NAMES: tuple[str, ...] = get_args(SdkName)


class UnknownTopicError(ValueError):
	"""Raised for an identifier outside the enumerated topic set."""


@dataclass(frozen=True)
class Topic:
	"""A documentation subject mapped to exactly one remote path."""
	id: str
	path: str
	title: str
	related: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProblemCategory:
	"""A troubleshooting category routed to by keyword triggers."""
	name: str
	keywords: tuple[str, ...]
	topics: tuple[str, ...]


def _build_topics(*topics: Topic) -> Mapping[str, Topic]:
	table = {t.id: t for t in topics}
	if tuple(table) != TOPIC_IDS:
		raise ValueError("registry order must follow TopicId")
	for topic in topics:
		for related in topic.related:
			if related not in table:
				raise ValueError(f"{topic.id} relates to unknown topic {related}")
	return MappingProxyType(table)


TOPICS: Mapping[str, Topic] = _build_topics(
	Topic("quickstart", "/overview/quickstart", "Quickstart Guide",
		("setup-and-installation", "api-keys")),
	Topic("playground", "/overview/playground", "API Playground",
		("api-reference", "api-keys")),
	Topic("setup-and-installation", "/sdks/setup-and-installation", "Setup and Installation",
		("api-keys", "quickstart")),
	Topic("create-payees", "/sdks/create-payees", "Create Payees",
		("create-payee", "search-payees")),
	Topic("send-payments", "/sdks/send-payments", "Send Payments",
		("check-balances", "create-payees")),
	Topic("create-payee", "/sdks/create-payee", "Create Payee",
		("create-payees", "search-payees")),
	Topic("search-payees", "/sdks/search-payees", "Search Payees",
		("create-payee", "create-payees")),
	Topic("check-balances", "/sdks/check-balances", "Check Balances",
		("send-payments",)),
	Topic("bill-payment-agent", "/guides/bill-payment-agent", "Bill Payment Agent",
		("send-payments",)),
	Topic("api-reference", "/api-reference/introduction", "API Reference",
		("error-handling", "api-keys")),
	Topic("api-keys", "/api-reference/get-api-key", "API Keys",
		("api-reference", "setup-and-installation")),
	Topic("error-handling", "/api-reference/error-handling", "Error Handling",
		("api-reference",)),
)

QUICKSTART_PATH = TOPICS["quickstart"].path

# Topics that document SDK usage, scanned by get-sdk-help in this order
SDK_TOPICS: tuple[str, ...] = (
	"setup-and-installation",
	"create-payees",
	"send-payments",
	"create-payee",
	"search-payees",
	"check-balances",
)

# Tokens that identify an SDK inside a document
SDK_IDENTIFIERS: Mapping[str, tuple[str, ...]] = MappingProxyType({
	"nodejs": ("node", "nodejs", "javascript", "js"),
	"python": ("python", "py"),
})

# Fence tags accepted for each code-example language
CODE_LANGUAGE_TAGS: Mapping[str, tuple[str, ...]] = MappingProxyType({
	"nodejs": ("javascript", "typescript", "js", "nodejs", "node"),
	"python": ("python", "py"),
})

PROBLEM_CATEGORIES: tuple[ProblemCategory, ...] = (
	ProblemCategory(
		"Authentication",
		("api key", "auth", "authentication", "unauthorized", "401"),
		("api-keys", "error-handling"),
	),
	ProblemCategory(
		"Payments",
		("payment", "send payment", "transaction", "failed payment"),
		("send-payments", "error-handling"),
	),
	ProblemCategory(
		"Payees",
		("payee", "recipient", "create payee", "add payee"),
		("create-payee", "create-payees"),
	),
	ProblemCategory(
		"Setup",
		("install", "setup", "configuration", "sdk", "initialize"),
		("setup-and-installation", "quickstart"),
	),
	ProblemCategory(
		"Error Handling",
		("error", "exception", "crash", "failed"),
		("error-handling", "api-reference"),
	),
)

DEFAULT_PROBLEM_TOPICS: tuple[str, ...] = ("error-handling", "api-reference", "quickstart")


def list_topics() -> tuple[Topic, ...]:
	"""All topics in registry order."""
	return tuple(TOPICS.values())


def get_topic(topic_id: str) -> Topic:
	try:
		return TOPICS[topic_id]
	except KeyError:
		raise UnknownTopicError(f"Unknown documentation topic: {topic_id}") from None


def path_of(topic_id: str) -> str:
	return get_topic(topic_id).path


def metadata_of(topic_id: str) -> tuple[str, tuple[str, ...]]:
	"""Return (title, related topic ids) for a topic."""
	topic = get_topic(topic_id)
	return topic.title, topic.related
