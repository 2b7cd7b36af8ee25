"""Tests for the topic registry tables."""

import pytest

from payman_docs_mcp.docs.registry import (
	PROBLEM_CATEGORIES,
	SDK_TOPICS,
	TOPIC_IDS,
	TOPICS,
	Topic,
	UnknownTopicError,
	_build_topics,
	list_topics,
	metadata_of,
	path_of,
)


def test_twelve_topics_in_declared_order():
	assert len(TOPIC_IDS) == 12
	assert [t.id for t in list_topics()] == list(TOPIC_IDS)


def test_path_and_metadata_lookup():
	assert path_of("api-keys") == "/api-reference/get-api-key"
	assert metadata_of("quickstart") == ("Quickstart Guide", ("setup-and-installation", "api-keys"))


def test_unknown_topic_raises():
	with pytest.raises(UnknownTopicError):
		path_of("refunds")


def test_every_reference_is_a_registered_topic():
	"""Related topics, SDK topics and category topics all resolve."""
	referenced = set(SDK_TOPICS)
	for topic in TOPICS.values():
		referenced.update(topic.related)
	for category in PROBLEM_CATEGORIES:
		referenced.update(category.topics)
	assert referenced <= set(TOPICS)


def test_paths_are_unique_cache_keys():
	paths = [t.path for t in TOPICS.values()]
	assert len(set(paths)) == len(paths)
	assert all(p.startswith("/") and not p.endswith(".md") for p in paths)


def test_tables_are_read_only():
	with pytest.raises(TypeError):
		TOPICS["new"] = TOPICS["quickstart"]
	with pytest.raises(AttributeError):
		TOPICS["quickstart"].title = "Changed"


def test_build_rejects_dangling_related_topic():
	"""A related topic outside the registry fails the build."""
	topics = [
		Topic(t.id, t.path, t.title, ("refunds",) if t.id == "quickstart" else t.related)
		for t in TOPICS.values()
	]
	with pytest.raises(ValueError, match="quickstart relates to unknown topic refunds"):
		_build_topics(*topics)


def test_build_rejects_out_of_order_topics():
	with pytest.raises(ValueError, match="registry order"):
		_build_topics(*reversed(list(TOPICS.values())))
