"""Tests for the markdown matching heuristics."""

from payman_docs_mcp.docs.registry import CODE_LANGUAGE_TAGS
from payman_docs_mcp.docs.text import (
	EXCERPT_WINDOW,
	extract_code_blocks,
	feature_excerpt,
	find_section,
	make_excerpt,
	mentions_near,
	split_sections,
)


class TestExcerpt:
	"""Window boundaries around the first hit."""

	def test_unclipped_when_text_is_short(self):
		assert make_excerpt("send a payment now", "payment") == "send a payment now"

	def test_boundaries_and_ellipses(self):
		text = "a" * 400 + "NEEDLE" + "b" * 400
		excerpt = make_excerpt(text, "needle")
		assert excerpt == "..." + "a" * EXCERPT_WINDOW + "NEEDLE" + "b" * EXCERPT_WINDOW + "..."

	def test_clipped_only_at_end(self):
		text = "x" * 10 + "hit" + "y" * 500
		excerpt = make_excerpt(text, "HIT")
		assert not excerpt.startswith("...")
		assert excerpt == "x" * 10 + "hit" + "y" * EXCERPT_WINDOW + "..."

	def test_clipped_only_at_start(self):
		text = "x" * 500 + "hit" + "y" * 10
		excerpt = make_excerpt(text, "hit")
		assert excerpt == "..." + "x" * EXCERPT_WINDOW + "hit" + "y" * 10

	def test_exact_window_is_not_clipped(self):
		text = "x" * EXCERPT_WINDOW + "hit" + "y" * EXCERPT_WINDOW
		assert make_excerpt(text, "hit") == text

	def test_newline_runs_collapse_to_one_space(self):
		assert make_excerpt("first\n\n\nsecond hit\nthird", "hit") == "first second hit third"


class TestSections:

	def test_split_on_heading_markers(self):
		content = "intro\n# One\nbody one\n## Two\nbody two"
		assert split_sections(content) == ["intro\n", "One\nbody one\n", "Two\nbody two"]

	def test_hash_without_whitespace_is_not_a_heading(self):
		assert split_sections("#hashtag\ntext") == ["#hashtag\ntext"]

	def test_first_matching_section_wins(self):
		content = "# Setup\nInstall the SDK.\n# Payments\nSend a payment with the SDK.\n"
		match = find_section(content, "sdk")
		assert match.heading == "Setup"
		assert match.excerpt == "Install the SDK. "

	def test_heading_only_match_uses_body_start(self):
		content = "# Payees\nCreate a recipient.\n"
		match = find_section(content, "payees")
		assert match.heading == "Payees"
		assert match.excerpt.startswith("Create a recipient.")

	def test_no_section_matches(self):
		assert find_section("# Title\nbody", "absent") is None


class TestCodeBlocks:

	DOC = (
		"# Send Payments\n\n"
		"Use sendPayment to pay a payee.\n\n"
		"```javascript\nconst r = await payman.sendPayment({ amount: 10 });\n```\n\n"
		"```python\nresult = payman.send_payment(amount=10)\n```\n\n"
		"```json\n{\"amount\": 10}\n```\n"
	)

	def test_python_tag_selects_python_blocks(self):
		blocks = extract_code_blocks(self.DOC, CODE_LANGUAGE_TAGS["python"], "send_payment")
		assert blocks == ["result = payman.send_payment(amount=10)"]

	def test_node_tags_skip_json_blocks(self):
		blocks = extract_code_blocks(self.DOC, CODE_LANGUAGE_TAGS["nodejs"], "amount")
		assert blocks == ["const r = await payman.sendPayment({ amount: 10 });"]

	def test_lookbehind_text_qualifies_block(self):
		doc = "## Balances\nCheck balances like this:\n\n```ts\nconst b = await client.get();\n```\n"
		tags = ("ts",) + CODE_LANGUAGE_TAGS["nodejs"]
		assert extract_code_blocks(doc, tags, "balances") == ["const b = await client.get();"]

	def test_lookbehind_is_limited(self):
		doc = "balances\n" + "." * 400 + "\n```js\nconst b = 1;\n```\n"
		assert extract_code_blocks(doc, CODE_LANGUAGE_TAGS["nodejs"], "balances") == []

	def test_unrelated_block_is_dropped(self):
		assert extract_code_blocks(self.DOC, CODE_LANGUAGE_TAGS["python"], "refund") == []


class TestSdkMatching:

	def test_token_near_feature(self):
		assert mentions_near("Python usage: call createPayee()", ("python", "py"), "createpayee")

	def test_token_too_far_from_feature(self):
		content = "python" + " " * 600 + "createPayee"
		assert not mentions_near(content, ("python", "py"), "createPayee")

	def test_feature_missing(self):
		assert not mentions_near("python everywhere", ("python",), "createPayee")

	def test_excerpt_starts_at_preceding_heading(self):
		lines = ["intro", "## Create a payee", "text"] + ["step"] * 3 + ["call createPayee()"] + [f"l{i}" for i in range(30)]
		excerpt = feature_excerpt("\n".join(lines), "createpayee")
		out = excerpt.split("\n")
		assert out[0] == "## Create a payee"
		# heading through 19 lines after the feature line
		assert out[-1] == "l18"

	def test_excerpt_without_heading_starts_at_first_line(self):
		excerpt = feature_excerpt("one\ntwo createPayee\nthree", "createPayee")
		assert excerpt == "one\ntwo createPayee\nthree"

	def test_excerpt_missing_feature(self):
		assert feature_excerpt("one\ntwo", "createPayee") is None
