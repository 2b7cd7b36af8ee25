"""Tests for payman-docs-mcp."""
