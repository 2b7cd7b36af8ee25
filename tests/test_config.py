"""Tests for the configuration system."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from payman_docs_mcp.config import Config, _apply_env_overrides, load_config


def test_config_defaults():
	"""Config should have sensible defaults."""
	config = Config()
	assert config.config_dir.is_absolute()
	assert config.data_dir.is_absolute()
	assert config.config_file == config.config_dir / "config.toml"
	assert config.log_dir == config.data_dir / "logs"
	assert config.base_url == "https://docs.paymanai.com"
	assert config.cache_ttl_seconds == 3600
	assert config.request_timeout is None


def test_config_env_overrides():
	"""Environment variables should override defaults."""
	config = Config()
	with patch.dict(os.environ, {
		"PAYMAN_DOCS_DATA_DIR": "/tmp/test-data",
		"PAYMAN_DOCS_BASE_URL": "https://mirror.example.test/",
		"PAYMAN_DOCS_CACHE_TTL": "60",
		"PAYMAN_DOCS_REQUEST_TIMEOUT": "2.5",
	}):
		config = _apply_env_overrides(config)
		assert config.data_dir == Path("/tmp/test-data")
		# Derived paths should be recomputed
		assert config.log_dir == Path("/tmp/test-data/logs")
		assert config.base_url == "https://mirror.example.test"
		assert config.cache_ttl_seconds == 60.0
		assert config.request_timeout == 2.5


def test_invalid_number_is_rejected():
	with patch.dict(os.environ, {"PAYMAN_DOCS_CACHE_TTL": "an hour"}):
		with pytest.raises(ValueError, match="cache_ttl_seconds"):
			_apply_env_overrides(Config())


def test_config_ensure_dirs(tmp_path: Path):
	"""ensure_dirs should create all required directories."""
	config = Config(
		config_dir=tmp_path / "config",
		data_dir=tmp_path / "data",
	)
	assert not config.config_dir.exists()

	config.ensure_dirs()

	assert config.config_dir.exists()
	assert config.data_dir.exists()
	assert config.log_dir.exists()


def test_toml_then_env_precedence(tmp_path: Path):
	"""config.toml overrides defaults; env vars override config.toml."""
	config_dir = tmp_path / "config"
	config_dir.mkdir()
	(config_dir / "config.toml").write_text(
		'base_url = "https://toml.example.test"\n'
		"cache_ttl_seconds = 120\n"
		'log_level = "DEBUG"\n'
		'unknown_key = "ignored"\n'
	)
	with patch.dict(os.environ, {
		"PAYMAN_DOCS_CONFIG_DIR": str(config_dir),
		"PAYMAN_DOCS_CACHE_TTL": "30",
	}):
		config = load_config()

	assert config.config_dir == config_dir
	assert config.base_url == "https://toml.example.test"
	assert config.cache_ttl_seconds == 30.0
	assert config.log_level == "DEBUG"
	assert not hasattr(config, "unknown_key")
