"""Configuration system using platformdirs for cross-platform paths."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import platformdirs

APP_NAME = "payman-docs-mcp"

DEFAULT_BASE_URL = "https://docs.paymanai.com"
DEFAULT_CACHE_TTL = 3600


@dataclass
class Config:
	"""Central configuration with XDG/platform conventions."""

	config_dir: Path = field(default_factory=lambda: Path(platformdirs.user_config_dir(APP_NAME)))
	data_dir: Path = field(default_factory=lambda: Path(platformdirs.user_data_dir(APP_NAME)))

	# Derived paths
	config_file: Path = field(init=False)
	log_dir: Path = field(init=False)

	# Remote documentation
	base_url: str = DEFAULT_BASE_URL
	cache_ttl_seconds: float = DEFAULT_CACHE_TTL
	request_timeout: float | None = None

	log_level: str = "INFO"

	def __post_init__(self) -> None:
		self.config_file = self.config_dir / "config.toml"
		self.log_dir = self.data_dir / "logs"
		self.base_url = self.base_url.rstrip("/")

	def ensure_dirs(self) -> None:
		"""Create all required directories."""
		self.config_dir.mkdir(parents=True, exist_ok=True)
		self.data_dir.mkdir(parents=True, exist_ok=True)
		self.log_dir.mkdir(parents=True, exist_ok=True)


PATH_FIELDS = {"config_dir", "data_dir"}
NUMBER_FIELDS = {"cache_ttl_seconds", "request_timeout"}


def _coerce(key: str, val):
	"""Convert a raw env/toml value to the field's type."""
	if key in PATH_FIELDS:
		return Path(os.path.expanduser(str(val)))
	if key in NUMBER_FIELDS:
		try:
			return float(val)
		except (TypeError, ValueError) as e:
			raise ValueError(f"Invalid value for {key}: {val!r}") from e
	return str(val)


def _apply_env_overrides(config: Config) -> Config:
	"""Apply PAYMAN_DOCS_* environment variable overrides."""
	env_map = {
		"PAYMAN_DOCS_CONFIG_DIR": "config_dir",
		"PAYMAN_DOCS_DATA_DIR": "data_dir",
		"PAYMAN_DOCS_BASE_URL": "base_url",
		"PAYMAN_DOCS_CACHE_TTL": "cache_ttl_seconds",
		"PAYMAN_DOCS_REQUEST_TIMEOUT": "request_timeout",
		"PAYMAN_DOCS_LOG_LEVEL": "log_level",
	}
	for env_key, attr in env_map.items():
		val = os.getenv(env_key)
		if val:
			setattr(config, attr, _coerce(attr, val))
	# Recompute derived paths after overrides
	config.__post_init__()
	return config


def _apply_toml(config: Config) -> Config:
	"""Apply config.toml overrides if file exists."""
	toml_path = config.config_dir / "config.toml"
	if not toml_path.exists():
		return config

	with open(toml_path, "rb") as f:
		data = tomllib.load(f)

	for key, val in data.items():
		if key in PATH_FIELDS | NUMBER_FIELDS | {"base_url", "log_level"}:
			setattr(config, key, _coerce(key, val))

	# Recompute derived paths after toml overrides
	config.__post_init__()
	return config


def load_config() -> Config:
	"""Load config with precedence: env vars > config.toml > defaults."""
	config = Config()
	# The config dir itself may be overridden from the environment
	config_dir = os.getenv("PAYMAN_DOCS_CONFIG_DIR")
	if config_dir:
		config.config_dir = Path(os.path.expanduser(config_dir))
	config = _apply_toml(config)
	config = _apply_env_overrides(config)
	return config


# Singleton
_config: Config | None = None


def get_config() -> Config:
	"""Get or create the global config instance."""
	global _config
	if _config is None:
		_config = load_config()
	return _config
