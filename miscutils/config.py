"""Optional configuration for miscutils.

Configuration lives in a small YAML file, ``miscutils.yaml`` in the
current directory unless ``MISCUTILS_CONFIG`` points elsewhere::

    random:
      seed: 42            # reproducible RandomGenerator defaults
      max_attempts: 1000  # retry budget for next_value_except

A missing or unreadable file is treated as an empty configuration.
The file is read once and cached; ``reset()`` clears the cache (for tests).
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml

log = logging.getLogger(__name__)

CONFIG_ENV = "MISCUTILS_CONFIG"
SEED_ENV = "MISCUTILS_RANDOM_SEED"
DEFAULT_CONFIG_FILE = "miscutils.yaml"
DEFAULT_MAX_ATTEMPTS = 100000

_config: Optional[dict] = None


def config_path() -> Path:
    """Return the path of the configuration file (may not exist)."""
    return Path(os.environ.get(CONFIG_ENV, "") or DEFAULT_CONFIG_FILE)


def load_config() -> dict:
    """Load the configuration file.

    Returns the full config dict, or empty dict if the file doesn't exist
    or cannot be parsed.
    """
    global _config
    if _config is not None:
        return _config

    path = config_path()
    _config = {}
    if not path.exists():
        return _config
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        log.warning("Error loading config from %s: %s", path, e)
        return _config
    if not isinstance(data, dict):
        log.warning("Ignoring config %s: expected a mapping, got %s", path, type(data).__name__)
        return _config
    _config = data
    return _config


def _random_section() -> dict:
    section = load_config().get("random", {})
    return section if isinstance(section, dict) else {}


def get_random_seed() -> Optional[int]:
    """Seed for new RandomGenerator instances, or None for system randomness.

    Env var MISCUTILS_RANDOM_SEED takes precedence over ``random.seed``.
    """
    raw = os.environ.get(SEED_ENV, "").strip()
    if not raw:
        raw = _random_section().get("seed")
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        log.warning("Ignoring invalid random seed: %r", raw)
        return None


def get_max_attempts() -> int:
    """Retry budget for RandomGenerator.next_value_except.

    Config key: random.max_attempts (default: 100000).
    """
    value = _random_section().get("max_attempts", DEFAULT_MAX_ATTEMPTS)
    try:
        value = int(value)
    except (TypeError, ValueError):
        return DEFAULT_MAX_ATTEMPTS
    return value if value >= 1 else DEFAULT_MAX_ATTEMPTS


def reset() -> None:
    """Clear cached state (for tests)."""
    global _config
    _config = None
