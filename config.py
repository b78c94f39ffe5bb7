import os
from functools import lru_cache

import yaml
from dotenv import load_dotenv

from constants import (
    DEFAULT_CACHE_MAX_AGE,
    DEFAULT_MAX_WORKERS,
    RESPONSE_SHAPE_ROOT,
    RESPONSE_SHAPES,
)

load_dotenv()


@lru_cache(maxsize=1)
def load_config(path="config.yml"):
    """Load configuration data from ``path`` and cache the result."""
    if not os.path.exists(path):
        return {}
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def get_settings(path=None):
    """Return resolved service settings from the config file and environment.

    ``LINEAR_API_KEY`` is only a fallback credential; per-request keys sent
    by the display client take precedence (see ``auth.resolve_api_key``).
    """
    config = load_config(path or os.getenv("CONFIG_PATH", "config.yml"))
    response_shape = config.get("response_shape", RESPONSE_SHAPE_ROOT)
    if response_shape not in RESPONSE_SHAPES:
        raise ValueError(
            f"Invalid response_shape {response_shape!r}; "
            f"expected one of {', '.join(RESPONSE_SHAPES)}"
        )
    max_workers = int(config.get("max_workers", DEFAULT_MAX_WORKERS))
    if max_workers < 1:
        raise ValueError(f"Invalid max_workers {max_workers!r}; expected at least 1")
    return {
        "response_shape": response_shape,
        "cache_max_age": int(config.get("cache_max_age", DEFAULT_CACHE_MAX_AGE)),
        "max_workers": max_workers,
        "fallback_api_key": os.getenv("LINEAR_API_KEY") or None,
    }
