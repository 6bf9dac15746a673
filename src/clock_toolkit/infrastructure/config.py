"""Configuration loader – reads .env and environment variables."""

from __future__ import annotations

import os
import threading
from pathlib import Path

from dotenv import load_dotenv

from clock_toolkit.application.ports import ConfigSource

DEFAULT_ENTRY_POINT_GROUP = "clock_toolkit.clock_suppliers"

CONFIG_KEYS = (
    "CLOCK_TOOLKIT_CLOCK_SUPPLIER_DEFAULT_CACHED",
    "CLOCK_TOOLKIT_VERBOSE",
)


def _load_env_file(env_path: str | None = None) -> None:
    if env_path:
        load_dotenv(env_path)
        return
    # Walk up to find .env
    cwd = Path.cwd()
    for d in [cwd, *cwd.parents]:
        candidate = d / ".env"
        if candidate.exists():
            load_dotenv(candidate)
            break


def load_config(env_path: str | None = None) -> dict[str, str | None]:
    """Load configuration from .env file and environment variables.

    Returns a dict of the config keys this toolkit cares about. Variables
    already present in the environment win over the .env file.
    """
    _load_env_file(env_path)
    return {key: os.environ.get(key) for key in CONFIG_KEYS}


def is_verbose() -> bool:
    return os.environ.get("CLOCK_TOOLKIT_VERBOSE", "").lower() in ("1", "true", "yes")


class EnvironmentConfig(ConfigSource):
    """Environment lookup; the .env file is loaded on the first ``get()``."""

    def __init__(self, env_path: str | None = None) -> None:
        self._env_path = env_path
        self._loaded = False
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        if not self._loaded:
            with self._lock:
                if not self._loaded:
                    _load_env_file(self._env_path)
                    self._loaded = True
        return os.environ.get(key)
