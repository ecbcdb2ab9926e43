"""
Runtime configuration for the parser's ambient behaviour.

Option tables are never stored here; they are built by the caller and passed
to ``parse`` explicitly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any


@dataclass
class RuntimeConfig:
    log_level: str = field(default_factory=lambda: os.environ.get("CMDPARSER_LOG_LEVEL", "WARNING"))
    help_width: int = 80

    def update(self, **kwargs: Any) -> None:
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"unknown config option '{key}'")
            setattr(self, key, value)

    def load_from_env(self, prefix: str = "CMDPARSER_") -> None:
        for key in ("LOG_LEVEL", "HELP_WIDTH"):
            env_key = f"{prefix}{key}"
            if env_key not in os.environ:
                continue
            value: Any = os.environ[env_key]
            if key == "HELP_WIDTH":
                value = int(value)
            setattr(self, key.lower(), value)


_GLOBAL_CONFIG = RuntimeConfig()


def get_config() -> RuntimeConfig:
    return _GLOBAL_CONFIG


def configure(**kwargs: Any) -> RuntimeConfig:
    _GLOBAL_CONFIG.update(**kwargs)
    return _GLOBAL_CONFIG
