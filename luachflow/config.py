"""
Configuration management for luachflow.

The library reads its default settings from a JSON file shipped inside
the package (``config_default_settings.json``).  These settings can be
overridden by user-specific values stored in a different location, for
example a file in the user's home directory.  This module provides a
simple API to load and merge configuration data.

Sections
--------
``calendar``
    ``in_israel`` and ``use_modern_holidays``, the two flags every
    holiday and parsha question depends on.
``tefila``
    The Tachanun minhag flags read by
    :meth:`luachflow.core.tefila_rules.TefilaRules.from_config`.
``logging``
    ``level`` and an optional ``file`` for
    :func:`luachflow.utils.calendar_logger.configure_calendar_logger`.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE: Path = Path(__file__).resolve().parent / "config_default_settings.json"

CONFIG_ENV_VAR = "LUACHFLOW_CONFIG"


@dataclass
class AppConfig:
    """In-memory representation of the configuration.

    Keys provided by the user that the library does not know about are
    preserved in ``data``.
    """

    data: Dict[str, Any] = field(default_factory=dict)

    def get(self, *keys: str, default: Optional[Any] = None) -> Any:
        """Retrieve a nested configuration value safely.

        Usage::

            config = load_config()
            in_israel = config.get("calendar", "in_israel", default=False)

        :param keys: Sequence of keys describing a path in the config.
        :param default: Value returned when the path does not exist.
        :return: The configuration value or ``default``.
        """
        current: Any = self.data
        for key in keys:
            if not isinstance(current, dict) or key not in current:
                return default
            current = current[key]
        return current

    def merge(self, other: Dict[str, Any]) -> None:
        """Merge another dictionary into this configuration.

        Values from ``other`` take precedence.  Nested dictionaries are
        merged recursively.
        """

        def _merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
            result = dict(a)
            for k, v in b.items():
                if isinstance(v, dict) and isinstance(a.get(k), dict):
                    result[k] = _merge(a[k], v)
                else:
                    result[k] = v
            return result

        self.data = _merge(self.data, other)


def load_config(user_config_path: Optional[os.PathLike] = None) -> AppConfig:
    """Load configuration from the default and optional user files.

    If ``user_config_path`` is given but does not exist, a warning is
    logged and only the defaults are used.  A user file that is not
    valid JSON raises :class:`json.JSONDecodeError`.

    :param user_config_path: Path to an optional JSON override file.
    :return: A fully merged :class:`AppConfig`.
    """
    with open(DEFAULT_CONFIG_FILE, "r", encoding="utf-8") as f:
        base = json.load(f)
    cfg = AppConfig(base)
    if user_config_path:
        user_path = Path(user_config_path)
        if user_path.is_file():
            with open(user_path, "r", encoding="utf-8") as uf:
                overrides = json.load(uf)
            cfg.merge(overrides)
            logger.debug("Loaded configuration overrides from %s", user_path)
        else:
            logger.warning("Configuration file %s not found; using defaults", user_path)
    return cfg


def get_app_config() -> AppConfig:
    """Return the configuration, honouring the ``LUACHFLOW_CONFIG`` variable.

    If set, the variable should point to a JSON file of overrides.
    """
    override_path = os.environ.get(CONFIG_ENV_VAR)
    return load_config(override_path)


__all__ = ["AppConfig", "load_config", "get_app_config", "DEFAULT_CONFIG_FILE", "CONFIG_ENV_VAR"]
