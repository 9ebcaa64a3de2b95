"""Typed access to MEDIA_INSPECT_* environment variables.

EnvReader takes an optional mapping so tests can supply variables without
touching os.environ.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import TypeVar

logger = logging.getLogger(__name__)

ENV_PREFIX = "MEDIA_INSPECT_"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})

T = TypeVar("T")


class EnvReader:
    """Read prefixed environment variables with type conversion.

    Names are given without the prefix::

        reader = EnvReader(env={"MEDIA_INSPECT_TIMEOUT": "30"})
        reader.get_float("TIMEOUT")  # 30.0

    Unparsable values log a warning and yield the default.
    """

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        prefix: str = ENV_PREFIX,
    ) -> None:
        self._env: Mapping[str, str] = os.environ if env is None else env
        self._prefix = prefix

    def name(self, key: str) -> str:
        """Full variable name for ``key``."""
        return f"{self._prefix}{key}"

    def _get(
        self, key: str, convert: Callable[[str], T], default: T | None
    ) -> T | None:
        var = self.name(key)
        raw = self._env.get(var)
        if raw is None:
            return default
        try:
            return convert(raw)
        except ValueError:
            logger.warning("Ignoring %s=%r: not a valid %s", var, raw, convert.__name__)
            return default

    def get_str(self, key: str, default: str | None = None) -> str | None:
        return self._get(key, str, default)

    def get_int(self, key: str, default: int | None = None) -> int | None:
        return self._get(key, int, default)

    def get_float(self, key: str, default: float | None = None) -> float | None:
        return self._get(key, float, default)

    def get_bool(self, key: str, default: bool | None = None) -> bool | None:
        """Boolean lookup. "1", "true", "yes" and "on" (any case) are true."""
        return self._get(key, lambda raw: raw.strip().lower() in _TRUE_VALUES, default)

    def get_path(self, key: str, default: Path | None = None) -> Path | None:
        """Path lookup with ``~`` expanded."""
        return self._get(key, lambda raw: Path(raw).expanduser(), default)
