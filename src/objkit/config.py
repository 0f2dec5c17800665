from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ObjkitConfig:
    json_indent: int | None = None  # None = compact output
    json_sort_keys: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ObjkitConfig:
        """Build a config from ``OBJKIT_*`` environment variables.

        Unset variables keep their defaults. A malformed
        ``OBJKIT_JSON_INDENT`` or an unknown ``OBJKIT_LOG_LEVEL`` raises
        ``ValueError``.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        raw_indent = env.get("OBJKIT_JSON_INDENT", "").strip()
        try:
            indent = int(raw_indent) if raw_indent else defaults.json_indent
        except ValueError as exc:
            raise ValueError(
                f"OBJKIT_JSON_INDENT must be an integer, got {raw_indent!r}"
            ) from exc

        raw_sort = env.get("OBJKIT_JSON_SORT_KEYS")
        sort_keys = (
            raw_sort.strip().lower() in _TRUTHY
            if raw_sort is not None
            else defaults.json_sort_keys
        )

        log_level = env.get("OBJKIT_LOG_LEVEL", defaults.log_level).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"OBJKIT_LOG_LEVEL is not a log level: {log_level!r}")

        return cls(json_indent=indent, json_sort_keys=sort_keys, log_level=log_level)

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for *log_level*."""
        return logging.getLevelName(self.log_level)
