from __future__ import annotations

import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    log_level: str = "WARNING"
    json_indent: int = 2

    @classmethod
    def from_env(cls) -> BuilderConfig:
        """Defaults overridden by CSSBUILDER_LOG_LEVEL / CSSBUILDER_JSON_INDENT.

        Raises ValueError naming the variable when a value is unusable.
        """
        defaults = cls()
        log_level = os.environ.get("CSSBUILDER_LOG_LEVEL", defaults.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"CSSBUILDER_LOG_LEVEL: unknown log level {log_level!r}")

        raw_indent = os.environ.get("CSSBUILDER_JSON_INDENT")
        if raw_indent is None:
            json_indent = defaults.json_indent
        else:
            try:
                json_indent = int(raw_indent)
            except ValueError:
                raise ValueError(
                    f"CSSBUILDER_JSON_INDENT: expected an integer, got {raw_indent!r}"
                ) from None
            if json_indent < 0:
                raise ValueError(
                    f"CSSBUILDER_JSON_INDENT: must not be negative, got {json_indent}"
                )

        return cls(log_level=log_level, json_indent=json_indent)
