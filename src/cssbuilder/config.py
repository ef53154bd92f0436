from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CssBuilderConfig:
    json_separators: tuple[str, str] = (",", ":")
    json_sort_keys: bool = False
    log_level: str = "WARNING"


DEFAULT_CONFIG = CssBuilderConfig()
