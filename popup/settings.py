from __future__ import annotations

import os
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Any


@dataclass(frozen=True)
class RenderSettings:
    """Presentation knobs shared by every popup render."""

    multicolumn_threshold: int = 4
    definition_separator: str = "; "
    reading_separator: str = "、 "
    more_marker: str = "..."


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def load_settings(**overrides: Any) -> RenderSettings:
    """Build settings from ``POPUP_*`` environment variables.

    Keyword arguments win over the environment.
    """

    defaults = RenderSettings()
    settings = RenderSettings(
        multicolumn_threshold=_env_int(
            "POPUP_MULTICOLUMN_THRESHOLD", defaults.multicolumn_threshold
        ),
        definition_separator=os.getenv(
            "POPUP_DEFINITION_SEPARATOR", defaults.definition_separator
        ),
        reading_separator=os.getenv(
            "POPUP_READING_SEPARATOR", defaults.reading_separator
        ),
        more_marker=os.getenv("POPUP_MORE_MARKER", defaults.more_marker),
    )
    if overrides:
        settings = replace(settings, **overrides)
    return settings


@lru_cache
def get_settings() -> RenderSettings:
    return load_settings()
