from __future__ import annotations

from typing import Optional, Tuple

KANA_COMMA = "、"


def format_definition(gloss: str, separator: str = "; ") -> str:
    """Replace the slash separators inside a gloss for display."""
    if not gloss:
        return ""
    return gloss.replace("/", separator)


def split_okurigana(reading: str) -> Tuple[str, Optional[str]]:
    """Split a kanji reading such as ``あた.える`` at the first dot.

    Returns the stem and the highlighted tail, or ``None`` for the tail when
    the reading has no dot.
    """
    index = reading.find(".")
    if index == -1:
        return reading, None
    return reading[:index], reading[index + 1 :]


def kentei_level(value: str) -> Tuple[str, bool]:
    """Return the displayed Kanji Kentei level and whether it is a pre-level."""
    if value.endswith(".5"):
        return value[:1], True
    return value, False
