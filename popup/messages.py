from __future__ import annotations

import logging
import re
from typing import Dict, Mapping, Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_MESSAGES: Dict[str, str] = {
    "content_names_dictionary": "Names Dictionary",
    "content_kanji_radical_label": "radical",
    "content_kanji_grade_general_use": "general use",
    "content_kanji_grade_name_use": "name use",
    "content_kanji_grade_label": "grade",
    "content_kanji_frequency_label": "freq",
    "content_kanji_strokes_label": "strokes",
    "content_kanji_kentei_label": "Kanji Kentei",
    "content_kanji_kentei_level": "Level $1",
    "content_kanji_kentei_level_pre": "Pre-level $1",
}

COPY_KEYS_WORD = (
    "Copy: <kbd>e</kbd> = entry, <kbd>w</kbd> = word, "
    "<kbd>f</kbd> = fields, <kbd>Esc</kbd> = cancel"
)
COPY_KEYS_KANJI = (
    "Copy: <kbd>e</kbd> = entry, <kbd>w</kbd> = kanji, "
    "<kbd>f</kbd> = fields, <kbd>Esc</kbd> = cancel"
)

_PLACEHOLDER_PATTERN = re.compile(r"\$([1-9])")


class MessageCatalog:
    """Localized strings looked up by key, with ``$1``-style placeholders."""

    def __init__(self, messages: Optional[Mapping[str, str]] = None) -> None:
        self._messages: Dict[str, str] = dict(DEFAULT_MESSAGES)
        if messages:
            self._messages.update(messages)

    def get(self, key: str, *substitutions: str) -> str:
        template = self._messages.get(key)
        if template is None:
            LOGGER.warning("Missing message for key %s", key)
            return key
        if not substitutions:
            return template

        def _substitute(match: re.Match[str]) -> str:
            position = int(match.group(1)) - 1
            if position < len(substitutions):
                return str(substitutions[position])
            return ""

        return _PLACEHOLDER_PATTERN.sub(_substitute, template)


def copy_instructions(kanji: bool = False) -> str:
    return COPY_KEYS_KANJI if kanji else COPY_KEYS_WORD
