"""Grammar for single-line dictionary records.

Each record has the format:

    仔クジラ [こくじら] /(n) whale calf/

Or without a kana reading:

    あっさり /(adv,adv-to,vs,on-mim) easily/readily/quickly/(P)/
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

LOGGER = logging.getLogger(__name__)

# Non-greedy headword, greedy gloss up to the last slash.
RECORD_PATTERN = re.compile(r"^(.+?)\s+(?:\[(.*?)\])?\s*/(.+)/")


@dataclass(frozen=True, slots=True)
class ParsedRecord:
    headword: str
    reading: Optional[str]
    gloss: str

    @property
    def has_reading(self) -> bool:
        # An empty bracket pair counts as no reading.
        return bool(self.reading)


def parse_record(text: str) -> Optional[ParsedRecord]:
    """Split a raw record into headword, reading and gloss.

    Returns ``None`` when the text does not follow the record grammar. The
    reading is ``None`` when the bracket is missing and ``""`` when the
    bracket is present but empty.
    """

    if not text:
        return None
    match = RECORD_PATTERN.match(text)
    if not match:
        LOGGER.debug("Record does not match the dictionary grammar: %r", text)
        return None
    headword, reading, gloss = match.groups()
    return ParsedRecord(headword=headword, reading=reading, gloss=gloss)
