"""Parsing helpers for raw dictionary records."""

from .grouping import group_name_entries, group_word_entries
from .records import RECORD_PATTERN, ParsedRecord, parse_record

__all__ = [
    "RECORD_PATTERN",
    "ParsedRecord",
    "parse_record",
    "group_word_entries",
    "group_name_entries",
]
