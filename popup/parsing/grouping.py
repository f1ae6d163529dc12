"""Group parsed dictionary records into display entries."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from popup.models import NameDisplayEntry, NameVariant, WordDisplayEntry

from .records import ParsedRecord, parse_record

LOGGER = logging.getLogger(__name__)

WordRow = Tuple[str, Optional[str]]


def group_word_entries(rows: Iterable[WordRow]) -> List[WordDisplayEntry]:
    """Combine adjacent records that share both headword and gloss.

    Only the reading of a merged record is kept; its inflection reason is
    dropped in favour of the first record's.
    """

    entries: List[WordDisplayEntry] = []
    for raw, reason in rows:
        parsed = parse_record(raw)
        if parsed is None:
            continue

        prev_entry = entries[-1] if entries else None
        if (
            prev_entry is not None
            and prev_entry.headword == parsed.headword
            and prev_entry.gloss == parsed.gloss
        ):
            if parsed.has_reading:
                prev_entry.readings.append(parsed.reading)
            continue

        entry = WordDisplayEntry(
            headword=parsed.headword,
            gloss=parsed.gloss,
            reason=reason,
        )
        if parsed.has_reading:
            entry.readings.append(parsed.reading)
        entries.append(entry)

    return entries


def _unwrap_embedded_record(parsed: ParsedRecord) -> ParsedRecord:
    # Names mixing katakana and hiragana sometimes repeat the whole record in
    # the gloss field, e.g.
    #
    #   あか組４ [あかぐみふぉー] /あか組４ [あかぐみフォー] /Akagumi Four (h)//
    #
    # Only one level is unwrapped.
    embedded = parse_record(parsed.gloss)
    if embedded is None:
        return parsed
    LOGGER.debug(
        "Using embedded record %r instead of %r", embedded.headword, parsed.headword
    )
    return embedded


def _name_variant(parsed: ParsedRecord) -> NameVariant:
    if parsed.has_reading:
        return NameVariant(headword=parsed.headword, reading=parsed.reading)
    return NameVariant(headword=None, reading=parsed.headword)


def group_name_entries(records: Iterable[str]) -> List[NameDisplayEntry]:
    """Combine adjacent name records whose glosses match.

    Unlike word entries the headword is not compared, so differently written
    names sharing a gloss end up as variants of a single entry.
    """

    entries: List[NameDisplayEntry] = []
    for raw in records:
        parsed = parse_record(raw)
        if parsed is None:
            continue
        parsed = _unwrap_embedded_record(parsed)
        variant = _name_variant(parsed)

        prev_entry = entries[-1] if entries else None
        if prev_entry is not None and prev_entry.gloss == parsed.gloss:
            prev_entry.variants.append(variant)
            continue

        entries.append(NameDisplayEntry(gloss=parsed.gloss, variants=[variant]))

    return entries
