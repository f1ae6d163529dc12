"""Lookup popup rendering: record parsing, entry grouping and markup."""

from .messages import MessageCatalog
from .models import (
    KanjiEntry,
    NameDisplayEntry,
    NameListing,
    NamesResult,
    NameVariant,
    PopupOptions,
    TranslateResult,
    WordDisplayEntry,
    WordListing,
    WordSearchResult,
    parse_search_result,
)
from .parsing import ParsedRecord, group_name_entries, group_word_entries, parse_record
from .services import (
    PopupRenderer,
    build_name_listing,
    build_word_listing,
    render_popup,
    selected_index,
)
from .settings import RenderSettings, get_settings, load_settings

__all__ = [
    "KanjiEntry",
    "MessageCatalog",
    "NameDisplayEntry",
    "NameListing",
    "NameVariant",
    "NamesResult",
    "ParsedRecord",
    "PopupOptions",
    "PopupRenderer",
    "RenderSettings",
    "TranslateResult",
    "WordDisplayEntry",
    "WordListing",
    "WordSearchResult",
    "build_name_listing",
    "build_word_listing",
    "get_settings",
    "group_name_entries",
    "group_word_entries",
    "load_settings",
    "parse_record",
    "parse_search_result",
    "render_popup",
    "selected_index",
]
