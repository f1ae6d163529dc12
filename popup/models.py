from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PopupOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    show_definitions: bool = Field(
        default=True,
        alias="showDefinitions",
        description="Include gloss text in the rendered entries.",
    )
    copy_mode: bool = Field(
        default=False,
        alias="copyMode",
        description="Highlight the selected entry and show the copy legend.",
    )
    copy_index: Optional[int] = Field(
        default=None,
        alias="copyIndex",
        description="Raw copy cursor; wrapped by the number of entries.",
    )


class WordSearchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: List[Tuple[str, Optional[str]]] = Field(default_factory=list)
    more: bool = False

    @field_validator("data", mode="before")
    @classmethod
    def _normalize_rows(cls, value: Any) -> Any:
        if not isinstance(value, (list, tuple)):
            return value
        rows: List[Any] = []
        for item in value:
            if isinstance(item, str):
                rows.append((item, None))
            elif isinstance(item, (list, tuple)) and len(item) == 1:
                rows.append((item[0], None))
            elif isinstance(item, (list, tuple)) and len(item) > 2:
                rows.append((item[0], item[1]))
            else:
                rows.append(item)
        return rows

    @property
    def records(self) -> List[str]:
        return [record for record, _ in self.data]


class TranslateResult(WordSearchResult):
    text_len: int = Field(default=0, alias="textLen")


class NamesResult(WordSearchResult):
    names: bool = True


class KanjiReference(BaseModel):
    abbrev: str
    name: str


class KanjiComponent(BaseModel):
    radical: str
    yomi: str
    english: str


class KanjiEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kanji: str
    radical: str = ""
    eigo: str = ""
    misc: Dict[str, str] = Field(default_factory=dict)
    misc_display: List[KanjiReference] = Field(default_factory=list, alias="miscDisplay")
    components: Optional[List[KanjiComponent]] = None
    onkun: List[str] = Field(default_factory=list)
    nanori: List[str] = Field(default_factory=list)
    bushumei: List[str] = Field(default_factory=list)


SearchResult = Union[KanjiEntry, NamesResult, TranslateResult, WordSearchResult]


def parse_search_result(payload: Mapping[str, Any]) -> SearchResult:
    """Build the matching result model for a raw lookup payload.

    The shape is decided by its keys: ``kanji`` marks a kanji entry, ``names``
    a names-dictionary result and ``textLen`` a translate result; anything else
    is treated as a plain word search result.
    """

    if not isinstance(payload, Mapping):
        raise ValueError(f"Unsupported search result payload: {type(payload).__name__}")

    if "kanji" in payload:
        return KanjiEntry.model_validate(payload)
    if "names" in payload:
        return NamesResult.model_validate(payload)
    if "textLen" in payload or "text_len" in payload:
        return TranslateResult.model_validate(payload)
    return WordSearchResult.model_validate(payload)


@dataclass(slots=True)
class WordDisplayEntry:
    headword: str
    gloss: str
    readings: List[str] = field(default_factory=list)
    reason: Optional[str] = None


@dataclass(slots=True)
class NameVariant:
    reading: str
    headword: Optional[str] = None


@dataclass(slots=True)
class NameDisplayEntry:
    gloss: str
    variants: List[NameVariant] = field(default_factory=list)


@dataclass(slots=True)
class WordListing:
    entries: List[WordDisplayEntry]
    selected_index: int = -1
    more: bool = False


@dataclass(slots=True)
class NameListing:
    entries: List[NameDisplayEntry]
    selected_index: int = -1
    more: bool = False
    multicolumn: bool = False
