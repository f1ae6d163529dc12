from __future__ import annotations

import html
import logging
import re
from typing import Iterable, List, Optional

from popup.messages import MessageCatalog, copy_instructions
from popup.models import (
    KanjiEntry,
    NameListing,
    NamesResult,
    PopupOptions,
    SearchResult,
    WordListing,
    WordSearchResult,
)
from popup.parsing import group_name_entries, group_word_entries
from popup.services.selection import selected_index
from popup.settings import RenderSettings, get_settings
from popup.utils.text import KANA_COMMA, format_definition, kentei_level, split_okurigana

LOGGER = logging.getLogger(__name__)

_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?\d")


def _escape(value: object) -> str:
    return html.escape(str(value))


def _element(tag: str, body: str = "", classes: Iterable[str] = ()) -> str:
    class_names = " ".join(name for name in classes if name)
    if class_names:
        return f'<{tag} class="{class_names}">{body}</{tag}>'
    return f"<{tag}>{body}</{tag}>"


def build_word_listing(
    result: WordSearchResult,
    options: Optional[PopupOptions] = None,
) -> WordListing:
    options = options or PopupOptions()
    entries = group_word_entries(result.data)
    return WordListing(
        entries=entries,
        selected_index=selected_index(options.copy_mode, options.copy_index, len(entries)),
        more=result.more,
    )


def build_name_listing(
    result: WordSearchResult,
    options: Optional[PopupOptions] = None,
    settings: Optional[RenderSettings] = None,
) -> NameListing:
    options = options or PopupOptions()
    settings = settings or get_settings()
    entries = group_name_entries(result.records)
    return NameListing(
        entries=entries,
        selected_index=selected_index(options.copy_mode, options.copy_index, len(entries)),
        more=result.more,
        multicolumn=len(entries) > settings.multicolumn_threshold,
    )


class PopupRenderer:
    """Turns a lookup result into popup markup."""

    def __init__(
        self,
        messages: Optional[MessageCatalog] = None,
        settings: Optional[RenderSettings] = None,
    ) -> None:
        self.messages = messages or MessageCatalog()
        self.settings = settings or get_settings()

    def render(
        self,
        result: SearchResult,
        title: Optional[str] = None,
        options: Optional[PopupOptions] = None,
    ) -> str:
        options = options or PopupOptions()
        if isinstance(result, KanjiEntry):
            return self.render_kanji_entry(result, options)
        if isinstance(result, NamesResult):
            return self.render_names_entries(result, options)
        if isinstance(result, WordSearchResult):
            return self.render_word_entries(result, title, options)
        raise ValueError(f"Unsupported search result: {type(result).__name__}")

    def render_word_entries(
        self,
        result: WordSearchResult,
        title: Optional[str],
        options: PopupOptions,
    ) -> str:
        listing = build_word_listing(result, options)
        LOGGER.debug(
            "Rendering %d word entries from %d records", len(listing.entries), len(result.data)
        )

        parts: List[str] = []
        if title:
            parts.append(_element("div", _escape(title), ["title"]))

        for index, entry in enumerate(listing.entries):
            heading: List[str] = [
                _element(
                    "span",
                    _escape(entry.headword),
                    ["w-kanji" if entry.readings else "w-kana"],
                )
            ]
            reading_spans = [
                _element("span", _escape(reading), ["w-kana"]) for reading in entry.readings
            ]
            if reading_spans:
                heading.append(_escape(self.settings.reading_separator).join(reading_spans))
            if entry.reason:
                heading.append(_element("span", _escape(f"({entry.reason})"), ["w-conj"]))

            body = [_element("div", "".join(heading))]
            if options.show_definitions:
                definition = format_definition(entry.gloss, self.settings.definition_separator)
                body.append(_element("span", _escape(definition), ["w-def"]))

            classes = ["entry", "-selected" if index == listing.selected_index else ""]
            parts.append(_element("div", "".join(body), classes))

        if listing.more:
            parts.append(self._render_more())

        if options.copy_mode:
            parts.append(self._render_copy_instructions())

        return _element("div", "".join(parts), ["wordlist"])

    def render_names_entries(self, result: WordSearchResult, options: PopupOptions) -> str:
        listing = build_name_listing(result, options, self.settings)
        LOGGER.debug(
            "Rendering %d name entries from %d records", len(listing.entries), len(result.data)
        )

        rows: List[str] = []
        for index, entry in enumerate(listing.entries):
            headings: List[str] = []
            for name in entry.variants:
                spans = []
                if name.headword:
                    spans.append(_element("span", _escape(name.headword), ["w-kanji"]))
                spans.append(_element("span", _escape(name.reading), ["w-kana"]))
                headings.append(_element("div", "".join(spans), ["heading"]))

            definition = format_definition(entry.gloss, self.settings.definition_separator)
            body = _element("div", "".join(headings), ["w-title"]) + _element(
                "div", _escape(definition), ["w-def"]
            )
            classes = ["entry", "-selected" if index == listing.selected_index else ""]
            rows.append(_element("div", body, classes))

        if listing.more:
            rows.append(self._render_more())

        parts = [
            _element("div", _escape(self.messages.get("content_names_dictionary")), ["title"]),
            _element(
                "div",
                "".join(rows),
                ["name-table", "-multicol" if listing.multicolumn else ""],
            ),
        ]
        if options.copy_mode:
            parts.append(self._render_copy_instructions())

        return _element("div", "".join(parts))

    def render_kanji_entry(self, entry: KanjiEntry, options: PopupOptions) -> str:
        table: List[str] = [self._render_kanji_summary(entry)]

        if entry.components:
            rows = []
            for index, component in enumerate(entry.components):
                parity = (index + 1) % 2
                cells = [
                    _element("td", _escape(component.radical), [f"k-bbox-{parity}a"]),
                    _element("td", _escape(component.yomi), [f"k-bbox-{parity}b"]),
                    _element("td", _escape(component.english), [f"k-bbox-{parity}b"]),
                ]
                rows.append(_element("tr", "".join(cells)))
            table.append(_element("table", "".join(rows), ["k-bbox-tb"]))

        table.append(_element("span", _escape(entry.kanji), ["k-kanji"]))
        table.append("<br>")
        table.append(_element("div", _escape(entry.eigo), ["k-eigo"]))
        table.append(_element("div", self._render_kanji_readings(entry), ["k-yomi"]))
        table.append(_element("div", self._render_kanji_references(entry), ["references"]))

        parts = [
            _element(
                "div",
                "".join(table),
                ["kanji-table", "-copy" if options.copy_mode else ""],
            )
        ]
        if options.copy_mode:
            parts.append(self._render_copy_instructions(kanji=True))
        return "".join(parts)

    def _render_kanji_summary(self, entry: KanjiEntry) -> str:
        misc = entry.misc
        radical = f"{entry.radical} {misc.get('B', '')}".strip()
        cells = [
            self._labelled("content_kanji_radical_label", radical),
            self._render_grade(misc.get("G")),
            self._labelled("content_kanji_frequency_label", misc.get("F") or "-"),
            self._labelled("content_kanji_strokes_label", misc.get("S") or "-"),
        ]
        return _element(
            "div",
            "".join(_element("div", cell, ["cell"]) for cell in cells),
            ["summary-box"],
        )

    def _labelled(self, key: str, value: str) -> str:
        return f"{_escape(self.messages.get(key))}<br>{_escape(value)}"

    def _render_grade(self, grade: Optional[str]) -> str:
        if grade == "8":
            return _escape(self.messages.get("content_kanji_grade_general_use"))
        if grade == "9":
            return _escape(self.messages.get("content_kanji_grade_name_use"))
        if grade is None or not _NUMERIC_PREFIX.match(grade):
            return "-"
        return self._labelled("content_kanji_grade_label", grade)

    def _render_kanji_readings(self, entry: KanjiEntry) -> str:
        parts: List[str] = []
        for index, reading in enumerate(entry.onkun):
            if index:
                parts.append(KANA_COMMA)
            stem, tail = split_okurigana(reading)
            parts.append(_escape(stem))
            if tail is not None:
                parts.append(_element("span", _escape(tail), ["k-yomi-hi"]))

        for label, values in (("名乗り", entry.nanori), ("部首名", entry.bushumei)):
            if not values:
                continue
            parts.append("<br>")
            parts.append(_element("span", label, ["k-yomi-ti"]))
            parts.append(" " + _escape(KANA_COMMA.join(values)))
        return "".join(parts)

    def _render_kanji_references(self, entry: KanjiEntry) -> str:
        cells: List[str] = []
        for ref in entry.misc_display:
            value = entry.misc.get(ref.abbrev) or "-"
            is_kanken = ref.name == "Kanji Kentei"
            name = self.messages.get("content_kanji_kentei_label") if is_kanken else ref.name

            if is_kanken:
                level, is_pre = kentei_level(value)
                key = "content_kanji_kentei_level_pre" if is_pre else "content_kanji_kentei_level"
                value = self.messages.get(key, level)

            cells.append(_element("div", _escape(name), ["name"]))
            cells.append(_element("div", _escape(value), ["value"]))
        return "".join(cells)

    def _render_more(self) -> str:
        return _element("div", _escape(self.settings.more_marker), ["more"])

    def _render_copy_instructions(self, kanji: bool = False) -> str:
        return _element("div", copy_instructions(kanji=kanji), ["copy"])


def render_popup(
    result: SearchResult,
    title: Optional[str] = None,
    options: Optional[PopupOptions] = None,
    *,
    messages: Optional[MessageCatalog] = None,
    settings: Optional[RenderSettings] = None,
) -> str:
    """Convenience helper that renders a result with a one-off renderer."""

    renderer = PopupRenderer(messages=messages, settings=settings)
    return renderer.render(result, title, options)
