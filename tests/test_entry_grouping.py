from popup.models import NameDisplayEntry, NameVariant, WordDisplayEntry
from popup.parsing import group_name_entries, group_word_entries


def _words(*records):
    return [(record, None) for record in records]


def test_same_headword_and_gloss_merge_readings():
    entries = group_word_entries(
        [
            ("生 [なま] /(adj-no) raw/", "past"),
            ("生 [き] /(adj-no) raw/", "polite"),
        ]
    )
    assert entries == [
        WordDisplayEntry(headword="生", gloss="(adj-no) raw", readings=["なま", "き"], reason="past")
    ]


def test_different_headwords_with_equal_gloss_stay_separate():
    entries = group_word_entries(
        _words("仔クジラ [こくじら] /(n) whale calf/", "仔鯨 [こくじら] /(n) whale calf/")
    )
    assert [entry.headword for entry in entries] == ["仔クジラ", "仔鯨"]
    assert [entry.readings for entry in entries] == [["こくじら"], ["こくじら"]]


def test_record_without_reading_has_no_readings():
    entries = group_word_entries(
        _words("あっさり /(adv,adv-to,vs,on-mim) easily/readily/quickly/(P)/")
    )
    assert len(entries) == 1
    assert entries[0].readings == []
    assert entries[0].gloss == "(adv,adv-to,vs,on-mim) easily/readily/quickly/(P)"
    assert entries[0].reason is None


def test_word_merge_is_adjacency_based():
    a = "日 [ひ] /(n) day/"
    a_alt = "日 [にち] /(n) day/"
    b = "月 [つき] /(n) moon/"
    entries = group_word_entries(_words(a, a_alt, b, a))
    assert [(entry.headword, entry.readings) for entry in entries] == [
        ("日", ["ひ", "にち"]),
        ("月", ["つき"]),
        ("日", ["ひ"]),
    ]


def test_duplicate_readings_are_preserved():
    entries = group_word_entries(_words("日 [ひ] /(n) day/", "日 [ひ] /(n) day/"))
    assert entries[0].readings == ["ひ", "ひ"]


def test_merge_without_reading_keeps_existing_readings():
    entries = group_word_entries(_words("日 [ひ] /(n) day/", "日 [] /(n) day/", "日 /(n) day/"))
    assert len(entries) == 1
    assert entries[0].readings == ["ひ"]


def test_unparseable_word_records_are_skipped():
    entries = group_word_entries(
        [
            ("日 [ひ] /(n) day/", "reason"),
            ("broken record", "ignored"),
            ("日 [にち] /(n) day/", None),
        ]
    )
    # The broken record is not an accepted entry, so adjacency still holds.
    assert len(entries) == 1
    assert entries[0].readings == ["ひ", "にち"]
    assert entries[0].reason == "reason"


def test_word_grouping_is_deterministic():
    rows = _words("日 [ひ] /(n) day/", "日 [にち] /(n) day/", "月 [つき] /(n) moon/")
    assert group_word_entries(rows) == group_word_entries(rows)


def test_empty_word_input():
    assert group_word_entries([]) == []


def test_names_merge_on_gloss_only():
    entries = group_name_entries(
        [
            "美咲 [みさき] /Misaki (f)/",
            "岬 [みさき] /Misaki (f)/",
            "みさき /Misaki (f)/",
        ]
    )
    assert entries == [
        NameDisplayEntry(
            gloss="Misaki (f)",
            variants=[
                NameVariant(headword="美咲", reading="みさき"),
                NameVariant(headword="岬", reading="みさき"),
                NameVariant(headword=None, reading="みさき"),
            ],
        )
    ]


def test_name_without_reading_uses_headword_as_reading():
    entries = group_name_entries(["アキラ /Akira (m,f)/"])
    assert entries[0].variants == [NameVariant(headword=None, reading="アキラ")]


def test_name_with_empty_bracket_uses_headword_as_reading():
    entries = group_name_entries(["アキラ [] /Akira (m,f)/"])
    assert entries[0].variants == [NameVariant(headword=None, reading="アキラ")]


def test_embedded_record_in_gloss_replaces_outer_record():
    entries = group_name_entries(
        ["あか組４ [あかぐみふぉー] /あか組４ [あかぐみフォー] /Akagumi Four (h)//"]
    )
    assert entries == [
        NameDisplayEntry(
            gloss="Akagumi Four (h)",
            variants=[NameVariant(headword="あか組４", reading="あかぐみフォー")],
        )
    ]


def test_embedded_record_is_unwrapped_only_once():
    entries = group_name_entries(["A [a] /B [b] /C [c] /deep///"])
    assert entries[0].variants == [NameVariant(headword="B", reading="b")]
    assert entries[0].gloss == "C [c] /deep/"


def test_single_trailing_slash_keeps_outer_record():
    entries = group_name_entries(
        ["あか組４ [あかぐみふぉー] /あか組４ [あかぐみフォー] /Akagumi Four (h)/"]
    )
    assert entries[0].variants == [NameVariant(headword="あか組４", reading="あかぐみふぉー")]
    assert entries[0].gloss == "あか組４ [あかぐみフォー] /Akagumi Four (h)"


def test_embedded_records_merge_with_plain_neighbours():
    entries = group_name_entries(
        [
            "あか組４ [あかぐみふぉー] /あか組４ [あかぐみフォー] /Akagumi Four (h)//",
            "赤組４ [あかぐみフォー] /Akagumi Four (h)/",
        ]
    )
    assert len(entries) == 1
    assert [variant.headword for variant in entries[0].variants] == ["あか組４", "赤組４"]


def test_name_merge_is_adjacency_based():
    entries = group_name_entries(
        ["一郎 [いちろう] /Ichirou (m)/", "次郎 [じろう] /Jirou (m)/", "市郎 [いちろう] /Ichirou (m)/"]
    )
    assert [entry.gloss for entry in entries] == ["Ichirou (m)", "Jirou (m)", "Ichirou (m)"]


def test_unparseable_name_records_are_skipped():
    entries = group_name_entries(["", "nonsense", "アキラ /Akira (m,f)/"])
    assert len(entries) == 1
