from __future__ import annotations

import json
from pathlib import Path

import pytest

from feixing.bagua import BAGUA, BAGUA_START_NORTH, bagua_start_north
from feixing.config import Settings, reset_settings_cache, save_settings
from feixing.constants import (
    BRANCHES,
    GANZHI_SEXAGESIMAL,
    HOUR_STEM_TABLE,
    PLANETS,
    STEMS,
    WU_XING,
    branch_for_index,
    stem_for_index,
)
from feixing.data import TableNotFoundError, list_table_keys, load_table
from feixing.exceptions import InvalidInputError
from feixing.language import Language, LanguageDetails
from feixing.utils.io import load_json_document


def test_registered_tables_load() -> None:
    for key in list_table_keys():
        rows = load_table(key)
        assert isinstance(rows, tuple)
        assert rows
    assert set(list_table_keys("ganzhi")) == {"stems", "branches"}


def test_unknown_table_key() -> None:
    with pytest.raises(TableNotFoundError):
        load_table("zodiac")


def test_load_json_document_skips_comment_lines(tmp_path: Path) -> None:
    path = tmp_path / "doc.json"
    path.write_text("# provenance\n  # indented note\n[1, 2]\n", encoding="utf-8")
    assert load_json_document(path) == [1, 2]

    empty = tmp_path / "empty.json"
    empty.write_text("# nothing here\n", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_json_document(empty)


def test_stems_and_branches() -> None:
    assert len(STEMS) == 10
    assert len(BRANCHES) == 12
    assert [stem.no for stem in STEMS] == list(range(1, 11))
    assert stem_for_index(0).alphabet("zh_tw") == "甲"
    assert stem_for_index(9).phonetic("zh_cn") == "guǐ"
    assert branch_for_index(2).name.en == "yin"
    assert branch_for_index(4).name.en == "chen"
    assert branch_for_index(0).alphabet_ja() == "ね"
    with pytest.raises(InvalidInputError):
        stem_for_index(10)
    with pytest.raises(InvalidInputError):
        branch_for_index(-1)


def test_sexagesimal_and_hour_tables() -> None:
    assert len(GANZHI_SEXAGESIMAL) == 60
    assert GANZHI_SEXAGESIMAL[0] == (0, 0)
    assert GANZHI_SEXAGESIMAL[59] == (9, 11)
    assert len(set(GANZHI_SEXAGESIMAL)) == 60
    assert HOUR_STEM_TABLE[0] == (0, 2, 4, 6, 8)
    assert HOUR_STEM_TABLE[2] == (2, 4, 6, 8, 0)
    assert HOUR_STEM_TABLE[10] == HOUR_STEM_TABLE[0]
    assert HOUR_STEM_TABLE[11] == HOUR_STEM_TABLE[1]


def test_bagua_tables() -> None:
    assert [gua.num for gua in BAGUA] == list(range(1, 10))
    assert BAGUA[0].alphabet("zh_tw") == "坎"
    assert BAGUA[0].wuxing.name.en == "water"
    assert [gua.direction for gua in BAGUA_START_NORTH] == [
        "n", "ne", "e", "se", "s", "sw", "w", "nw",
    ]
    assert bagua_start_north(1).name.en == "gen"
    assert bagua_start_north(8) is None


def test_elements_and_planets() -> None:
    assert [element.name.en for element in WU_XING] == ["wood", "fire", "earth", "metal", "water"]
    assert len(PLANETS) == 11
    assert PLANETS[0].name.en == "earth"
    assert PLANETS[4].alphabet("ja") == "太陽"


def test_language_from_data_handles_missing_entries() -> None:
    name = Language.from_data({"en": "kan", "ja": ["坎", "kan"], "vi": []})
    assert name.ja == LanguageDetails("坎", "kan")
    assert name.vi == LanguageDetails()
    assert name.ja2 == LanguageDetails()
    assert name.alphabet("en") == "kan"
    with pytest.raises(InvalidInputError):
        name.alphabet("fr")


def test_display_language_follows_settings() -> None:
    assert STEMS[0].alphabet() == "甲"
    save_settings(Settings(language="vi"))
    reset_settings_cache()
    assert STEMS[0].alphabet() == "giáp"
