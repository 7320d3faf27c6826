import io

import pandas as pd
import pytest

from services.keyword_import import (
    detect_columns,
    extract_brand_name,
    parse_keyword_file,
    parse_keyword_rows,
    parse_number,
)


class TestBrandName:

    @pytest.mark.parametrize("file_name,expected", [
        ("Acme.xlsx", "Acme"),
        ("Blue Ocean.CSV", "Blue Ocean"),
        (" nike .xls", "nike"),
        ("exports/Zeta.csv", "Zeta"),
        ("report.final.xlsx", "report.final"),
    ])
    def test_extension_stripped(self, file_name, expected):
        assert extract_brand_name(file_name) == expected


class TestDetectColumns:

    def test_common_export_headers(self):
        columns = detect_columns(["Keyword", "Search Volume", "CPC (USD)", "Keyword Difficulty"])

        assert columns == {"keyword": 0, "search_volume": 1, "cpc": 2, "kd": 3}

    def test_chinese_headers(self):
        columns = detect_columns(["关键词", "搜索量", "点击成本", "难度"])

        assert columns == {"keyword": 0, "search_volume": 1, "cpc": 2, "kd": 3}

    def test_first_match_wins(self):
        columns = detect_columns(["Query", "Term", "Volume"])

        assert columns["keyword"] == 0
        assert columns["search_volume"] == 2

    def test_missing_columns(self):
        assert detect_columns(["foo", "bar"]) == {
            "keyword": None,
            "search_volume": None,
            "cpc": None,
            "kd": None,
        }


@pytest.mark.parametrize("value,expected", [
    (None, None),
    ("", None),
    ("  ", None),
    (float("nan"), None),
    ("abc", None),
    ("1,000", None),
    ("12", 12.0),
    (3, 3.0),
    (2.5, 2.5),
])
def test_parse_number(value, expected):
    assert parse_number(value) == expected


class TestParseKeywordRows:

    def test_rows_become_entries(self):
        rows = [
            ["Keyword", "Volume", "CPC", "KD"],
            ["trail shoes", "1200", "1.5", ""],
            ["  ", "10", "1", "1"],
            ["boots", "n/a", None, 30],
        ]

        entries = parse_keyword_rows(rows, "Acme")

        assert [e.keyword for e in entries] == ["trail shoes", "boots"]
        assert entries[0].search_volume == 1200.0
        assert entries[0].cpc == 1.5
        assert entries[0].kd is None
        assert entries[1].search_volume is None
        assert entries[1].kd == 30.0
        assert all(e.source == "Acme" for e in entries)

    def test_falls_back_to_first_column(self):
        entries = parse_keyword_rows([["foo", "bar"], ["hiking", "x"]], "Acme")

        assert [e.keyword for e in entries] == ["hiking"]

    def test_header_only_is_empty(self):
        assert parse_keyword_rows([["Keyword"]], "Acme") == []
        assert parse_keyword_rows([], "Acme") == []

    def test_short_rows_and_numeric_keywords(self):
        rows = [["Keyword", "Volume"], [2024.0], ["x", 5]]

        entries = parse_keyword_rows(rows, "Acme")

        assert [e.keyword for e in entries] == ["2024", "x"]
        assert entries[0].search_volume is None


class TestParseKeywordFile:

    def test_csv_file(self, tmp_path):
        path = tmp_path / "Acme Outdoor.csv"
        path.write_text("Keyword,Search Volume,CPC\ntent,900,0.8\nAcme tent,50,\n", encoding="utf-8")

        corpus = parse_keyword_file(path)

        assert corpus.brand_name == "Acme Outdoor"
        assert corpus.original_count == 2
        assert [e.keyword for e in corpus.keywords] == ["tent", "Acme tent"]
        assert corpus.keywords[1].cpc is None

    def test_xlsx_file(self, tmp_path):
        path = tmp_path / "Zeta.xlsx"
        pd.DataFrame({"Keyword": ["sleeping bag", "stove"], "KD": [12, None]}).to_excel(
            path, index=False
        )

        corpus = parse_keyword_file(path)

        assert corpus.brand_name == "Zeta"
        assert [e.keyword for e in corpus.keywords] == ["sleeping bag", "stove"]
        assert corpus.keywords[0].kd == 12.0
        assert corpus.keywords[1].kd is None

    def test_file_like_source_uses_given_name(self):
        buffer = io.BytesIO("Keyword\nkayak\n".encode("utf-8"))

        corpus = parse_keyword_file(buffer, file_name="River.csv")

        assert corpus.brand_name == "River"
        assert [e.keyword for e in corpus.keywords] == ["kayak"]

    def test_empty_csv(self, tmp_path):
        path = tmp_path / "Empty.csv"
        path.write_text("", encoding="utf-8")

        assert parse_keyword_file(path).keywords == []

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "Acme.txt"
        path.write_text("Keyword\nx\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to parse"):
            parse_keyword_file(path)

    def test_unreadable_excel(self, tmp_path):
        path = tmp_path / "Broken.xlsx"
        path.write_bytes(b"not a workbook")

        with pytest.raises(ValueError, match="Failed to parse Broken.xlsx"):
            parse_keyword_file(path)
