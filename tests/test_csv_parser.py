"""
Tests for CSV parser (Layer 1: Raw Input -> CTM).

CSV format:
    collection, variable, value

We need to:
1. Drop the header line
2. Trim and validate the three fields of every row
3. Skip incomplete rows without failing
4. Coerce values to typed tokens
"""

import logging

import pytest

from tokenimport.csv_parser import parse_csv_string
from tokenimport.model import CanonicalModel
from tokenimport.values import (
    BooleanValue,
    ColorValue,
    NumberValue,
    StringValue,
)


class TestCSVParsing:
    """Test basic CSV row parsing."""

    def test_reference_example(self):
        """Colors and spacing rows from the documented example."""
        csv = """collection,variable,value
Colors,primary-blue,#0066FF
Spacing,small,8px"""

        model = parse_csv_string(csv)
        assert model == CanonicalModel({
            "Colors": {"primary-blue": ColorValue(0.0, 0.4, 1.0, 1.0)},
            "Spacing": {"small": StringValue("8px")},
        })

    def test_empty_csv(self):
        """Header only should result in an empty model."""
        model = parse_csv_string("collection,variable,value\n")
        assert isinstance(model, CanonicalModel)
        assert model.is_empty()
        assert model.collection_names() == []

    def test_completely_empty_text(self):
        assert parse_csv_string("") == CanonicalModel()

    def test_values_are_coerced(self):
        csv = """collection,variable,value
Misc,enabled,TRUE
Misc,columns,12
Misc,ratio,1.5
Misc,font,Inter
Misc,gap,1.5em"""

        model = parse_csv_string(csv)
        assert model.get("Misc", "enabled") == BooleanValue(True)
        assert model.get("Misc", "columns") == NumberValue(12.0)
        assert model.get("Misc", "ratio") == NumberValue(1.5)
        assert model.get("Misc", "font") == StringValue("Inter")
        assert model.get("Misc", "gap") == StringValue("1.5em")

    def test_whitespace_is_trimmed(self):
        csv = "collection,variable,value\n  Colors ,  red  ,  #FF0000  "
        model = parse_csv_string(csv)
        assert model.get("Colors", "red") == ColorValue(1.0, 0.0, 0.0, 1.0)

    def test_crlf_line_endings(self):
        csv = "collection,variable,value\r\nSpacing,large,24\r\nSpacing,small,8\r\n"
        model = parse_csv_string(csv)
        assert model.get_collection("Spacing") == {
            "large": NumberValue(24.0),
            "small": NumberValue(8.0),
        }

    def test_header_is_always_discarded(self):
        """The first line is dropped whatever it contains."""
        csv = "Colors,red,#FF0000\nColors,blue,#0000FF"
        model = parse_csv_string(csv)
        assert model.get("Colors", "red") is None
        assert model.get("Colors", "blue") is not None

    def test_collection_order_is_first_seen(self):
        csv = """collection,variable,value
B,x,1
A,y,2
B,z,3"""
        model = parse_csv_string(csv)
        assert model.collection_names() == ["B", "A"]
        assert list(model.get_collection("B")) == ["x", "z"]


class TestMalformedRows:
    """Rows are skipped, never raised."""

    @pytest.mark.parametrize("row", [
        "Colors,red,",
        "Colors,,#FF0000",
        ",red,#FF0000",
        "Colors,red",
        "Colors",
        "   ,  ,  ",
        "",
    ])
    def test_incomplete_row_is_skipped(self, row):
        csv = f"collection,variable,value\n{row}\nColors,blue,#0000FF"
        model = parse_csv_string(csv)
        assert model.get_collection("Colors") == {"blue": ColorValue(0.0, 0.0, 1.0, 1.0)}

    def test_skipped_rows_are_logged_with_line_numbers(self, caplog):
        csv = "collection,variable,value\nColors,red,#FF0000\nColors,,oops"
        with caplog.at_level(logging.DEBUG, logger="tokenimport.csv_parser"):
            parse_csv_string(csv)
        assert "line 3" in caplog.text

    def test_extra_commas_truncate_the_value(self):
        """No quoted-field support: only the first three fields count."""
        csv = 'collection,variable,value\nFonts,stack,"Inter, sans-serif"'
        model = parse_csv_string(csv)
        assert model.get("Fonts", "stack") == StringValue('"Inter')


class TestDuplicates:
    """Duplicate names: last occurrence wins."""

    def test_duplicate_variable_last_wins(self):
        csv = """collection,variable,value
Colors,brand,#FF0000
Colors,brand,#0000FF"""

        model = parse_csv_string(csv)
        assert model.get("Colors", "brand") == ColorValue(0.0, 0.0, 1.0, 1.0)
        assert model.token_count == 1

    def test_same_variable_in_two_collections(self):
        csv = """collection,variable,value
Light,bg,white
Dark,bg,black"""

        model = parse_csv_string(csv)
        assert model.get("Light", "bg") == ColorValue(1.0, 1.0, 1.0, 1.0)
        assert model.get("Dark", "bg") == ColorValue(0.0, 0.0, 0.0, 1.0)


class TestDeterminism:
    def test_identical_input_gives_equal_models(self):
        csv = "collection,variable,value\nA,x,1\nB,y,#FFFFFF"
        assert parse_csv_string(csv) == parse_csv_string(csv)
