"""
Tests for format dispatch and the import session.
"""

import pytest

from tokenimport.backends import InMemoryVariableStore
from tokenimport.errors import ParseError, TokenImportError, UnsupportedFormatError
from tokenimport.importer import (
    ImportSession,
    QueuedFile,
    document_from_file,
    format_for_filename,
    is_supported_filename,
    parse_document,
)
from tokenimport.model import DocumentFormat, RawDocument
from tokenimport.values import ColorValue, NumberValue, StringValue


CSV_TEXT = "collection,variable,value\nColors,red,#FF0000"
JSON_TEXT = '{"Spacing": {"small": {"$value": "4"}}}'


class TestFormatDetection:
    """Format comes from the file extension."""

    def test_known_extensions(self):
        assert format_for_filename("tokens.json") == DocumentFormat.JSON
        assert format_for_filename("tokens.csv") == DocumentFormat.CSV
        assert format_for_filename("TOKENS.JSON") == DocumentFormat.JSON

    def test_unknown_extension(self):
        with pytest.raises(UnsupportedFormatError):
            format_for_filename("tokens.yaml")
        assert not is_supported_filename("tokens.txt")

    def test_document_from_file(self):
        doc = document_from_file("a.csv", CSV_TEXT)
        assert doc == RawDocument(text=CSV_TEXT, format=DocumentFormat.CSV, name="a.csv")


class TestParseDocument:
    def test_dispatch_csv(self):
        model = parse_document(RawDocument(CSV_TEXT, DocumentFormat.CSV))
        assert model.get("Colors", "red") == ColorValue(1.0, 0.0, 0.0, 1.0)

    def test_dispatch_json(self):
        model = parse_document(RawDocument(JSON_TEXT, DocumentFormat.JSON))
        assert model.get("Spacing", "small") == NumberValue(4.0)

    def test_json_syntax_error_propagates(self):
        with pytest.raises(ParseError):
            parse_document(RawDocument("{", DocumentFormat.JSON))


class TestImportSession:
    """Caller-owned queue of files."""

    def test_add_files_filters_and_dedupes(self):
        session = ImportSession()
        session.add_files([("a.csv", CSV_TEXT)])

        result = session.add_files([("a.csv", CSV_TEXT), ("b.json", JSON_TEXT), ("c.txt", "x")])

        assert result.added == ["b.json"]
        assert result.duplicates == ["a.csv"]
        assert result.rejected == ["c.txt"]
        assert [f.name for f in session.files] == ["a.csv", "b.json"]

    def test_add_only_unsupported_files(self):
        session = ImportSession()
        with pytest.raises(UnsupportedFormatError):
            session.add_files([("notes.txt", "x")])
        assert session.files == []

    def test_parse_first(self):
        session = ImportSession()
        session.add_files([("a.csv", CSV_TEXT), ("b.json", JSON_TEXT)])

        model = session.parse_first()

        assert session.model is model
        assert model.collection_names() == ["Colors"]

    def test_parse_first_on_empty_queue(self):
        assert ImportSession().parse_first() is None

    def test_parse_failure_clears_model(self):
        session = ImportSession()
        session.add_files([("ok.csv", CSV_TEXT)])
        session.parse_first()
        session.files.insert(0, QueuedFile(name="bad.json", text="{"))

        with pytest.raises(ParseError):
            session.parse_first()
        assert session.model is None

    def test_parse_all_merges_in_queue_order(self):
        session = ImportSession()
        session.add_files([
            ("a.csv", "collection,variable,value\nColors,red,#FF0000\nColors,x,1"),
            ("b.csv", "collection,variable,value\nColors,x,2"),
        ])

        model = session.parse_all()

        assert model.get("Colors", "x") == NumberValue(2.0)
        assert model.get("Colors", "red") == ColorValue(1.0, 0.0, 0.0, 1.0)

    def test_remove_file_makes_model_stale(self):
        session = ImportSession()
        session.add_files([("a.csv", CSV_TEXT), ("b.json", JSON_TEXT)])
        session.parse_first()

        removed = session.remove_file(0)

        assert removed.name == "a.csv"
        assert session.model is None
        assert session.parse_first().collection_names() == ["Spacing"]

    def test_clear(self):
        session = ImportSession(collection_name="Brand")
        session.add_files([("a.csv", CSV_TEXT)])
        session.parse_first()
        session.clear()
        assert session.files == []
        assert session.model is None
        assert session.collection_name is None

    def test_apply_with_preferred_collection(self):
        session = ImportSession(collection_name="Brand")
        session.add_files([("a.csv", CSV_TEXT)])
        store = InMemoryVariableStore()

        count = session.apply(store)

        assert count == 1
        assert store.list_collections() == ["Brand"]

    def test_apply_without_files(self):
        with pytest.raises(TokenImportError):
            ImportSession().apply(InMemoryVariableStore())

    def test_sessions_are_independent(self):
        first = ImportSession()
        second = ImportSession()
        first.add_files([("a.csv", CSV_TEXT)])
        assert second.files == []

    def test_strings_survive_dispatch(self):
        session = ImportSession()
        session.add_files([("s.csv", "collection,variable,value\nSpacing,small,8px")])
        assert session.parse_first().get("Spacing", "small") == StringValue("8px")
