"""Tests for bibliography importers."""
import json

import pytest

from docman.errors import MalformedStructuredInput
from docman.importers import JSONImporter, get_importer_for_file
from docman.models import Article


class TestJSONImporter:
    """Parsing JSON content into citations."""

    def test_parse_nested_records(self, article_record):
        content = json.dumps({"refs": [article_record]})
        citations = JSONImporter().parse(content)
        assert citations == [Article("1", title="T", author="A", journal="J", year=2020, volume=1, issue=2)]

    def test_parse_without_records(self):
        assert JSONImporter().parse('{"refs": []}') == []

    def test_invalid_json(self):
        with pytest.raises(MalformedStructuredInput) as excinfo:
            JSONImporter().parse('{"refs": [')
        assert "invalid JSON" in str(excinfo.value)

    def test_nesting_too_deep_to_decode(self):
        with pytest.raises(MalformedStructuredInput) as excinfo:
            JSONImporter().parse("[" * 100000 + "]" * 100000)
        assert "nested too deeply" in str(excinfo.value)

    def test_empty_content(self):
        with pytest.raises(MalformedStructuredInput):
            JSONImporter().parse("")

    def test_resolver_is_passed_to_builder(self, resolver):
        content = json.dumps([{"type": "webpage", "id": "py", "url": "https://www.python.org/"}])
        citations = JSONImporter(resolver).parse(content)
        assert citations[0].title == "Welcome to Python.org"


class TestImporterFactory:
    """Choosing an importer by file name."""

    @pytest.mark.parametrize("filename", ["refs.json", "REFS.JSON", "refs.txt", "refs"])
    def test_json_importer(self, filename):
        assert isinstance(get_importer_for_file(filename), JSONImporter)

    def test_resolver_forwarded(self, resolver):
        assert get_importer_for_file("refs.json", resolver).resolver is resolver
