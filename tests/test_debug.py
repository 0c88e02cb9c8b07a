"""Tests for entity inspection and the debug report."""

from __future__ import annotations

from structmark.debug import format_debug_info, inspect_entity
from structmark.models.types import Article, Person, Thing
from structmark.validation.engine import ValidationEngine


class TestInspectEntity:
    def test_basic_info(self, article: Article):
        info = inspect_entity(article)
        assert info["type"] == "Article"
        assert info["context"] == "https://schema.org"
        assert info["class"] == "Article"

    def test_property_kinds(self, article: Article):
        props = inspect_entity(article)["properties"]
        assert props["headline"]["kind"] == "string"
        assert props["author"]["kind"] == "entity:Person"
        assert props["wordCount"]["kind"] == "integer"
        assert props["keywords"]["kind"] == "sequence"
        assert inspect_entity(Thing({"name": object()}))["properties"]["name"]["kind"] == "object"

    def test_validation_section(self):
        info = inspect_entity(Article({"wordCount": "many", "colour": "red"}))
        validation = info["validation"]
        assert validation["valid"] is False
        assert validation["error_count"] == 2
        assert validation["warning_count"] == 1
        assert info["properties"]["wordCount"]["errors"] == [
            "Property 'wordCount' expects type 'integer', got 'str'",
        ]
        assert info["properties"]["colour"]["errors"] == []

    def test_custom_validator(self):
        info = inspect_entity(Article({}), ValidationEngine(rules=[]))
        assert info["validation"]["valid"] is True

    def test_structure(self, article: Article):
        structure = inspect_entity(article)["structure"]
        assert structure == {
            "property_count": 5,
            "nested_count": 2,
            "max_depth": 1,
            "nested_types": ["Organization", "Person"],
        }

    def test_structure_counts_entities_in_lists(self):
        entity = Article({
            "headline": "T",
            "author": [Person({"name": "A", "worksFor": Thing({"name": "X"})}), Person({"name": "B"})],
        })
        structure = inspect_entity(entity)["structure"]
        assert structure["nested_count"] == 3
        assert structure["max_depth"] == 2
        assert structure["nested_types"] == ["Person", "Thing"]

    def test_self_reference_terminates(self, looped_thing: Thing):
        structure = inspect_entity(looped_thing)["structure"]
        assert structure["nested_count"] == 1
        assert structure["max_depth"] == 0


class TestFormatDebugInfo:
    def test_sections(self, article: Article):
        report = format_debug_info(inspect_entity(article))
        assert report.startswith("=== Schema Debug Information ===")
        for line in (
            "Type: Article",
            "--- Properties ---",
            "  author: [Person entity]",
            "  keywords: [2 items]",
            "    Type: entity:Person",
            "--- Validation ---",
            "  Valid: Yes",
            "  Error Count: 0",
            "--- Structure ---",
            "  Nested Schemas: 2",
            "  Nested Types: Organization, Person",
        ):
            assert line in report

    def test_errors_are_listed(self):
        report = format_debug_info(inspect_entity(Article({})))
        assert "  Valid: No" in report
        assert "  Errors:" in report
        assert "    - Required property 'headline' is missing" in report
        assert "Nested Types" not in report

    def test_long_values_are_truncated(self):
        report = format_debug_info(inspect_entity(Thing({"description": "x" * 200})))
        line = next(l for l in report.splitlines() if l.startswith("  description: "))
        assert line.endswith("...")
        assert len(line) == len("  description: ") + 50
