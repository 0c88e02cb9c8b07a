"""Tests for MarkupService wiring, strict mode and settings-driven defaults."""

from __future__ import annotations

import json

import pytest

from structmark.config import Settings, get_settings
from structmark.exceptions import SchemaValidationError
from structmark.models.enums import OutputFormat
from structmark.models.types import Article, Thing
from structmark.render.jsonld import JsonLdRenderer
from structmark.render.microdata import MicrodataRenderer
from structmark.service import MarkupService
from structmark.validation.engine import ValidationEngine
from structmark.validation.results import ValidationResult


class RejectEverything:
    """Validator stub that fails every entity."""

    def validate(self, entity) -> ValidationResult:
        from structmark.validation.results import ValidationError
        return ValidationResult.with_errors([ValidationError(message="rejected", code="REJECTED")])


class TestSettings:
    def test_defaults(self):
        s = get_settings()
        assert s.default_context == "https://schema.org"
        assert s.strict_mode is False
        assert s.max_depth == 32
        assert s.pretty_print is True
        assert s.container_element == "div"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("STRUCTMARK_STRICT_MODE", "true")
        monkeypatch.setenv("STRUCTMARK_MAX_DEPTH", "4")
        s = Settings()
        assert s.strict_mode is True
        assert s.max_depth == 4

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()


class TestMarkupService:
    def test_render_by_format(self, thing: Thing):
        service = MarkupService()
        assert json.loads(service.render(thing, OutputFormat.JSON_LD))["name"] == "Test Thing"
        assert "itemscope" in service.render(thing, "microdata")
        assert 'typeof="Thing"' in service.render(thing, "rdfa")

    def test_unknown_format(self, thing: Thing):
        with pytest.raises(ValueError):
            MarkupService().render(thing, "turtle")

    def test_injected_renderers(self, thing: Thing):
        service = MarkupService(
            json_ld=JsonLdRenderer(pretty_print=False),
            microdata=MicrodataRenderer(pretty_print=False, container_element="span"),
        )
        assert service.to_json_ld(thing) == '{"@context":"https://schema.org","@type":"Thing","name":"Test Thing"}'
        assert service.to_microdata(thing).startswith("<span itemscope")
        assert service.renderer_for("json-ld").pretty_print is False

    def test_non_strict_renders_invalid_entities(self):
        assert "Article" in MarkupService().to_rdfa(Article({}))

    def test_strict_mode_rejects_invalid(self):
        service = MarkupService(strict=True)
        with pytest.raises(SchemaValidationError) as exc_info:
            service.to_json_ld(Article({}))
        assert exc_info.value.error_messages == ["Required property 'headline' is missing"]
        assert not exc_info.value.result.is_valid()
        assert "Schema validation failed" in str(exc_info.value)

    def test_strict_mode_renders_valid(self, article: Article):
        out = MarkupService(strict=True).to_microdata(article)
        assert 'itemtype="https://schema.org/Article"' in out

    def test_strict_mode_ignores_warnings(self):
        entity = Thing({"name": "", "colour": "red"})
        assert MarkupService(strict=True).to_json_ld(entity)

    def test_injected_validator(self, thing: Thing):
        service = MarkupService(validator=RejectEverything(), strict=True)
        assert not service.validate(thing).is_valid()
        with pytest.raises(SchemaValidationError):
            service.to_rdfa(thing)

    def test_injected_engine(self):
        engine = ValidationEngine().remove_rule("required_properties")
        service = MarkupService(validator=engine, strict=True)
        assert service.to_json_ld(Article({}))


class TestFromSettings:
    def test_defaults(self, thing: Thing):
        service = MarkupService.from_settings()
        assert service.strict is False
        assert service.to_json_ld(thing) == JsonLdRenderer().render(thing)

    def test_env_driven(self, monkeypatch, thing: Thing):
        monkeypatch.setenv("STRUCTMARK_PRETTY_PRINT", "false")
        monkeypatch.setenv("STRUCTMARK_CONTAINER_ELEMENT", "section")
        monkeypatch.setenv("STRUCTMARK_USE_SEMANTIC_ELEMENTS", "true")
        service = MarkupService.from_settings()
        assert service.to_json_ld(thing) == '{"@context":"https://schema.org","@type":"Thing","name":"Test Thing"}'
        assert service.to_microdata(thing).startswith("<section itemscope")
        assert service.to_rdfa(Article({"headline": "T"})).startswith("<article vocab=")

    def test_explicit_settings(self):
        service = MarkupService.from_settings(Settings(strict_mode=True))
        assert service.strict is True

    def test_entity_methods_use_settings(self, monkeypatch):
        monkeypatch.setenv("STRUCTMARK_STRICT_MODE", "true")
        with pytest.raises(SchemaValidationError):
            Article({}).to_microdata()

    def test_entity_methods_accept_a_service(self, thing: Thing):
        service = MarkupService(json_ld=JsonLdRenderer(pretty_print=False))
        assert thing.to_json_ld(service) == service.to_json_ld(thing)
        assert thing.to_rdfa() == MarkupService().to_rdfa(thing)
