"""Renderer contract and helpers shared by the HTML renderers.

Renderer configuration is instance state; entities are never touched, so one
entity can be rendered repeatedly with different settings. A renderer whose
settings change between calls should not be shared across threads.
"""

from __future__ import annotations

import html
import json
import re
from abc import ABC, abstractmethod
from datetime import date
from typing import Any, ClassVar

from structmark.exceptions import SchemaDepthError
from structmark.logging import get_logger
from structmark.models.entity import (
    DEFAULT_MAX_DEPTH,
    SchemaEntity,
    format_datetime,
    is_sequence,
)
from structmark.models.enums import OutputFormat

log = get_logger("render")

DEFAULT_CONTAINER = "div"

# Properties that carry machine-readable data rather than visible text.
META_PROPERTIES = frozenset({
    "datePublished", "dateModified", "dateCreated", "wordCount", "identifier",
})

PROPERTY_ELEMENTS: dict[str, str] = {
    "headline": "h1",
    "name": "h1",
    "alternativeHeadline": "h2",
    "description": "p",
    "articleBody": "div",
    "url": "a",
    "image": "img",
}

TYPE_ELEMENTS: dict[str, str] = {
    "Article": "article",
    "Person": "div",
    "Organization": "div",
}

_TAG_INVALID = re.compile(r"[^a-z0-9-]")


def escape_html(value: str) -> str:
    """Escape ``&``, ``<``, ``>`` and both quote characters (HTML5 entity names)."""
    return html.escape(value, quote=True).replace("&#x27;", "&apos;")


def stringify(value: Any) -> str:
    """Text form of a scalar property value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return format_datetime(value)
    if isinstance(value, (str, int, float)):
        return str(value)
    return json.dumps(value, default=str)


def sanitize_element(name: str) -> str:
    """Reduce ``name`` to a usable tag name, falling back to ``div``."""
    cleaned = _TAG_INVALID.sub("", name.strip().lower())
    if not cleaned or not cleaned[0].isalpha():
        cleaned = DEFAULT_CONTAINER
    if cleaned != name:
        log.warning("container_element_sanitized", requested=name, used=cleaned)
    return cleaned


class Renderer(ABC):
    """Turns an entity into one markup format."""

    format: ClassVar[OutputFormat]
    mime_type: ClassVar[str] = "text/html"

    def __init__(self, *, pretty_print: bool = True, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.pretty_print = pretty_print
        self.max_depth = max_depth

    @abstractmethod
    def render(self, entity: SchemaEntity) -> str:
        """Serialise ``entity`` and return the markup."""

    def get_mime_type(self) -> str:
        return self.mime_type

    def get_format(self) -> str:
        return self.format.value

    def set_pretty_print(self, pretty_print: bool) -> Renderer:
        self.pretty_print = pretty_print
        return self


class HtmlRenderer(Renderer):
    """Shared tree walk for the attribute-based formats (Microdata, RDFa).

    Subclasses supply the attribute vocabulary and how a nested entity is
    attached to its parent property.
    """

    def __init__(
        self,
        *,
        pretty_print: bool = True,
        container_element: str = DEFAULT_CONTAINER,
        use_semantic_elements: bool = False,
        include_meta_elements: bool = True,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        super().__init__(pretty_print=pretty_print, max_depth=max_depth)
        self.container_element = sanitize_element(container_element)
        self.use_semantic_elements = use_semantic_elements
        self.include_meta_elements = include_meta_elements

    # ── Chainable configuration ─────────────────────────

    def set_container_element(self, element: str) -> HtmlRenderer:
        self.container_element = sanitize_element(element)
        return self

    def set_use_semantic_elements(self, use: bool) -> HtmlRenderer:
        self.use_semantic_elements = use
        return self

    def set_include_meta_elements(self, include: bool) -> HtmlRenderer:
        self.include_meta_elements = include
        return self

    # ── Rendering ───────────────────────────────────────

    def render(self, entity: SchemaEntity) -> str:
        markup = self._render_entity(entity, 0, None)
        log.debug("render_finished", format=self.get_format(), schema_type=entity.get_type(), length=len(markup))
        return markup

    @property
    def _newline(self) -> str:
        return "\n" if self.pretty_print else ""

    def _indent_str(self, level: int) -> str:
        return "  " * level if self.pretty_print else ""

    def _render_entity(self, entity: SchemaEntity, depth: int, prop: str | None) -> str:
        if depth > self.max_depth:
            raise SchemaDepthError(self.max_depth, entity.get_type())
        element = self._entity_element(entity.get_type())
        parts = [f"<{element}{self._entity_attributes(entity, prop)}>{self._newline}"]
        for name, value in entity.get_properties().items():
            parts.append(self._render_property(name, value, 1, depth))
        parts.append(f"</{element}>")
        return "".join(parts)

    def _render_property(self, name: str, value: Any, level: int, depth: int) -> str:
        if isinstance(value, SchemaEntity):
            return self._render_nested(name, value, level, depth)

        if is_sequence(value):
            # One sibling element per item, all carrying the same property name.
            return "".join(self._render_property(name, item, level, depth) for item in value)

        indent = self._indent_str(level)
        escaped = escape_html(stringify(value))
        attribute = self._property_attribute(name)

        if self.include_meta_elements and name in META_PROPERTIES:
            return f'{indent}<meta {attribute} content="{escaped}">{self._newline}'

        element = self._property_element(name)
        return f"{indent}<{element} {attribute}>{escaped}</{element}>{self._newline}"

    def _entity_element(self, schema_type: str) -> str:
        if not self.use_semantic_elements:
            return self.container_element
        return TYPE_ELEMENTS.get(schema_type, self.container_element)

    def _property_element(self, name: str) -> str:
        if not self.use_semantic_elements:
            return "span"
        return PROPERTY_ELEMENTS.get(name, "span")

    def _indent(self, markup: str, level: int) -> str:
        if not self.pretty_print:
            return markup
        pad = self._indent_str(level)
        return "\n".join(pad + line if line else line for line in markup.split("\n"))

    @staticmethod
    def _vocabulary(entity: SchemaEntity) -> str:
        return escape_html(entity.get_context().rstrip("/"))

    @abstractmethod
    def _entity_attributes(self, entity: SchemaEntity, prop: str | None) -> str:
        """Attributes for an entity's opening tag, with a leading space."""

    @abstractmethod
    def _property_attribute(self, name: str) -> str:
        """The attribute naming a property on its element."""

    @abstractmethod
    def _render_nested(self, name: str, entity: SchemaEntity, level: int, depth: int) -> str:
        """Markup for a property whose value is another entity."""
