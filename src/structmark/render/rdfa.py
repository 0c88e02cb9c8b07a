"""HTML RDFa Lite renderer (``vocab`` / ``typeof`` / ``property``).

See https://www.w3.org/TR/rdfa-lite/
"""

from __future__ import annotations

from structmark.models.entity import SchemaEntity
from structmark.models.enums import OutputFormat
from structmark.render.base import HtmlRenderer, escape_html


class RdfaRenderer(HtmlRenderer):
    format = OutputFormat.RDFA

    def _entity_attributes(self, entity: SchemaEntity, prop: str | None) -> str:
        return f' vocab="{self._vocabulary(entity)}/" typeof="{escape_html(entity.get_type())}"'

    def _property_attribute(self, name: str) -> str:
        return f'property="{escape_html(name)}"'

    def _render_nested(self, name: str, entity: SchemaEntity, level: int, depth: int) -> str:
        indent, nl = self._indent_str(level), self._newline
        nested = self._indent(self._render_entity(entity, depth + 1, None), level + 1)
        return f'{indent}<div property="{escape_html(name)}">{nl}{nested}{nl}{indent}</div>{nl}'
