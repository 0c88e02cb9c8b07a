"""HTML Microdata renderer (``itemscope`` / ``itemtype`` / ``itemprop``).

See https://html.spec.whatwg.org/multipage/microdata.html
"""

from __future__ import annotations

from structmark.models.entity import SchemaEntity
from structmark.models.enums import OutputFormat
from structmark.render.base import HtmlRenderer, escape_html


class MicrodataRenderer(HtmlRenderer):
    format = OutputFormat.MICRODATA

    def _entity_attributes(self, entity: SchemaEntity, prop: str | None) -> str:
        itemtype = f"{self._vocabulary(entity)}/{escape_html(entity.get_type())}"
        itemprop = f' itemprop="{escape_html(prop)}"' if prop else ""
        return f'{itemprop} itemscope itemtype="{itemtype}"'

    def _property_attribute(self, name: str) -> str:
        return f'itemprop="{escape_html(name)}"'

    def _render_nested(self, name: str, entity: SchemaEntity, level: int, depth: int) -> str:
        # The nested item's own element carries the itemprop.
        nested = self._render_entity(entity, depth + 1, name)
        return f"{self._indent(nested, level)}{self._newline}"
