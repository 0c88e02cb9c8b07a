"""JSON-LD renderer.

See https://json-ld.org/
"""

from __future__ import annotations

import json
from typing import Any

from structmark.logging import get_logger
from structmark.models.entity import DEFAULT_MAX_DEPTH, SchemaEntity
from structmark.models.enums import OutputFormat
from structmark.render.base import Renderer

log = get_logger("render")

SCRIPT_MIME_TYPE = "application/ld+json"


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "") or (
        isinstance(value, (list, dict)) and not value
    )


def compact_tree(value: Any) -> Any:
    """Drop null, empty-string and empty list/mapping values, recursively.

    Containers left empty by the cleanup are dropped too, so a second pass is
    a no-op.
    """
    if isinstance(value, dict):
        cleaned: dict[str, Any] = {}
        for key, item in value.items():
            item = compact_tree(item)
            if not _is_empty(item):
                cleaned[key] = item
        return cleaned
    if isinstance(value, list):
        return [c for c in (compact_tree(item) for item in value) if not _is_empty(c)]
    return value


class JsonLdRenderer(Renderer):
    format = OutputFormat.JSON_LD

    def __init__(
        self,
        *,
        pretty_print: bool = True,
        unescape_slashes: bool = True,
        unescape_unicode: bool = True,
        include_script_tag: bool = False,
        compact_output: bool = False,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        super().__init__(pretty_print=pretty_print, max_depth=max_depth)
        self.unescape_slashes = unescape_slashes
        self.unescape_unicode = unescape_unicode
        self.include_script_tag = include_script_tag
        self.compact_output = compact_output

    # ── Chainable configuration ─────────────────────────

    def set_unescape_slashes(self, unescape: bool) -> JsonLdRenderer:
        self.unescape_slashes = unescape
        return self

    def set_unescape_unicode(self, unescape: bool) -> JsonLdRenderer:
        self.unescape_unicode = unescape
        return self

    def set_include_script_tag(self, include: bool) -> JsonLdRenderer:
        self.include_script_tag = include
        return self

    def set_compact_output(self, compact: bool) -> JsonLdRenderer:
        self.compact_output = compact
        return self

    def get_mime_type(self) -> str:
        return "text/html" if self.include_script_tag else SCRIPT_MIME_TYPE

    # ── Rendering ───────────────────────────────────────

    def render(self, entity: SchemaEntity) -> str:
        data = entity.to_tree(max_depth=self.max_depth)
        if self.compact_output:
            data = compact_tree(data)

        # TypeError from unserialisable values and ValueError from NaN or
        # infinity propagate to the caller.
        text = json.dumps(
            data,
            allow_nan=False,
            ensure_ascii=not self.unescape_unicode,
            indent=4 if self.pretty_print else None,
            separators=None if self.pretty_print else (",", ":"),
        )
        if not self.unescape_slashes:
            text = text.replace("/", "\\/")

        log.debug("render_finished", format=self.get_format(), schema_type=entity.get_type(), length=len(text))

        if self.include_script_tag:
            # "</" inside a string would close the script element early.
            text = text.replace("</", "<\\/")
            return f'<script type="{SCRIPT_MIME_TYPE}">\n{text}\n</script>'
        return text

    def render_with_script_tag(self, entity: SchemaEntity) -> str:
        """Render once wrapped in a script element, keeping the current setting."""
        previous = self.include_script_tag
        self.include_script_tag = True
        try:
            return self.render(entity)
        finally:
            self.include_script_tag = previous
