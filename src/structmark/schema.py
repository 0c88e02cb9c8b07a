"""Type registry and entity construction from plain data.

Provides:
  1. A registry of Schema.org type name → entity class
  2. ``create_schema()`` for building an entity by type name
  3. ``entity_from_dict()`` for turning JSON-LD-shaped data into an entity tree
  4. ``load_entity()`` for reading such data from a JSON or YAML file
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import yaml

from structmark.config import get_settings
from structmark.exceptions import SchemaError, UnknownSchemaTypeError
from structmark.logging import get_logger
from structmark.models.entity import SchemaEntity
from structmark.models.types import Article, Organization, Person, Thing

log = get_logger("schema")

_TYPE_REGISTRY: dict[str, type[SchemaEntity]] = {
    cls.schema_type: cls for cls in (Thing, Article, Person, Organization)
}


# ── Registry ────────────────────────────────────────────

def register_type(cls: type[SchemaEntity]) -> type[SchemaEntity]:
    """Add ``cls`` to the registry under its ``schema_type``; usable as a decorator."""
    if not (isinstance(cls, type) and issubclass(cls, SchemaEntity)):
        raise SchemaError(f"Cannot register {cls!r}: not a SchemaEntity subclass")
    _TYPE_REGISTRY[cls.schema_type] = cls
    log.debug("type_registered", schema_type=cls.schema_type)
    return cls


def get_type_names() -> list[str]:
    return sorted(_TYPE_REGISTRY)


def get_type_class(type_name: str) -> type[SchemaEntity]:
    """Look up a type by name, falling back to a case-insensitive match."""
    cls = _TYPE_REGISTRY.get(type_name)
    if cls is not None:
        return cls
    for name, candidate in _TYPE_REGISTRY.items():
        if name.lower() == type_name.lower():
            return candidate
    raise UnknownSchemaTypeError(type_name, get_type_names())


def create_schema(
    type_name: str,
    properties: Mapping[str, Any] | None = None,
    context: str | None = None,
) -> SchemaEntity:
    """Instantiate a registered type; ``context`` defaults to the configured one."""
    return get_type_class(type_name)(properties, context or get_settings().default_context)


# ── Plain data → entities ───────────────────────────────

def entity_from_dict(data: Mapping[str, Any]) -> SchemaEntity:
    """Build an entity from a mapping carrying ``@type``.

    Nested mappings with their own ``@type`` (also inside lists) become
    nested entities; everything else is kept as-is.
    """
    if not isinstance(data, Mapping):
        raise SchemaError("Entity data must be a mapping, got " + type(data).__name__)
    type_name = data.get("@type")
    if not isinstance(type_name, str) or not type_name:
        raise SchemaError("Entity data has no '@type'", {"keys": list(data)})

    context = data.get("@context")
    if context is not None and not isinstance(context, str):
        raise SchemaError("'@context' must be a string", {"type": type_name})

    properties = {
        name: _convert(value)
        for name, value in data.items()
        if name not in ("@type", "@context")
    }
    return create_schema(type_name, properties, context)


def _convert(value: Any) -> Any:
    if isinstance(value, Mapping) and "@type" in value:
        return entity_from_dict(value)
    if isinstance(value, list):
        return [_convert(item) for item in value]
    return value


def load_entity(path: str | Path) -> SchemaEntity:
    """Read a ``.json``, ``.yaml`` or ``.yml`` document and build its entity.

    YAML timestamps and dates arrive as ``datetime``/``date`` values.
    """
    path = Path(path)
    if not path.exists():
        raise SchemaError(f"Entity file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as fh:
            if path.suffix.lower() == ".json":
                raw = json.load(fh)
            else:
                raw = yaml.safe_load(fh)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as exc:
        raise SchemaError(
            f"Cannot parse entity file: {path}",
            {"path": str(path), "reason": str(exc)},
        ) from exc

    entity = entity_from_dict(raw)
    log.debug("entity_loaded", path=str(path), schema_type=entity.get_type())
    return entity
