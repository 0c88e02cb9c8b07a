"""Schema.org entity base class – an immutable property bag.

Concrete Schema.org types live in ``structmark.models.types``; this module
provides only what they share:

  * ``SchemaEntity``  – frozen property map + context URI, copy-on-write updates
  * ``classify_value`` – maps a runtime value onto a ``ValueKind``
  * ``format_datetime`` – ISO-8601 text used by every output format
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from structmark.exceptions import SchemaDepthError
from structmark.models.enums import ValueKind

if TYPE_CHECKING:
    from structmark.service import MarkupService
    from structmark.validation.engine import Validator
    from structmark.validation.results import ValidationResult

DEFAULT_CONTEXT = "https://schema.org"
DEFAULT_MAX_DEPTH = 32


def format_datetime(value: date) -> str:
    """ISO-8601 extended format; naive datetimes are taken to be UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat(timespec="seconds")
    return value.isoformat()


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def classify_value(value: Any) -> ValueKind | None:
    """Return the semantic kind of ``value``, or None for anything unmodelled."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, date):
        return ValueKind.DATETIME
    if isinstance(value, SchemaEntity):
        return ValueKind.ENTITY
    if is_sequence(value):
        return ValueKind.SEQUENCE
    return None


class SchemaEntity(BaseModel):
    """Base class for all Schema.org types.

    Instances never change after construction: the property map is stored
    read-only and ``with_property`` returns a new entity with a copied map.
    No validation happens on construction or update; call ``validate()``
    explicitly.
    """
    model_config = ConfigDict(frozen=True)

    schema_type: ClassVar[str] = "Thing"
    required_properties: ClassVar[tuple[str, ...]] = ()
    optional_properties: ClassVar[tuple[str, ...]] = ()

    properties: Mapping[str, Any] = Field(default_factory=dict)
    context: str = DEFAULT_CONTEXT

    @field_validator("properties")
    @classmethod
    def freeze_properties(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("properties")
    def serialize_properties(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    def __hash__(self) -> int:
        # Values may be unhashable lists; equal entities always share type,
        # context and property names.
        return hash((type(self), self.context, frozenset(self.properties)))

    def __init__(
        self,
        properties: Mapping[str, Any] | None = None,
        context: str = DEFAULT_CONTEXT,
        **data: Any,
    ) -> None:
        super().__init__(properties=dict(properties or {}), context=context, **data)

    # ── Type declarations ───────────────────────────────

    @classmethod
    def get_schema_type(cls) -> str:
        return cls.schema_type

    @classmethod
    def get_required_properties(cls) -> tuple[str, ...]:
        return cls.required_properties

    @classmethod
    def get_optional_properties(cls) -> tuple[str, ...]:
        return cls.optional_properties

    @classmethod
    def valid_properties(cls) -> frozenset[str]:
        """Union of required and optional property names."""
        return frozenset(cls.required_properties) | frozenset(cls.optional_properties)

    # ── Property access ─────────────────────────────────

    def get_type(self) -> str:
        return type(self).schema_type

    def get_context(self) -> str:
        return self.context

    def get_properties(self) -> Mapping[str, Any]:
        """Read-only view of the property map."""
        return self.properties

    def get_property(self, name: str) -> Any:
        return self.properties.get(name)

    def has_property(self, name: str) -> bool:
        return name in self.properties

    def with_property(self, name: str, value: Any) -> SchemaEntity:
        """Return a copy of this entity with ``name`` set to ``value``."""
        properties = dict(self.properties)
        properties[name] = value
        return type(self)(properties, self.context)

    # ── Serialisation ───────────────────────────────────

    def to_tree(self, max_depth: int = DEFAULT_MAX_DEPTH) -> dict[str, Any]:
        """Plain-data tree: ``@context``, ``@type``, then each property.

        Nested entities become their own trees, dates become ISO-8601 strings
        and sequences are converted element-wise.
        """
        return self._tree(0, max_depth)

    def _tree(self, depth: int, max_depth: int) -> dict[str, Any]:
        if depth > max_depth:
            raise SchemaDepthError(max_depth, self.get_type())
        tree: dict[str, Any] = {"@context": self.context, "@type": self.get_type()}
        for name, value in self.properties.items():
            tree[name] = _tree_value(value, depth, max_depth)
        return tree

    # ── Validation & rendering ──────────────────────────

    def validate(self, validator: Validator | None = None) -> ValidationResult:  # type: ignore[override]
        """Run ``validator`` (a default ``ValidationEngine`` if omitted)."""
        if validator is None:
            from structmark.validation.engine import ValidationEngine
            validator = ValidationEngine()
        return validator.validate(self)

    def is_valid(self, validator: Validator | None = None) -> bool:
        return self.validate(validator).is_valid()

    def to_json_ld(self, service: MarkupService | None = None) -> str:
        return _service(service).to_json_ld(self)

    def to_microdata(self, service: MarkupService | None = None) -> str:
        return _service(service).to_microdata(self)

    def to_rdfa(self, service: MarkupService | None = None) -> str:
        return _service(service).to_rdfa(self)


def _tree_value(value: Any, depth: int, max_depth: int) -> Any:
    if isinstance(value, SchemaEntity):
        return value._tree(depth + 1, max_depth)
    if is_sequence(value):
        return [_tree_value(item, depth, max_depth) for item in value]
    if isinstance(value, date):
        return format_datetime(value)
    return value


def _service(service: MarkupService | None) -> MarkupService:
    if service is not None:
        return service
    from structmark.service import MarkupService
    return MarkupService.from_settings()
