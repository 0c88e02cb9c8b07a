"""Exception hierarchy.

Validation problems are normally returned as data (``ValidationResult``);
exceptions are reserved for lookups that cannot succeed, runaway nesting and
the strict-mode gate in front of the renderers.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from structmark.validation.results import ValidationResult


class SchemaError(Exception):
    """Base class for all structmark errors."""

    def __init__(self, message: str = "", context: dict[str, Any] | None = None) -> None:
        self.context: dict[str, Any] = dict(context or {})
        if self.context:
            message += "\n\nAdditional context:"
            for key, value in self.context.items():
                message += f"\n  {key}: {_format_context_value(value)}"
        super().__init__(message)


class UnknownSchemaTypeError(SchemaError):
    """Raised when a type name is not in the type registry."""

    def __init__(self, type_name: str, known: list[str] | None = None) -> None:
        self.type_name = type_name
        super().__init__(
            f"Unknown schema type: {type_name}",
            {
                "type": type_name,
                "known_types": known or [],
                "reference": "https://schema.org/docs/schemas.html",
            },
        )


class SchemaDepthError(SchemaError):
    """Raised when nested entities go deeper than the configured limit."""

    def __init__(self, max_depth: int, schema_type: str) -> None:
        self.max_depth = max_depth
        super().__init__(
            f"Entity nesting exceeds maximum depth of {max_depth}",
            {"type": schema_type, "hint": "check for an entity that references itself"},
        )


class SchemaValidationError(SchemaError):
    """Raised by strict mode when an entity fails validation."""

    def __init__(self, result: ValidationResult, message: str = "Schema validation failed") -> None:
        self.result = result
        super().__init__(message, {"errors": result.error_messages()})

    @property
    def error_messages(self) -> list[str]:
        return self.result.error_messages()


def _format_context_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        shown = ", ".join(v if isinstance(v, str) else json.dumps(v, default=str) for v in value[:3])
        return f"[{shown}{'...' if len(value) > 3 else ''}]"
    return json.dumps(value, default=str)
