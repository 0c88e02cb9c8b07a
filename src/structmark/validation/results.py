"""Validation outcome value objects."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from structmark.models.enums import ErrorCode


class ValidationError(BaseModel):
    """A single validation error or warning.

    Not an exception: issues are collected into a ``ValidationResult``.
    """
    model_config = ConfigDict(frozen=True)

    message: str
    code: str
    property: str | None = None
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "property": self.property,
            "value": self.value,
        }

    # ── Factories, one per error category ───────────────

    @classmethod
    def required_property(cls, name: str) -> ValidationError:
        return cls(
            message=f"Required property '{name}' is missing",
            code=ErrorCode.REQUIRED_PROPERTY_MISSING.value,
            property=name,
        )

    @classmethod
    def invalid_property_type(cls, name: str, expected: str, actual: Any) -> ValidationError:
        return cls(
            message=f"Property '{name}' expects type '{expected}', got '{type(actual).__name__}'",
            code=ErrorCode.INVALID_PROPERTY_TYPE.value,
            property=name,
            value=actual,
        )

    @classmethod
    def invalid_property_value(cls, name: str, value: Any, reason: str) -> ValidationError:
        return cls(
            message=f"Property '{name}' has invalid value: {reason}",
            code=ErrorCode.INVALID_PROPERTY_VALUE.value,
            property=name,
            value=value,
        )

    @classmethod
    def unknown_property(cls, name: str) -> ValidationError:
        return cls(
            message=f"Unknown property '{name}' for this schema type",
            code=ErrorCode.UNKNOWN_PROPERTY.value,
            property=name,
        )

    @classmethod
    def empty_property(cls, name: str, value: Any) -> ValidationError:
        return cls(
            message=f"Property '{name}' is empty or has no meaningful value",
            code=ErrorCode.EMPTY_PROPERTY.value,
            property=name,
            value=value,
        )


class ValidationResult(BaseModel):
    """Errors and warnings from one or more rules.

    Only errors affect validity; warnings are informational.
    """
    model_config = ConfigDict(frozen=True)

    errors: tuple[ValidationError, ...] = ()
    warnings: tuple[ValidationError, ...] = ()

    def is_valid(self) -> bool:
        return not self.errors

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def error_messages(self) -> list[str]:
        return [e.message for e in self.errors]

    def warning_messages(self) -> list[str]:
        return [w.message for w in self.warnings]

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Concatenate both lists into a new result."""
        return ValidationResult(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.is_valid(),
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
            "errorCount": self.error_count,
            "warningCount": self.warning_count,
        }

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def with_errors(cls, errors: list[ValidationError]) -> ValidationResult:
        return cls(errors=tuple(errors))

    @classmethod
    def with_warnings(cls, warnings: list[ValidationError]) -> ValidationResult:
        return cls(warnings=tuple(warnings))
