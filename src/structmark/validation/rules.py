"""Built-in validation rules.

Each rule is an independent, stateless check over a single entity:

  - ``RequiredPropertiesRule``   – declared required properties are present
  - ``PropertyTypesRule``        – well-known properties carry an allowed value kind
  - ``EmptyValuesRule``          – flags null / blank / empty values (warnings only)
  - ``SchemaOrgComplianceRule``  – URL, email and telephone formats, unknown names

Custom rules subclass ``ValidationRule`` and are registered on a
``ValidationEngine``.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from email_validator import EmailNotValidError, validate_email
from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from structmark.models.entity import SchemaEntity, classify_value, is_sequence
from structmark.models.enums import Severity, ValueKind
from structmark.validation.results import ValidationError, ValidationResult


class ValidationRule(ABC):
    """A single check with an id, a severity and an applicability predicate."""

    rule_id: ClassVar[str]
    description: ClassVar[str] = ""
    severity: ClassVar[Severity] = Severity.ERROR

    def applies_to(self, entity: Any) -> bool:
        return isinstance(entity, SchemaEntity)

    @abstractmethod
    def validate(self, entity: SchemaEntity) -> ValidationResult:
        """Inspect ``entity`` and report what is wrong with it."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rule_id={self.rule_id!r}, severity={self.severity.value!r})"


# ── 1. Required properties ──────────────────────────────
class RequiredPropertiesRule(ValidationRule):
    rule_id = "required_properties"
    description = "Validates that all required properties are present"

    def validate(self, entity: SchemaEntity) -> ValidationResult:
        # Presence only: an empty value still counts as set.
        errors = [
            ValidationError.required_property(name)
            for name in entity.get_required_properties()
            if not entity.has_property(name)
        ]
        return ValidationResult.with_errors(errors)


# ── 2. Property types ───────────────────────────────────
_S, _I, _Q, _D = ValueKind.STRING, ValueKind.INTEGER, ValueKind.SEQUENCE, ValueKind.DATETIME

PROPERTY_TYPES: dict[str, tuple[ValueKind, ...]] = {
    # URLs
    "url": (_S,),
    "sameAs": (_S, _Q),
    "image": (_S, _Q),
    "mainEntityOfPage": (_S,),
    "additionalType": (_S,),
    # Text
    "name": (_S,),
    "description": (_S,),
    "alternateName": (_S,),
    "disambiguatingDescription": (_S,),
    "identifier": (_S, _I),
    # Dates
    "dateCreated": (_D,),
    "dateModified": (_D,),
    "datePublished": (_D,),
    "birthDate": (_D,),
    "foundingDate": (_D,),
    # Numbers
    "wordCount": (_I,),
    "numberOfEmployees": (_I,),
    # Contact
    "email": (_S,),
    "telephone": (_S,),
    # Collections
    "keywords": (_S, _Q),
    "potentialAction": (_Q,),
    "knowsAbout": (_Q,),
    "department": (_Q,),
    "subOrganization": (_Q,),
}


class PropertyTypesRule(ValidationRule):
    rule_id = "property_types"
    description = "Validates property types based on Schema.org specifications"

    def __init__(self, property_types: dict[str, tuple[ValueKind, ...]] | None = None) -> None:
        self._property_types = dict(PROPERTY_TYPES if property_types is None else property_types)

    def validate(self, entity: SchemaEntity) -> ValidationResult:
        errors: list[ValidationError] = []
        for name, value in entity.get_properties().items():
            allowed = self._property_types.get(name)
            if allowed is None:
                # Unmapped names are not type-checked.
                continue
            if classify_value(value) not in allowed:
                errors.append(ValidationError.invalid_property_type(
                    name, "|".join(k.value for k in allowed), value,
                ))
        return ValidationResult.with_errors(errors)


# ── 3. Empty values ─────────────────────────────────────
class EmptyValuesRule(ValidationRule):
    rule_id = "empty_values"
    description = "Validates that properties don't have empty or meaningless values"
    severity = Severity.WARNING

    def validate(self, entity: SchemaEntity) -> ValidationResult:
        warnings = [
            ValidationError.empty_property(name, value)
            for name, value in entity.get_properties().items()
            if _is_empty(value)
        ]
        return ValidationResult.with_warnings(warnings)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return is_sequence(value) and len(value) == 0


# ── 4. Schema.org compliance ────────────────────────────
URL_PROPERTIES = frozenset({
    "url", "sameAs", "mainEntityOfPage", "additionalType", "image", "logo",
})

TELEPHONE_PATTERN = re.compile(r"^\+?[\d\s\-().]{7,}$")

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def is_valid_url(value: str) -> bool:
    """Absolute URL with a scheme and a host."""
    try:
        url = _url_adapter.validate_python(value)
    except PydanticValidationError:
        return False
    return bool(url.scheme and url.host)


def is_valid_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_telephone(value: str) -> bool:
    return TELEPHONE_PATTERN.match(value) is not None


class SchemaOrgComplianceRule(ValidationRule):
    rule_id = "schema_org_compliance"
    description = "Validates Schema.org compliance for common patterns and requirements"

    def validate(self, entity: SchemaEntity) -> ValidationResult:
        errors: list[ValidationError] = []
        warnings: list[ValidationError] = []
        known = entity.valid_properties()

        for name, value in entity.get_properties().items():
            if isinstance(value, str):
                if name in URL_PROPERTIES and not is_valid_url(value):
                    errors.append(ValidationError.invalid_property_value(
                        name, value, "must be a valid URL",
                    ))
                elif name == "email" and not is_valid_email(value):
                    errors.append(ValidationError.invalid_property_value(
                        name, value, "must be a valid email address",
                    ))
                elif name == "telephone" and not is_valid_telephone(value):
                    warnings.append(ValidationError.invalid_property_value(
                        name, value, "should follow international format (e.g., +1-555-123-4567)",
                    ))

            if name not in known:
                warnings.append(ValidationError.unknown_property(name))

        return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))


def default_rules() -> list[ValidationRule]:
    """The rules every new ``ValidationEngine`` starts with, in order."""
    return [
        RequiredPropertiesRule(),
        PropertyTypesRule(),
        EmptyValuesRule(),
        SchemaOrgComplianceRule(),
    ]
