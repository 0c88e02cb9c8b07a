"""Rule-based validation engine.

Holds an ordered, mutable registry of rules keyed by rule id, applies the ones
whose ``applies_to`` matches an entity and files each rule's findings by its
severity. Rule registration is meant to happen before an engine is shared.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Protocol

from structmark.logging import get_logger
from structmark.models.enums import Severity
from structmark.validation.results import ValidationError, ValidationResult
from structmark.validation.rules import ValidationRule, default_rules

if TYPE_CHECKING:
    from structmark.models.entity import SchemaEntity

log = get_logger("validation")


class Validator(Protocol):
    """Anything that can turn an entity into a ``ValidationResult``."""

    def validate(self, entity: SchemaEntity) -> ValidationResult: ...


class ValidationEngine:
    """Applies registered rules in registration order.

    Usage:
        engine = ValidationEngine().set_stop_on_first_error(True)
        engine.add_rule(MyCustomRule())
        result = engine.validate(article)
    """

    def __init__(
        self,
        rules: Iterable[ValidationRule] | None = None,
        *,
        stop_on_first_error: bool = False,
    ) -> None:
        self._rules: dict[str, ValidationRule] = {}
        self._stop_on_first_error = stop_on_first_error
        for rule in default_rules() if rules is None else rules:
            self.add_rule(rule)

    # ── Registry ────────────────────────────────────────

    def add_rule(self, rule: ValidationRule) -> ValidationEngine:
        """Register ``rule``, replacing any rule with the same id."""
        replaced = rule.rule_id in self._rules
        self._rules[rule.rule_id] = rule
        log.debug("rule_registered", rule_id=rule.rule_id, replaced=replaced)
        return self

    def remove_rule(self, rule_id: str) -> ValidationEngine:
        if self._rules.pop(rule_id, None) is not None:
            log.debug("rule_removed", rule_id=rule_id)
        return self

    def has_rule(self, rule_id: str) -> bool:
        return rule_id in self._rules

    def get_rule(self, rule_id: str) -> ValidationRule | None:
        return self._rules.get(rule_id)

    def get_rules(self) -> list[ValidationRule]:
        return list(self._rules.values())

    def clear_rules(self) -> ValidationEngine:
        self._rules.clear()
        return self

    def supported_rules(self) -> list[str]:
        return list(self._rules)

    def get_applicable_rules(self, entity: SchemaEntity) -> list[ValidationRule]:
        return [rule for rule in self._rules.values() if rule.applies_to(entity)]

    @property
    def stop_on_first_error(self) -> bool:
        return self._stop_on_first_error

    def set_stop_on_first_error(self, stop: bool) -> ValidationEngine:
        self._stop_on_first_error = stop
        return self

    # ── Validation ──────────────────────────────────────

    def validate(self, entity: SchemaEntity) -> ValidationResult:
        errors: list[ValidationError] = []
        warnings: list[ValidationError] = []

        for rule in self.get_applicable_rules(entity):
            result = rule.validate(entity)

            if rule.severity == Severity.ERROR:
                errors.extend(result.errors)
                if self._stop_on_first_error and result.has_errors():
                    log.debug("validation_stopped", rule_id=rule.rule_id)
                    # Warnings the failing rule reported are kept.
                    warnings.extend(result.warnings)
                    break
            else:
                warnings.extend(result.errors)

            warnings.extend(result.warnings)

        log.debug(
            "validation_finished",
            schema_type=entity.get_type(),
            errors=len(errors),
            warnings=len(warnings),
        )
        return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
