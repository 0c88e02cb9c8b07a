"""Entity inspection for troubleshooting markup.

``inspect_entity`` collects what an entity holds, how it validates and how
deeply it nests; ``format_debug_info`` turns that into a readable report.
"""

from __future__ import annotations

from typing import Any

from structmark.models.entity import SchemaEntity, classify_value, is_sequence
from structmark.validation.engine import ValidationEngine, Validator

_PREVIEW_LENGTH = 50


def inspect_entity(entity: SchemaEntity, validator: Validator | None = None) -> dict[str, Any]:
    result = (validator or ValidationEngine()).validate(entity)
    issues_by_property: dict[str, list[str]] = {}
    for error in result.errors:
        if error.property:
            issues_by_property.setdefault(error.property, []).append(error.message)

    return {
        "type": entity.get_type(),
        "context": entity.get_context(),
        "class": type(entity).__name__,
        "properties": {
            name: {
                "value": value,
                "kind": _kind_name(value),
                "errors": issues_by_property.get(name, []),
            }
            for name, value in entity.get_properties().items()
        },
        "validation": {
            "valid": result.is_valid(),
            "error_count": result.error_count,
            "warning_count": result.warning_count,
            "errors": result.error_messages(),
            "warnings": result.warning_messages(),
        },
        "structure": _structure(entity),
    }


def _kind_name(value: Any) -> str:
    if isinstance(value, SchemaEntity):
        return f"entity:{value.get_type()}"
    kind = classify_value(value)
    return kind.value if kind is not None else type(value).__name__


def _nested_entities(value: Any) -> list[SchemaEntity]:
    if isinstance(value, SchemaEntity):
        return [value]
    if is_sequence(value):
        return [e for item in value for e in _nested_entities(item)]
    return []


def _structure(entity: SchemaEntity) -> dict[str, Any]:
    nested_count = 0
    nested_types: set[str] = set()
    max_depth = 0
    # Iterative walk; ``seen`` stops a self-referencing entity from looping.
    stack: list[tuple[SchemaEntity, int]] = [(entity, 0)]
    seen: set[int] = set()
    while stack:
        current, depth = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        max_depth = max(max_depth, depth)
        for value in current.get_properties().values():
            for child in _nested_entities(value):
                nested_count += 1
                nested_types.add(child.get_type())
                stack.append((child, depth + 1))

    return {
        "property_count": len(entity.get_properties()),
        "nested_count": nested_count,
        "max_depth": max_depth,
        "nested_types": sorted(nested_types),
    }


def _preview(value: Any) -> str:
    if isinstance(value, SchemaEntity):
        return f"[{value.get_type()} entity]"
    if is_sequence(value):
        return f"[{len(value)} items]"
    text = repr(value)
    return text if len(text) <= _PREVIEW_LENGTH else text[: _PREVIEW_LENGTH - 3] + "..."


def format_debug_info(info: dict[str, Any]) -> str:
    lines = [
        "=== Schema Debug Information ===",
        f"Type: {info['type']}",
        f"Context: {info['context']}",
        f"Class: {info['class']}",
        "",
        "--- Properties ---",
    ]
    for name, details in info["properties"].items():
        lines.append(f"  {name}: {_preview(details['value'])}")
        lines.append(f"    Type: {details['kind']}")
        if details["errors"]:
            lines.append(f"    Errors: {', '.join(details['errors'])}")

    validation = info["validation"]
    lines += [
        "",
        "--- Validation ---",
        f"  Valid: {'Yes' if validation['valid'] else 'No'}",
        f"  Error Count: {validation['error_count']}",
        f"  Warning Count: {validation['warning_count']}",
    ]
    for label, key in (("Errors", "errors"), ("Warnings", "warnings")):
        if validation[key]:
            lines.append(f"  {label}:")
            lines.extend(f"    - {message}" for message in validation[key])

    structure = info["structure"]
    lines += [
        "",
        "--- Structure ---",
        f"  Property Count: {structure['property_count']}",
        f"  Nested Schemas: {structure['nested_count']}",
        f"  Max Depth: {structure['max_depth']}",
    ]
    if structure["nested_types"]:
        lines.append(f"  Nested Types: {', '.join(structure['nested_types'])}")
    return "\n".join(lines)
