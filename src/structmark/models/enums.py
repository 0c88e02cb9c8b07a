"""Shared enumerations used across validation and rendering."""

from __future__ import annotations

from enum import Enum


# ── Validation ───────────────────────────────────────────
class Severity(str, Enum):
    """How the engine files the issues a rule reports."""
    ERROR = "error"
    WARNING = "warning"


class ErrorCode(str, Enum):
    REQUIRED_PROPERTY_MISSING = "REQUIRED_PROPERTY_MISSING"
    INVALID_PROPERTY_TYPE = "INVALID_PROPERTY_TYPE"
    INVALID_PROPERTY_VALUE = "INVALID_PROPERTY_VALUE"
    UNKNOWN_PROPERTY = "UNKNOWN_PROPERTY"
    EMPTY_PROPERTY = "EMPTY_PROPERTY"


# ── Property values ──────────────────────────────────────
class ValueKind(str, Enum):
    """Semantic type of a property value, as seen by the type allow-list."""
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    SEQUENCE = "sequence"
    DATETIME = "datetime"
    ENTITY = "entity"


# ── Output ───────────────────────────────────────────────
class OutputFormat(str, Enum):
    JSON_LD = "json-ld"
    MICRODATA = "microdata"
    RDFA = "rdfa"
