"""CLI entry point for rendering, validating and inspecting entity files."""

from __future__ import annotations

import argparse
import json
import sys

from structmark.config import get_settings
from structmark.debug import format_debug_info, inspect_entity
from structmark.exceptions import SchemaError, SchemaValidationError
from structmark.logging import setup_logging
from structmark.models.enums import OutputFormat
from structmark.render.jsonld import JsonLdRenderer
from structmark.render.microdata import MicrodataRenderer
from structmark.render.rdfa import RdfaRenderer
from structmark.schema import get_type_class, get_type_names, load_entity
from structmark.service import MarkupService
from structmark.validation.engine import ValidationEngine


def _load(path: str):
    try:
        return load_entity(path)
    except SchemaError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)


def cmd_render(args: argparse.Namespace) -> None:
    """Render an entity file in the requested format."""
    settings = get_settings()
    entity = _load(args.file)
    pretty = settings.pretty_print and not args.no_pretty
    html_options = dict(
        pretty_print=pretty,
        container_element=args.container or settings.container_element,
        use_semantic_elements=args.semantic or settings.use_semantic_elements,
        include_meta_elements=settings.include_meta_elements and not args.no_meta,
        max_depth=settings.max_depth,
    )
    service = MarkupService(
        json_ld=JsonLdRenderer(
            pretty_print=pretty,
            include_script_tag=args.script_tag,
            compact_output=args.compact,
            max_depth=settings.max_depth,
        ),
        microdata=MicrodataRenderer(**html_options),
        rdfa=RdfaRenderer(**html_options),
        strict=args.strict or settings.strict_mode,
    )
    try:
        print(service.render(entity, args.format))
    except SchemaValidationError as exc:
        print(f"Refusing to render invalid {entity.get_type()}:", file=sys.stderr)
        for message in exc.error_messages:
            print(f"  - {message}", file=sys.stderr)
        sys.exit(1)


def cmd_validate(args: argparse.Namespace) -> None:
    """Validate an entity file; exit status 1 when it has errors."""
    entity = _load(args.file)
    engine = ValidationEngine(stop_on_first_error=args.stop_on_first_error)
    result = engine.validate(entity)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, default=str))
    else:
        status = "OK" if result.is_valid() else "INVALID"
        print(f"{entity.get_type()}: {status} ({result.error_count} error(s), {result.warning_count} warning(s))")
        for error in result.errors:
            print(f"  error   [{error.code}] {error.message}")
        for warning in result.warnings:
            print(f"  warning [{warning.code}] {warning.message}")

    if not result.is_valid():
        sys.exit(1)


def cmd_debug(args: argparse.Namespace) -> None:
    """Print a debug report for an entity file."""
    entity = _load(args.file)
    print(format_debug_info(inspect_entity(entity)))


def cmd_types(args: argparse.Namespace) -> None:
    """List registered schema types and their required properties."""
    for name in get_type_names():
        cls = get_type_class(name)
        required = ", ".join(cls.required_properties) or "-"
        print(f"{name:<14} required: {required}  ({len(cls.valid_properties())} properties)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="structmark",
        description="Schema.org structured data – validate and render JSON-LD, Microdata, RDFa",
    )
    sub = parser.add_subparsers(dest="command")

    # render
    p_render = sub.add_parser("render", help="Render an entity file")
    p_render.add_argument("file", help="Path to a JSON or YAML entity document")
    p_render.add_argument(
        "--format", "-f",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.JSON_LD.value,
    )
    p_render.add_argument("--no-pretty", action="store_true", help="Compact whitespace")
    p_render.add_argument("--compact", action="store_true", help="JSON-LD: drop empty values")
    p_render.add_argument("--script-tag", action="store_true", help="JSON-LD: wrap in a script element")
    p_render.add_argument("--semantic", action="store_true", help="HTML: use semantic elements")
    p_render.add_argument("--no-meta", action="store_true", help="HTML: no meta elements")
    p_render.add_argument("--container", default=None, help="HTML: container element name")
    p_render.add_argument("--strict", action="store_true", help="Refuse to render invalid entities")
    p_render.set_defaults(func=cmd_render)

    # validate
    p_val = sub.add_parser("validate", help="Validate an entity file")
    p_val.add_argument("file", help="Path to a JSON or YAML entity document")
    p_val.add_argument("--json", action="store_true", help="Print the result as JSON")
    p_val.add_argument("--stop-on-first-error", action="store_true")
    p_val.set_defaults(func=cmd_validate)

    # debug
    p_debug = sub.add_parser("debug", help="Show a debug report for an entity file")
    p_debug.add_argument("file", help="Path to a JSON or YAML entity document")
    p_debug.set_defaults(func=cmd_debug)

    # types
    p_types = sub.add_parser("types", help="List known schema types")
    p_types.set_defaults(func=cmd_types)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    setup_logging(get_settings().log_level.value)
    parser = build_parser()
    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
