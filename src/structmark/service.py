"""Markup service – one place that wires a validator to the three renderers.

Replaces process-wide renderer/validator defaults: callers either construct a
``MarkupService`` with the collaborators they want or take the one built from
``Settings``. In strict mode every render is preceded by validation and an
invalid entity raises ``SchemaValidationError`` instead of producing markup.
"""

from __future__ import annotations

from structmark.config import Settings, get_settings
from structmark.exceptions import SchemaValidationError
from structmark.logging import get_logger
from structmark.models.entity import SchemaEntity
from structmark.models.enums import OutputFormat
from structmark.render.base import Renderer
from structmark.render.jsonld import JsonLdRenderer
from structmark.render.microdata import MicrodataRenderer
from structmark.render.rdfa import RdfaRenderer
from structmark.validation.engine import ValidationEngine, Validator
from structmark.validation.results import ValidationResult

log = get_logger("service")


class MarkupService:
    """Validate and render entities with injected collaborators."""

    def __init__(
        self,
        validator: Validator | None = None,
        json_ld: JsonLdRenderer | None = None,
        microdata: MicrodataRenderer | None = None,
        rdfa: RdfaRenderer | None = None,
        *,
        strict: bool = False,
    ) -> None:
        self.validator: Validator = validator or ValidationEngine()
        self._renderers: dict[OutputFormat, Renderer] = {
            OutputFormat.JSON_LD: json_ld or JsonLdRenderer(),
            OutputFormat.MICRODATA: microdata or MicrodataRenderer(),
            OutputFormat.RDFA: rdfa or RdfaRenderer(),
        }
        self.strict = strict

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> MarkupService:
        s = settings or get_settings()
        html_options = dict(
            pretty_print=s.pretty_print,
            container_element=s.container_element,
            use_semantic_elements=s.use_semantic_elements,
            include_meta_elements=s.include_meta_elements,
            max_depth=s.max_depth,
        )
        return cls(
            json_ld=JsonLdRenderer(pretty_print=s.pretty_print, max_depth=s.max_depth),
            microdata=MicrodataRenderer(**html_options),
            rdfa=RdfaRenderer(**html_options),
            strict=s.strict_mode,
        )

    def renderer_for(self, fmt: OutputFormat | str) -> Renderer:
        return self._renderers[OutputFormat(fmt)]

    def validate(self, entity: SchemaEntity) -> ValidationResult:
        return self.validator.validate(entity)

    def render(self, entity: SchemaEntity, fmt: OutputFormat | str) -> str:
        renderer = self.renderer_for(fmt)
        if self.strict:
            result = self.validate(entity)
            if not result.is_valid():
                log.warning(
                    "strict_mode_rejected",
                    schema_type=entity.get_type(),
                    format=renderer.get_format(),
                    errors=result.error_count,
                )
                raise SchemaValidationError(result)
        return renderer.render(entity)

    def to_json_ld(self, entity: SchemaEntity) -> str:
        return self.render(entity, OutputFormat.JSON_LD)

    def to_microdata(self, entity: SchemaEntity) -> str:
        return self.render(entity, OutputFormat.MICRODATA)

    def to_rdfa(self, entity: SchemaEntity) -> str:
        return self.render(entity, OutputFormat.RDFA)
