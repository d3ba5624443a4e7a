"""
Code synthesizer: classified entities in, two Python modules out.

  RecordDef    → pydantic model with a property → wire name map
  UnionDef     → TaggedUnion subclass (decode by first success, encode by tag)
  OperationDef → @staticmethod request builder on the namespace class

Entity code is produced at depth zero with tab indentation, then embedded:
records and unions at module level, builders one level deep inside the
namespace class. Tabs become four spaces when each module is assembled.
"""

from typing import Optional

from .config import GeneratorConfig
from .naming import camel_case, indent, safe_identifier, variant_labels
from .schemas import (
    DocumentField, Entity, GeneratedSources, ListOf, OperationDef, RecordDef,
    Sum, TypeExpr, UnionDef,
)
from .templates import OPERATIONS_HEADER, PRELUDE, RETURNS_LINE, TYPES_HEADER
from .logger import get_module_logger

logger = get_module_logger("synthesizer")

# Attribute names TaggedUnion itself uses; variant constructors must not shadow them
UNION_RESERVED_NAMES = {"tag", "value", "decode", "encode", "TAGS"}

VOID_TYPE = "None"
DEFAULT_BASE = "BaseModel"


def docstring(text: Optional[str], fallback: str = "") -> str:
    """Make text safe to sit between triple quotes on one line."""
    text = " ".join((text or fallback).split())
    text = text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    if text.endswith('"'):
        text += " "
    return text


class CodeSynthesizer:
    """Renders entities into the types and operations modules."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        # Union name → what to write instead, for unions with fewer than two cases
        self.substitutions: dict[str, str] = {}
        self.warnings: list[str] = []

    # --- Type rendering ---

    def render_scalar(self, name: str) -> str:
        name = self.substitutions.get(name, name)
        return self.config.scalar_types.get(name, name)

    def render_type(self, expr: TypeExpr) -> str:
        if isinstance(expr, ListOf):
            return f"list[{self.render_type(expr.item)}]"
        if isinstance(expr, Sum):
            return f"Either[{self.render_type(expr.left)}, {self.render_type(expr.right)}]"
        return self.render_scalar(expr.name)

    def render_field_type(self, field: DocumentField) -> str:
        rendered = self.render_type(field.type_expr)
        return f"Optional[{rendered}]" if field.is_optional else rendered

    # --- Entity builders ---

    def build_union(self, union: UnionDef) -> str:
        """TaggedUnion subclass for a union with at least two cases."""
        name = union.name
        labels = [
            f"{label}_" if label in UNION_RESERVED_NAMES else label
            for label in variant_labels(union.cases)
        ]
        payloads = [self.render_scalar(case) for case in union.cases]
        variants = list(zip(labels, payloads))

        lines = [
            f"class {name}(TaggedUnion):",
            f'\t"""{docstring(union.note, fallback=name)}"""',
            "",
            f"\tTAGS = {tuple(labels)!r}",
            "",
            "\t@classmethod",
            f"\tdef decode(cls, data: Any) -> {name}:",
            "\t\tfor tag, payload_type in (",
        ]
        lines += [f'\t\t\t("{label}", {payload}),' for label, payload in variants]
        lines += [
            "\t\t):",
            "\t\t\ttry:",
            "\t\t\t\treturn cls(tag, validate_as(payload_type, data))",
            "\t\t\texcept ValidationError:",
            "\t\t\t\tcontinue",
            f'\t\traise UnionDecodeError("{name}", data)',
            "",
            "\tdef encode(self) -> Any:",
        ]
        for label, payload in variants:
            lines += [
                f'\t\tif self.tag == "{label}":',
                f"\t\t\treturn dump_as({payload}, self.value)",
            ]
        lines.append(f'\t\traise ValueError("{name} has no variant " + repr(self.tag))')

        if self.config.fast_initialization:
            for label, payload in variants:
                lines += [
                    "",
                    "\t@classmethod",
                    f"\tdef {label}(cls, {label}: {payload}) -> {name}:",
                    f'\t\treturn cls("{label}", {label})',
                ]

        return "\n".join(lines) + "\n"

    def build_record(self, record: RecordDef) -> str:
        """Pydantic model; empty records become frozen value models."""
        title = record.title
        base = self.config.base_overrides.get(title, DEFAULT_BASE)
        lines = [
            f"class {title}({base}):",
            f'\t"""{docstring(record.note, fallback=title)}"""',
            "",
        ]

        if not record.fields:
            lines.append("\tmodel_config = ConfigDict(frozen=True)")
            return "\n".join(lines) + "\n"

        properties = [(safe_identifier(camel_case(field.name)), field) for field in record.fields]

        # The only place the original wire spelling survives
        lines.append("\tmodel_config = wire_config({")
        lines += [f'\t\t"{prop}": "{field.name}",' for prop, field in properties]
        lines.append("\t})")

        for prop, field in properties:
            lines += ["", f"\t#: {docstring(field.description)}".rstrip()]
            if field.is_optional:
                lines.append(f"\t{prop}: {self.render_field_type(field)} = None")
            else:
                lines.append(f"\t{prop}: {self.render_field_type(field)}")

        return "\n".join(lines) + "\n"

    def build_operation(self, operation: OperationDef) -> str:
        """@staticmethod builder returning a Request."""
        title = operation.title
        function = safe_identifier(title)
        parameters = [(safe_identifier(camel_case(field.name)), field) for field in operation.fields]

        lines = ["@staticmethod"]
        if parameters:
            lines += [f"def {function}(", "\t*,"]
            for param, field in parameters:
                default = " = None" if field.is_optional else ""
                lines.append(f"\t{param}: {self.render_field_type(field)}{default},")
            lines.append(") -> Request:")
        else:
            lines.append(f"def {function}() -> Request:")

        lines.append(f'\t"""{docstring(operation.note, fallback=title)}')
        lines.append("")
        for param, field in parameters:
            lines.append(f"\t:param {param}: {docstring(field.description)}".rstrip())
        lines += [f"\t{RETURNS_LINE}", '\t"""']

        if parameters:
            lines.append("\tparameters = {")
            lines += [f'\t\t"{field.name}": {param},' for param, field in parameters]
            lines.append("\t}")
            lines.append(f'\treturn Request(method="{title}", body=parameters)')
        else:
            lines.append(f'\treturn Request(method="{title}", body={{}})')

        return "\n".join(lines) + "\n"

    # --- Module assembly ---

    def _collect_substitutions(self, entities: list[Entity]) -> None:
        self.substitutions = {}
        for entity in entities:
            if isinstance(entity, UnionDef) and len(entity.cases) < 2:
                self.substitutions[entity.name] = entity.cases[0] if entity.cases else VOID_TYPE

    def synthesize(self, entities: list[Entity]) -> GeneratedSources:
        """
        Render every entity, in order, into the two modules.

        Args:
            entities: Synthetic unions first, then document entities

        Returns:
            GeneratedSources with both module texts
        """
        self.warnings = []
        self._collect_substitutions(entities)

        type_blocks = []
        operation_blocks = []
        for entity in entities:
            if isinstance(entity, UnionDef):
                if entity.name in self.substitutions:
                    message = (f"Union {entity.name} has {len(entity.cases)} case(s); "
                               f"using {self.substitutions[entity.name]} in its place")
                    logger.debug(message)
                    self.warnings.append(message)
                    continue
                type_blocks.append(self.build_union(entity))
            elif isinstance(entity, RecordDef):
                type_blocks.append(self.build_record(entity))
            else:
                operation_blocks.append(indent(self.build_operation(entity), levels=1))

        logger.info(f"Synthesized {len(type_blocks)} types and {len(operation_blocks)} operations")
        return GeneratedSources(
            types_source=self.build_types_module(type_blocks),
            operations_source=self.build_operations_module(operation_blocks),
            entity_count=len(type_blocks) + len(operation_blocks),
            warnings=list(self.warnings),
        )

    def build_types_module(self, blocks: list[str]) -> str:
        header = TYPES_HEADER.format(namespace=self.config.namespace)
        body = "".join(f"\n\n{block}" for block in blocks)
        return (header + PRELUDE + body).replace("\t", "    ")

    def build_operations_module(self, blocks: list[str]) -> str:
        header = OPERATIONS_HEADER.format(
            namespace=self.config.namespace,
            types_module=self.config.types_module,
        )
        body = "".join(f"\n{block}" for block in blocks) if blocks else "\n\tpass\n"
        return (header + body).replace("\t", "    ")


def synthesize(entities: list[Entity], config: Optional[GeneratorConfig] = None) -> GeneratedSources:
    """Convenience function to render entities with a fresh synthesizer."""
    return CodeSynthesizer(config).synthesize(entities)
