"""
Pydantic schemas defining the contracts between pipeline stages.

Data flow through the pipeline:
  Scanner     → list[Table]          (raw document order, rows partially filled)
  Classifier  → list[Entity]         (RecordDef / UnionDef / OperationDef)
  Synthesizer → GeneratedSources     (types module text + operations module text)

TypeExpr is the closed type algebra produced by the type phrase interpreter:
Scalar, ListOf and Sum. Nodes are frozen, so equality is purely structural and
expressions can be used as dict keys.
"""

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .naming import camel_case


# --- Type algebra ---

class Scalar(BaseModel):
    """An atomic named type, after alias resolution."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["scalar"] = "scalar"
    name: str


class ListOf(BaseModel):
    """'Array of T'."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["list"] = "list"
    item: "TypeExpr"


class Sum(BaseModel):
    """
    A disjoint union of exactly two alternatives.

    'A or B or C' is right-nested: Sum(A, Sum(B, C)).
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["sum"] = "sum"
    left: "TypeExpr"
    right: "TypeExpr"


TypeExpr = Union[Scalar, ListOf, Sum]

ListOf.model_rebuild()
Sum.model_rebuild()


# --- Scanner output ---

class Optionality(str, Enum):
    """What the third table cell said about a field."""
    EXPLICIT_REQUIRED = "explicit_required"   # cell was exactly "Yes"
    EXPLICIT_OPTIONAL = "explicit_optional"   # cell was exactly "Optional"
    UNSPECIFIED = "unspecified"               # cell was a description


class DocumentField(BaseModel):
    """
    One documented parameter or property (one table row).

    name and type_phrase stay None until the matching cell is seen; rows that
    never get both are dropped by the classifier.
    """
    name: Optional[str] = None                 # Wire-format identifier, e.g. "chat_id"
    type_phrase: Optional[str] = None          # Link-stripped type cell text
    type_expr: Optional[TypeExpr] = None       # Interpreted type_phrase
    description: Optional[str] = None          # Link-preserving description text
    optionality: Optionality = Optionality.UNSPECIFIED

    @property
    def is_complete(self) -> bool:
        """A usable row: typed, with a name that camel-cases to an identifier."""
        return bool(self.name) and camel_case(self.name).isidentifier() and self.type_expr is not None

    @property
    def is_optional(self) -> bool:
        """
        Explicit cell wins; otherwise a description decides by its "Optional"
        prefix; a row with no description at all is optional.
        """
        if self.optionality is Optionality.EXPLICIT_REQUIRED:
            return False
        if self.optionality is Optionality.EXPLICIT_OPTIONAL:
            return True
        if self.description is not None:
            return self.description.startswith("Optional")
        # No description cell at all
        return True


class Table(BaseModel):
    """One documented section between a heading and its closing marker."""
    title: Optional[str] = None
    note: Optional[str] = None
    fields: list[DocumentField] = Field(default_factory=list)
    case_list: Optional[list[str]] = None      # Present only when the section had a <ul>


# --- Classifier output ---

class RecordDef(BaseModel):
    """A product type: title starts with an upper-case letter, no case list."""
    kind: Literal["record"] = "record"
    title: str
    note: Optional[str] = None
    fields: list[DocumentField] = Field(default_factory=list)


class UnionDef(BaseModel):
    """A tagged choice among the listed case types."""
    kind: Literal["union"] = "union"
    name: str
    note: Optional[str] = None
    cases: list[str] = Field(default_factory=list)


class OperationDef(BaseModel):
    """A remote call: title starts with a lower-case letter."""
    kind: Literal["operation"] = "operation"
    title: str
    note: Optional[str] = None
    fields: list[DocumentField] = Field(default_factory=list)


Entity = Union[RecordDef, UnionDef, OperationDef]


# --- Pipeline product ---

class GeneratedSources(BaseModel):
    """Output from the synthesizer, the final pipeline product."""
    types_source: str                # Types module (prelude + records + unions)
    operations_source: str           # Operations module (request builders)
    entity_count: int = 0            # Synthetic + document entities rendered
    warnings: list[str] = Field(default_factory=list)  # Non-fatal issues, e.g. skipped unions
