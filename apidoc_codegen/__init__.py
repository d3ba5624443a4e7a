"""
API doc code generator

Turns a published API reference page into Python source: pydantic models and
tagged unions for the documented types, and request builders for the
documented operations.
- Scanner: line-oriented recognition of headings, notes, lists and tables
- Classifier: records, unions and operations from title casing and case lists
- Synthesizer: the two generated modules, runtime prelude included

Public API surface:
  Pipeline          — CodeGenerator, generate_sources
  Stages            — DocumentScanner, TypePhraseInterpreter, classify, CodeSynthesizer
  Data models       — Table, DocumentField, Scalar, ListOf, Sum, RecordDef, UnionDef,
                      OperationDef, GeneratedSources
  Configuration     — GeneratorConfig
  Error types       — CodegenError, DocumentSourceError, OutputWriteError
  I/O collaborators — read_document, write_sources
"""

# --- Pipeline ---
from .main import CodeGenerator, generate_sources

# --- Stages ---
from .scanner import DocumentScanner
from .type_phrases import TypePhraseInterpreter
from .classifier import classify, classify_document
from .synthesizer import CodeSynthesizer

# --- Data models ---
from .schemas import (
    Table, DocumentField, Optionality, Scalar, ListOf, Sum,
    RecordDef, UnionDef, OperationDef, GeneratedSources,
)

# --- Configuration ---
from .config import GeneratorConfig

# --- Exceptions ---
from .exceptions import CodegenError, DocumentSourceError, OutputWriteError

# --- I/O collaborators ---
from .source import read_document
from .writer import write_sources

__version__ = "0.1.0"
__all__ = [
    "CodeGenerator",
    "generate_sources",
    "DocumentScanner",
    "TypePhraseInterpreter",
    "classify",
    "classify_document",
    "CodeSynthesizer",
    "Table",
    "DocumentField",
    "Optionality",
    "Scalar",
    "ListOf",
    "Sum",
    "RecordDef",
    "UnionDef",
    "OperationDef",
    "GeneratedSources",
    "GeneratorConfig",
    "CodegenError",
    "DocumentSourceError",
    "OutputWriteError",
    "read_document",
    "write_sources",
]
