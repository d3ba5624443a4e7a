"""
Custom exceptions for the API doc code generator.

Error philosophy:
  - Scanning, type interpretation, classification and synthesis never raise.
    Loose markup is absorbed by permissive defaults (rows dropped, fields
    defaulted to optional, narrative headings skipped).
  - DocumentSourceError → FAIL HARD: the reference document could not be read.
  - OutputWriteError    → FAIL HARD: the generated modules could not be written.

Only the I/O collaborators around the core can fail, so the CLI has exactly
one exception family to catch.
"""

from typing import Optional


class CodegenError(Exception):
    """Base exception for all code generator errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# --- FAIL HARD: the pipeline never starts ---

class DocumentSourceError(CodegenError):
    """
    Raised when the reference document cannot be read or decoded.

    The core is never reached; the CLI reports the failure and exits non-zero.
    """

    def __init__(
        self,
        message: str,
        path: str,
        details: Optional[dict] = None
    ):
        super().__init__(message, details)
        self.path = path  # Which document was requested


# --- FAIL HARD: generation succeeded but nothing reached the disk ---

class OutputWriteError(CodegenError):
    """Raised when a generated module cannot be removed or written."""

    def __init__(
        self,
        message: str,
        path: str,
        details: Optional[dict] = None
    ):
        super().__init__(message, details)
        self.path = path
