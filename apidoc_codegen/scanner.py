"""
Document scanner: a single forward pass over the reference's lines.

The reference page emits one structural tag per line, so the scanner does not
build a DOM. It recognizes a handful of line tokens and moves between three
states:

    IDLE      no section open (before the first heading, after </table>,
              or after a narrative heading that was dropped)
    IN_TABLE  a definition section is open; paragraphs, lists and rows attach to it
    IN_ROW    a <tr> is open; <td> cells fill the row's slots in order

Every line that is not one of the tokens below is ignored, and so is a token
seen outside the state its handler expects (a <td> outside IN_ROW, a <p> while
IDLE). List items that are not identifiers are prose, not cases. Nothing here
raises: out-of-order markup just leaves rows partially filled, and those are
dropped later by the classifier.
"""

import re
from enum import Enum
from typing import Optional

from .normalizer import FragmentNormalizer
from .schemas import DocumentField, Optionality, Table
from .type_phrases import TypePhraseInterpreter
from .logger import get_module_logger

logger = get_module_logger("scanner")

# Exact third-cell contents that carry an explicit requirement signal
REQUIRED_CELL = "<td>Yes</td>"
OPTIONAL_CELL = "<td>Optional</td>"

# A heading whose text contains either of these is narrative, not a definition
NARRATIVE_TITLE_MARKERS = (".", " ")


class ScanState(Enum):
    IDLE = "idle"
    IN_TABLE = "in_table"
    IN_ROW = "in_row"


class Token(Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST_OPEN = "list_open"
    LIST_ITEM = "list_item"
    ROW_OPEN = "row_open"
    ROW_CLOSE = "row_close"
    CELL = "cell"
    TABLE_CLOSE = "table_close"


class DocumentScanner:
    """Turns the reference text into an ordered list of Table models."""

    def __init__(
        self,
        interpreter: Optional[TypePhraseInterpreter] = None,
        normalizer: Optional[FragmentNormalizer] = None,
        heading_tag: str = "h4"
    ):
        self.interpreter = interpreter or TypePhraseInterpreter()
        self.normalizer = normalizer or FragmentNormalizer()
        self.heading_pattern = re.compile(rf'^<{re.escape(heading_tag)}[\s>]', re.IGNORECASE)

        self._handlers = {
            Token.HEADING: self._on_heading,
            Token.PARAGRAPH: self._on_paragraph,
            Token.LIST_OPEN: self._on_list_open,
            Token.LIST_ITEM: self._on_list_item,
            Token.ROW_OPEN: self._on_row_open,
            Token.ROW_CLOSE: self._on_row_close,
            Token.CELL: self._on_cell,
            Token.TABLE_CLOSE: self._on_table_close,
        }
        self._reset()

    def _reset(self) -> None:
        self.state = ScanState.IDLE
        self.tables: list[Table] = []
        self.skipped_headings = 0
        self._table: Optional[Table] = None
        self._row: Optional[DocumentField] = None

    def classify_line(self, line: str) -> Optional[Token]:
        """Recognize the structural token a line starts with, if any."""
        if self.heading_pattern.match(line):
            return Token.HEADING
        if line.startswith("<p>") or line.startswith("<p "):
            return Token.PARAGRAPH
        if line == "<tr>":
            return Token.ROW_OPEN
        if line == "</tr>":
            return Token.ROW_CLOSE
        if line.startswith("<ul>"):
            return Token.LIST_OPEN
        if line.startswith("<li>"):
            return Token.LIST_ITEM
        if line.startswith("<td>"):
            return Token.CELL
        if line.startswith("</table>"):
            return Token.TABLE_CLOSE
        return None

    def scan(self, text: str) -> list[Table]:
        """
        Scan the whole document.

        Args:
            text: Full reference document

        Returns:
            Tables in document order (narrative headings already dropped)
        """
        self._reset()

        for raw_line in text.split("\n"):
            line = raw_line.strip()
            token = self.classify_line(line)
            if token is not None:
                self._handlers[token](line)

        logger.info(
            f"Scanned {len(self.tables)} sections "
            f"({self.skipped_headings} narrative headings skipped)"
        )
        return self.tables

    # --- Transitions ---

    def _on_heading(self, line: str) -> None:
        self._table = None
        self._row = None
        self.state = ScanState.IDLE

        title = self.normalizer.normalize(line, keep_links=False)
        if any(marker in title for marker in NARRATIVE_TITLE_MARKERS):
            logger.debug(f"Skipping narrative heading: {title!r}")
            self.skipped_headings += 1
            return

        self._table = Table(title=title)
        self.tables.append(self._table)
        self.state = ScanState.IN_TABLE

    def _on_paragraph(self, line: str) -> None:
        # Only the first paragraph after the heading describes the definition
        if self.state is ScanState.IN_TABLE and self._table.note is None:
            self._table.note = self.normalizer.normalize(line, keep_links=True)

    def _on_list_open(self, line: str) -> None:
        if self.state is ScanState.IN_TABLE:
            self._table.case_list = []

    def _on_list_item(self, line: str) -> None:
        if self.state is not ScanState.IN_TABLE or self._table.case_list is None:
            return
        label = self.normalizer.normalize(line, keep_links=False)
        if not label.isidentifier():
            logger.debug(f"{self._table.title}: dropping case list item {label!r}")
            return
        self._table.case_list.append(label)

    def _on_row_open(self, line: str) -> None:
        # An unclosed row is abandoned where it stands
        if self.state is ScanState.IDLE:
            return
        self._row = DocumentField()
        self._table.fields.append(self._row)
        self.state = ScanState.IN_ROW

    def _on_row_close(self, line: str) -> None:
        if self.state is ScanState.IN_ROW:
            self._row = None
            self.state = ScanState.IN_TABLE

    def _on_cell(self, line: str) -> None:
        if self.state is not ScanState.IN_ROW:
            return
        row = self._row

        if row.name is None:
            row.name = self.normalizer.normalize(line, keep_links=False)
        elif row.type_phrase is None:
            row.type_phrase = self.normalizer.normalize(line, keep_links=False)
            row.type_expr = self.interpreter.interpret(row.type_phrase)
        elif row.description is None:
            if line == REQUIRED_CELL:
                row.optionality = Optionality.EXPLICIT_REQUIRED
            elif line == OPTIONAL_CELL:
                row.optionality = Optionality.EXPLICIT_OPTIONAL
            else:
                row.description = self.normalizer.normalize(line, keep_links=True)

    def _on_table_close(self, line: str) -> None:
        self._table = None
        self._row = None
        self.state = ScanState.IDLE


def scan_document(text: str, interpreter: Optional[TypePhraseInterpreter] = None) -> list[Table]:
    """Convenience function to scan a document with default settings."""
    return DocumentScanner(interpreter=interpreter).scan(text)
