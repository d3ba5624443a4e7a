"""
Type phrase interpreter.

Maps the free-text type column of the reference ("Integer", "Array of
PhotoSize", "InputFile or String") onto the closed TypeExpr algebra.

Resolution order, first match wins, applied recursively to sub-phrases:
  1. exact alias lookup
  2. "Array of " prefix      → ListOf
  3. " or " alternation      → right-nested Sum
  4. " and " alternation     → same as " or " (the reference uses both)
  5. anything else           → Scalar, verbatim
"""

from functools import reduce
from typing import Optional

from .config import BASE_TYPE_ALIASES
from .schemas import ListOf, Scalar, Sum, TypeExpr

ARRAY_PREFIX = "Array of "
ALTERNATION_SEPARATORS = (" or ", " and ")


class TypePhraseInterpreter:
    """Pure phrase → TypeExpr mapping over an explicit alias table."""

    def __init__(self, aliases: Optional[dict[str, str]] = None):
        self.aliases = dict(BASE_TYPE_ALIASES if aliases is None else aliases)

    def interpret(self, phrase: str) -> TypeExpr:
        if phrase in self.aliases:
            return Scalar(name=self.aliases[phrase])

        if phrase.startswith(ARRAY_PREFIX):
            return ListOf(item=self.interpret(phrase[len(ARRAY_PREFIX):]))

        for separator in ALTERNATION_SEPARATORS:
            if separator in phrase:
                alternatives = [self.interpret(part) for part in phrase.split(separator)]
                # Fold from the right: A or B or C → Sum(A, Sum(B, C))
                return reduce(
                    lambda right, left: Sum(left=left, right=right),
                    reversed(alternatives[:-1]),
                    alternatives[-1],
                )

        return Scalar(name=phrase)


def interpret(phrase: str, aliases: Optional[dict[str, str]] = None) -> TypeExpr:
    """Convenience function to interpret one phrase."""
    return TypePhraseInterpreter(aliases).interpret(phrase)
