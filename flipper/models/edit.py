"""Proposed edit data models."""

from enum import Enum

from pydantic import BaseModel, Field


class RefactorKind(str, Enum):
    """Refactorings the engine can propose."""

    SIMPLIFY_IF_ELSE = "simplify_if_else"
    INVERT_AND_SIMPLIFY_IF_ELSE = "invert_and_simplify_if_else"
    CONVERT_TERNARY = "convert_ternary"


class TextPosition(BaseModel):
    """Zero-based line/column position in the original buffer."""

    line: int = Field(..., ge=0, description="Line number (0-indexed)")
    column: int = Field(..., ge=0, description="Column number (0-indexed)")


class TextRange(BaseModel):
    """Span of original text to be replaced."""

    start: TextPosition
    end: TextPosition
    start_offset: int = Field(..., ge=0, description="Character offset of the first replaced character")
    end_offset: int = Field(..., ge=0, description="Character offset just past the last replaced character")


class ProposedEdit(BaseModel):
    """A refactoring offered at the cursor: replace ``range`` with ``new_text``."""

    kind: RefactorKind
    title: str
    range: TextRange
    new_text: str

    def apply(self, text: str) -> str:
        """Return ``text`` with this edit applied."""
        return text[:self.range.start_offset] + self.new_text + text[self.range.end_offset:]
