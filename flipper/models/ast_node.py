"""AST node data models.

A parsed buffer is stored as an arena: every node lives in ``SyntaxTree.nodes``
and refers to its parent and children by index, never by reference.
"""

import bisect
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class NodeKind(str, Enum):
    """Syntax shapes the refactoring engine distinguishes."""

    PROGRAM = "program"
    IF_STATEMENT = "if_statement"
    ELSE_CLAUSE = "else_clause"
    BLOCK = "block"
    RETURN_STATEMENT = "return_statement"
    CONDITIONAL_EXPRESSION = "conditional_expression"
    NOT_EXPRESSION = "not_expression"
    PARENTHESIZED_EXPRESSION = "parenthesized_expression"
    SWITCH_CASE = "switch_case"
    COMMENT = "comment"
    EXPRESSION = "expression"
    STATEMENT = "statement"
    OTHER = "other"


class ASTNode(BaseModel):
    """Abstract Syntax Tree node representation."""

    model_config = ConfigDict(frozen=True)

    index: int
    kind: NodeKind
    node_type: str
    start: int
    end: int
    parent: Optional[int] = None
    children: List[int] = []
    fields: Dict[str, int] = {}

    def contains(self, offset: int) -> bool:
        """Return True if ``offset`` falls in the half-open span ``[start, end)``."""
        return self.start <= offset < self.end


class SourceText(BaseModel):
    """Buffer text with a line table for offset <-> (line, column) mapping.

    Lines and columns are zero-based; offsets count characters.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    _line_starts: List[int] = PrivateAttr(default_factory=list)

    def model_post_init(self, __context) -> None:
        starts = [0]
        for i, char in enumerate(self.text):
            if char == "\n":
                starts.append(i + 1)
        self._line_starts = starts

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    @property
    def newline(self) -> str:
        """Line separator used by the buffer."""
        return "\r\n" if "\r\n" in self.text else "\n"

    def offset_of(self, line: int, column: int) -> int:
        """Convert a zero-based line/column position into a character offset."""
        line = min(max(line, 0), self.line_count - 1)
        start = self._line_starts[line]
        if line + 1 < self.line_count:
            end = self._line_starts[line + 1] - 1
        else:
            end = len(self.text)
        return min(start + max(column, 0), end)

    def line_col_of(self, offset: int) -> Tuple[int, int]:
        """Convert a character offset into a zero-based (line, column) pair."""
        offset = min(max(offset, 0), len(self.text))
        line = bisect.bisect_right(self._line_starts, offset) - 1
        return line, offset - self._line_starts[line]

    def line_indent(self, offset: int) -> str:
        """Leading whitespace of the line containing ``offset``."""
        line, _ = self.line_col_of(offset)
        start = self._line_starts[line]
        end = start
        while end < len(self.text) and self.text[end] in " \t":
            end += 1
        return self.text[start:end]


class SyntaxTree(BaseModel):
    """Immutable parse of one source buffer."""

    model_config = ConfigDict(frozen=True)

    language: str
    source: SourceText
    nodes: List[ASTNode] = Field(default_factory=list)
    root: int = 0

    @property
    def root_node(self) -> ASTNode:
        return self.nodes[self.root]

    def node(self, index: int) -> ASTNode:
        return self.nodes[index]

    def parent_of(self, node: ASTNode) -> Optional[ASTNode]:
        if node.parent is None:
            return None
        return self.nodes[node.parent]

    def children_of(self, node: ASTNode) -> List[ASTNode]:
        return [self.nodes[i] for i in node.children]

    def field(self, node: ASTNode, role: str) -> Optional[ASTNode]:
        """Child playing ``role`` (condition, consequence, alternative, operand)."""
        index = node.fields.get(role)
        if index is None:
            return None
        return self.nodes[index]

    def text_of(self, node: ASTNode) -> str:
        return self.source.text[node.start:node.end]
