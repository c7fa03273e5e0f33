"""Freshly built syntax nodes produced by the rewrite algorithms.

These nodes carry no positions: they are pure structure, printed and
discarded within a single request.
"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from flipper.models.ast_node import ASTNode, NodeKind


class SourceFragment(BaseModel):
    """Verbatim copy of an original node's source text.

    Continuation lines are stored relative to the indentation of the line
    the node started on, so the printer can re-indent them.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["fragment"] = "fragment"
    text: str
    node_type: str = ""
    node_kind: NodeKind = NodeKind.OTHER


class NotExpression(BaseModel):
    """Logical negation ``!operand``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["not"] = "not"
    operand: "Expression"


class ReturnStatement(BaseModel):
    """``return;`` or ``return expression;``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["return"] = "return"
    expression: Optional["Expression"] = None


class Block(BaseModel):
    """Braced statement list."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["block"] = "block"
    statements: List["Statement"] = Field(default_factory=list)


class IfStatement(BaseModel):
    """``if (condition) { ... }`` with an optional ``else { ... }``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["if"] = "if"
    condition: "Expression"
    then_block: Block
    else_block: Optional[Block] = None


Expression = Union[NotExpression, SourceFragment]
Statement = Union[IfStatement, ReturnStatement, Block, SourceFragment]
SyntheticNode = Statement

NotExpression.model_rebuild()
ReturnStatement.model_rebuild()
Block.model_rebuild()
IfStatement.model_rebuild()


class RewriteResult(BaseModel):
    """Original node to replace and the nodes that replace it, in order."""

    model_config = ConfigDict(frozen=True)

    target: ASTNode
    nodes: List[Statement]
