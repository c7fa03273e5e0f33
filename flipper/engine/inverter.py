"""
Logical negation of condition expressions.
"""

from flipper.engine.statements import fragment_of
from flipper.models.ast_node import ASTNode, NodeKind, SyntaxTree
from flipper.models.synthetic import Expression, NotExpression


def expression_of(tree: SyntaxTree, node: ASTNode) -> Expression:
    """
    Convert an original expression node into a synthetic expression.

    A ``!`` prefix becomes a NotExpression so it can later be unwrapped;
    everything else is copied verbatim.
    """
    if node.kind == NodeKind.NOT_EXPRESSION:
        operand = tree.field(node, "operand")
        if operand is not None:
            return NotExpression(operand=expression_of(tree, operand))
    return fragment_of(tree, node)


def invert(expression: Expression) -> Expression:
    """
    Negate an expression by one syntactic level.

    ``!x`` becomes ``x``; anything else becomes ``!expression``. No other
    boolean simplification is attempted.
    """
    if isinstance(expression, NotExpression):
        return expression.operand
    return NotExpression(operand=expression)
