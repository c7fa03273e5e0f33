"""
Rewrite algorithms for if/else statements and conditional expressions.

Each rewrite reads an original node and builds new, unattached synthetic
nodes; the original tree is never modified. Applicability is checked by the
callers (see ``flipper.engine.handlers``), so the rewrites assume a
well-formed input and raise PreconditionError otherwise.

Given::

    if (isAdmin) {
        doAdminStuff();
    } else {
        youAreNotAllowed();
    }

``simplify_if_else`` produces::

    if (isAdmin) {
        doAdminStuff();
        return;
    }
    youAreNotAllowed();

and ``invert_and_simplify_if_else`` produces::

    if (!isAdmin) {
        youAreNotAllowed();
        return;
    }
    doAdminStuff();
"""

from flipper.engine.errors import PreconditionError
from flipper.engine.inverter import expression_of, invert
from flipper.engine.navigation import unwrap_parentheses
from flipper.engine.statements import else_branch, extract, then_branch
from flipper.models.ast_node import ASTNode, NodeKind, SyntaxTree
from flipper.models.synthetic import (
    Block,
    Expression,
    IfStatement,
    ReturnStatement,
    RewriteResult,
    Statement,
)


def condition_of(tree: SyntaxTree, if_node: ASTNode) -> Expression:
    """Condition of an if-statement without its syntactic parentheses."""
    condition = tree.field(if_node, "condition")
    if condition is None:
        raise PreconditionError(f"if-statement at offset {if_node.start} has no condition")

    if condition.kind == NodeKind.PARENTHESIZED_EXPRESSION:
        condition = tree.field(condition, "operand") or condition
    return expression_of(tree, condition)


def _branches(tree: SyntaxTree, if_node: ASTNode):
    then_node = then_branch(tree, if_node)
    else_node = else_branch(tree, if_node)
    if then_node is None or else_node is None:
        raise PreconditionError(f"if-statement at offset {if_node.start} is not an if/else")
    return then_node, else_node


def simplify_if_else(tree: SyntaxTree, if_node: ASTNode) -> RewriteResult:
    """
    Flatten an if/else into a guard clause followed by the else body.

    The then-block gets an empty ``return`` when it has none, so control
    never falls through into the spliced else statements.
    """
    then_node, else_node = _branches(tree, if_node)
    then_statements = extract(tree, then_node, add_missing_return=True)
    else_statements = extract(tree, else_node)

    guard = IfStatement(
        condition=condition_of(tree, if_node),
        then_block=Block(statements=then_statements)
    )
    return RewriteResult(target=if_node, nodes=[guard, *else_statements])


def invert_and_simplify_if_else(tree: SyntaxTree, if_node: ASTNode) -> RewriteResult:
    """
    Flatten an if/else into an inverted guard running the else body,
    followed by the then body.
    """
    then_node, else_node = _branches(tree, if_node)
    then_statements = extract(tree, then_node)
    else_statements = extract(tree, else_node, add_missing_return=True)

    guard = IfStatement(
        condition=invert(condition_of(tree, if_node)),
        then_block=Block(statements=else_statements)
    )
    return RewriteResult(target=if_node, nodes=[guard, *then_statements])


def expand_expression(tree: SyntaxTree, node: ASTNode) -> Statement:
    """
    Turn a possibly nested conditional expression into if/else statements.

    Given ``a ? b ? b1 : b2 : c`` this builds::

        if (a) {
            if (b) {
                return b1;
            }
            else {
                return b2;
            }
        }
        else {
            return c;
        }

    A non-conditional expression becomes ``return expression;``.
    Parentheses around a branch are looked through.
    """
    inner = unwrap_parentheses(tree, node)
    if inner.kind != NodeKind.CONDITIONAL_EXPRESSION:
        return ReturnStatement(expression=expression_of(tree, node))

    condition = tree.field(inner, "condition")
    when_true = tree.field(inner, "consequence")
    when_false = tree.field(inner, "alternative")
    if condition is None or when_true is None or when_false is None:
        raise PreconditionError(
            f"Incomplete conditional expression at offset {inner.start}"
        )

    return IfStatement(
        condition=expression_of(tree, condition),
        then_block=Block(statements=[expand_expression(tree, when_true)]),
        else_block=Block(statements=[expand_expression(tree, when_false)])
    )


def expand_conditional(tree: SyntaxTree, node: ASTNode) -> RewriteResult:
    """Rewrite a conditional expression into a single if/else statement."""
    if node.kind != NodeKind.CONDITIONAL_EXPRESSION:
        raise PreconditionError(
            f"Expected a conditional expression, got '{node.node_type}'"
        )
    return RewriteResult(target=node, nodes=[expand_expression(tree, node)])
