"""
Cursor-to-node resolution and ancestor search over a SyntaxTree.
"""

from typing import Callable, Optional

from flipper.models.ast_node import ASTNode, NodeKind, SyntaxTree

NodePredicate = Callable[[ASTNode], bool]


def resolve(tree: SyntaxTree, offset: int) -> ASTNode:
    """
    Find the most specific node covering a character offset.

    Starting at the root, descend into the first child whose ``[start, end)``
    span contains ``offset`` until no child qualifies.

    Args:
        tree: Parsed buffer
        offset: Zero-based character offset

    Returns:
        The deepest node containing the offset, or the root when the offset
        lies outside every child.
    """
    node = tree.root_node
    while True:
        child = next(
            (c for c in tree.children_of(node) if c.contains(offset)),
            None
        )
        if child is None:
            return node
        node = child


def resolve_position(tree: SyntaxTree, line: int, column: int) -> ASTNode:
    """Resolve a zero-based line/column cursor position to a node."""
    return resolve(tree, tree.source.offset_of(line, column))


def find_enclosing(
    tree: SyntaxTree,
    node: ASTNode,
    predicate: NodePredicate
) -> Optional[ASTNode]:
    """
    Walk parent links from ``node`` to the nearest node satisfying ``predicate``.

    The node itself is tested first. The file root is never returned.

    Returns:
        The matching node, or None when the walk reaches the root.
    """
    current: Optional[ASTNode] = node
    while current is not None and current.parent is not None:
        if predicate(current):
            return current
        current = tree.parent_of(current)
    return None


def is_if_statement(node: ASTNode) -> bool:
    return node.kind == NodeKind.IF_STATEMENT


def is_conditional_expression(node: ASTNode) -> bool:
    return node.kind == NodeKind.CONDITIONAL_EXPRESSION


def unwrap_parentheses(tree: SyntaxTree, node: ASTNode) -> ASTNode:
    """Strip any number of enclosing parentheses from an expression node."""
    while node.kind == NodeKind.PARENTHESIZED_EXPRESSION:
        inner = tree.field(node, "operand")
        if inner is None:
            break
        node = inner
    return node
