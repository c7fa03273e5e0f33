"""
Statement-list extraction and if/else shape checks.
"""

from typing import List, Optional

from flipper.engine.errors import PreconditionError
from flipper.models.ast_node import ASTNode, NodeKind, SyntaxTree
from flipper.models.synthetic import ReturnStatement, SourceFragment, Statement

# Nodes whose children execute as a statement sequence
STATEMENT_LIST_KINDS = (NodeKind.PROGRAM, NodeKind.BLOCK, NodeKind.SWITCH_CASE)


def fragment_of(tree: SyntaxTree, node: ASTNode) -> SourceFragment:
    """
    Copy an original node's text into a SourceFragment.

    Continuation lines lose the indentation of the line the node starts on,
    so the printer can place the fragment at any depth.
    """
    text = tree.text_of(node).replace("\r\n", "\n")
    indent = tree.source.line_indent(node.start)
    lines = text.split("\n")
    dedented = [lines[0]]
    for line in lines[1:]:
        strip = 0
        while strip < len(indent) and strip < len(line) and line[strip] in " \t":
            strip += 1
        dedented.append(line[strip:])

    return SourceFragment(
        text="\n".join(dedented),
        node_type=node.node_type,
        node_kind=node.kind
    )


def extract(
    tree: SyntaxTree,
    block: ASTNode,
    add_missing_return: bool = False
) -> List[Statement]:
    """
    Return the statements of a block as a fresh list, in source order.

    Args:
        tree: Parsed buffer the block belongs to
        block: Block node
        add_missing_return: Append a bare ``return`` when the block has no
            return statement of its own

    Raises:
        PreconditionError: If ``block`` is not a block
    """
    if block.kind != NodeKind.BLOCK:
        raise PreconditionError(
            f"Expected a block, got '{block.node_type}' at offset {block.start}"
        )

    children = tree.children_of(block)
    statements: List[Statement] = [fragment_of(tree, child) for child in children]

    if add_missing_return and not any(
        child.kind == NodeKind.RETURN_STATEMENT for child in children
    ):
        statements.append(ReturnStatement())

    return statements


def then_branch(tree: SyntaxTree, if_node: ASTNode) -> Optional[ASTNode]:
    return tree.field(if_node, "consequence")


def else_branch(tree: SyntaxTree, if_node: ASTNode) -> Optional[ASTNode]:
    """Statement run when the condition is false, looking through ``else`` clauses."""
    alternative = tree.field(if_node, "alternative")
    if alternative is not None and alternative.kind == NodeKind.ELSE_CLAUSE:
        return tree.field(alternative, "operand")
    return alternative


def is_if_else(tree: SyntaxTree, if_node: ASTNode) -> bool:
    """True when both branches of ``if_node`` are blocks (a plain if/else)."""
    if if_node.kind != NodeKind.IF_STATEMENT:
        return False

    branches = [then_branch(tree, if_node), else_branch(tree, if_node)]
    return all(b is not None and b.kind == NodeKind.BLOCK for b in branches)


def is_else_if_link(tree: SyntaxTree, if_node: ASTNode) -> bool:
    """True when ``if_node`` is the else branch of another if-statement."""
    parent = tree.parent_of(if_node)
    if parent is None:
        return False
    if parent.kind == NodeKind.ELSE_CLAUSE:
        return True
    return (
        parent.kind == NodeKind.IF_STATEMENT
        and parent.fields.get("alternative") == if_node.index
    )


def in_statement_list(tree: SyntaxTree, node: ASTNode) -> bool:
    """True when ``node`` can be replaced by several sibling statements."""
    parent = tree.parent_of(node)
    return parent is not None and parent.kind in STATEMENT_LIST_KINDS


def can_flatten(tree: SyntaxTree, if_node: ASTNode) -> bool:
    """Applicability check shared by the two if/else rewrites."""
    return (
        is_if_else(tree, if_node)
        and not is_else_if_link(tree, if_node)
        and in_statement_list(tree, if_node)
    )
