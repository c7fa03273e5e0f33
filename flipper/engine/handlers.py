"""
Request handlers: cursor offset in, proposed edits out.

Every handler checks applicability before building anything. An
inapplicable cursor position yields an empty list, never an error.
"""

import logging
from typing import List, Optional

from flipper.engine.navigation import (
    find_enclosing,
    is_conditional_expression,
    is_if_statement,
    resolve,
)
from flipper.engine.printer import print_nodes, print_range
from flipper.engine.rewrites import (
    expand_conditional,
    invert_and_simplify_if_else,
    simplify_if_else,
)
from flipper.engine.statements import can_flatten
from flipper.models.ast_node import ASTNode, SyntaxTree
from flipper.models.edit import ProposedEdit, RefactorKind
from flipper.models.synthetic import RewriteResult

logger = logging.getLogger(__name__)

TITLES = {
    RefactorKind.SIMPLIFY_IF_ELSE: "Simplify if/else",
    RefactorKind.INVERT_AND_SIMPLIFY_IF_ELSE: "Invert and simplify if/else",
    RefactorKind.CONVERT_TERNARY: "Convert ternary into if/else",
}


def _to_edit(
    tree: SyntaxTree,
    kind: RefactorKind,
    result: RewriteResult,
    indent_width: int
) -> ProposedEdit:
    target = result.target
    return ProposedEdit(
        kind=kind,
        title=TITLES[kind],
        range=print_range(tree, target),
        new_text=print_nodes(
            result.nodes,
            tree.source,
            indent_width=indent_width,
            base_indent=tree.source.line_indent(target.start)
        )
    )


def _enclosing_if_else(tree: SyntaxTree, offset: int) -> Optional[ASTNode]:
    if_node = find_enclosing(tree, resolve(tree, offset), is_if_statement)
    if if_node is None:
        logger.debug(f"No if-statement encloses offset {offset}")
        return None

    if not can_flatten(tree, if_node):
        logger.debug(
            f"if-statement at offset {if_node.start} is not a flattenable if/else"
        )
        return None

    return if_node


def propose_guard_clause_simplify(
    tree: SyntaxTree,
    offset: int,
    indent_width: int = 4
) -> List[ProposedEdit]:
    """Offer "Simplify if/else" when the cursor is inside an if/else."""
    if_node = _enclosing_if_else(tree, offset)
    if if_node is None:
        return []

    result = simplify_if_else(tree, if_node)
    return [_to_edit(tree, RefactorKind.SIMPLIFY_IF_ELSE, result, indent_width)]


def propose_invert_and_simplify(
    tree: SyntaxTree,
    offset: int,
    indent_width: int = 4
) -> List[ProposedEdit]:
    """Offer "Invert and simplify if/else" when the cursor is inside an if/else."""
    if_node = _enclosing_if_else(tree, offset)
    if if_node is None:
        return []

    result = invert_and_simplify_if_else(tree, if_node)
    return [_to_edit(tree, RefactorKind.INVERT_AND_SIMPLIFY_IF_ELSE, result, indent_width)]


def propose_conditional_expansion(
    tree: SyntaxTree,
    offset: int,
    indent_width: int = 4
) -> List[ProposedEdit]:
    """Offer "Convert ternary into if/else" when the cursor is inside a ternary."""
    node = find_enclosing(tree, resolve(tree, offset), is_conditional_expression)
    if node is None:
        logger.debug(f"No conditional expression encloses offset {offset}")
        return []

    result = expand_conditional(tree, node)
    return [_to_edit(tree, RefactorKind.CONVERT_TERNARY, result, indent_width)]


def propose_all(
    tree: SyntaxTree,
    offset: int,
    indent_width: int = 4
) -> List[ProposedEdit]:
    """All refactorings available at ``offset``, in a stable order."""
    return [
        *propose_guard_clause_simplify(tree, offset, indent_width),
        *propose_invert_and_simplify(tree, offset, indent_width),
        *propose_conditional_expansion(tree, offset, indent_width),
    ]
