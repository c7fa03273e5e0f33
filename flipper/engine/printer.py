"""
Printer and range mapping for rewritten code.

Synthetic nodes are printed from structure alone; original text is only
reused through SourceFragment copies. The layout follows the TypeScript
compiler's printer::

    if (a) {
        return b;
    }
    else {
        return c;
    }
"""

from typing import List, Sequence

from flipper.models.ast_node import ASTNode, NodeKind, SourceText, SyntaxTree
from flipper.models.edit import TextPosition, TextRange
from flipper.models.synthetic import (
    Block,
    Expression,
    IfStatement,
    NotExpression,
    ReturnStatement,
    SourceFragment,
    Statement,
)

# Operands that never need parentheses after a prefix ``!``
PRIMARY_NODE_TYPES = frozenset({
    "identifier",
    "this",
    "super",
    "true",
    "false",
    "null",
    "undefined",
    "number",
    "string",
    "template_string",
    "regex",
    "array",
    "object",
    "member_expression",
    "subscript_expression",
    "call_expression",
    "non_null_expression",
    "unary_expression",
    "field_access",
    "array_access",
    "method_invocation",
    "decimal_integer_literal",
    "string_literal",
    "character_literal",
    "null_literal",
})


def print_range(tree: SyntaxTree, node: ASTNode) -> TextRange:
    """Line/column span of an original node, first character to last."""
    start_line, start_column = tree.source.line_col_of(node.start)
    end_line, end_column = tree.source.line_col_of(node.end)
    return TextRange(
        start=TextPosition(line=start_line, column=start_column),
        end=TextPosition(line=end_line, column=end_column),
        start_offset=node.start,
        end_offset=node.end
    )


def _needs_parentheses(operand: Expression) -> bool:
    if isinstance(operand, NotExpression):
        return False
    if operand.node_kind in (NodeKind.PARENTHESIZED_EXPRESSION, NodeKind.NOT_EXPRESSION):
        return False
    return operand.node_type not in PRIMARY_NODE_TYPES


def print_expression(expression: Expression) -> str:
    if isinstance(expression, NotExpression):
        operand = print_expression(expression.operand)
        if _needs_parentheses(expression.operand):
            operand = f"({operand})"
        return f"!{operand}"
    return expression.text


def _print_condition(condition: Expression) -> str:
    text = print_expression(condition)
    # if-statements supply their own parentheses
    if (
        isinstance(condition, SourceFragment)
        and condition.node_kind == NodeKind.PARENTHESIZED_EXPRESSION
        and text.startswith("(")
        and text.endswith(")")
    ):
        return text[1:-1]
    return text


def _indent_lines(text: str, indent: str) -> List[str]:
    return [indent + line if line else line for line in text.split("\n")]


def _block_lines(block: Block, depth: int, unit: str) -> List[str]:
    lines = []
    for statement in block.statements:
        lines.extend(_statement_lines(statement, depth + 1, unit))
    return lines


def _statement_lines(node: Statement, depth: int, unit: str) -> List[str]:
    indent = unit * depth

    if isinstance(node, IfStatement):
        lines = _indent_lines(f"if ({_print_condition(node.condition)}) {{", indent)
        lines.extend(_block_lines(node.then_block, depth, unit))
        lines.append(indent + "}")
        if node.else_block is not None:
            lines.append(indent + "else {")
            lines.extend(_block_lines(node.else_block, depth, unit))
            lines.append(indent + "}")
        return lines

    if isinstance(node, ReturnStatement):
        if node.expression is None:
            return [indent + "return;"]
        return _indent_lines(f"return {print_expression(node.expression)};", indent)

    if isinstance(node, Block):
        return [indent + "{", *_block_lines(node, depth, unit), indent + "}"]

    return _indent_lines(node.text, indent)


def print_node(node: Statement, indent_width: int = 4) -> str:
    """Serialize one synthetic statement, ignoring any original positions."""
    return "\n".join(_statement_lines(node, 0, " " * indent_width))


def print_nodes(
    nodes: Sequence[Statement],
    source: SourceText,
    indent_width: int = 4,
    base_indent: str = ""
) -> str:
    """
    Print each node independently and join them with a single newline.

    Args:
        nodes: Synthetic statements, in output order
        source: Buffer the text will be inserted into; supplies the newline
        indent_width: Spaces per nesting level
        base_indent: Prefix for every line after the first, normally the
            indentation of the line the replaced node starts on

    Returns:
        Replacement text
    """
    text = "\n".join(print_node(node, indent_width) for node in nodes)
    lines = text.split("\n")
    lines[1:] = [base_indent + line if line else line for line in lines[1:]]
    return source.newline.join(lines)
