"""
Unit tests for position resolution and ancestor search.
"""

import pytest

from flipper.engine.navigation import (
    find_enclosing,
    is_conditional_expression,
    is_if_statement,
    resolve,
    resolve_position,
    unwrap_parentheses,
)
from flipper.models.ast_node import NodeKind


@pytest.fixture
def source():
    return """const limit = 1;
if (ready) {
    go();
} else {
    wait();
}
"""


def test_resolve_returns_most_specific_node(parse_ts, source):
    """Test that resolution descends to the identifier under the cursor."""
    tree = parse_ts(source)

    node = resolve(tree, source.index("ready"))

    assert node.node_type == "identifier"
    assert tree.text_of(node) == "ready"


def test_resolve_uses_half_open_spans(parse_ts, source):
    """Test that the offset just past a node does not select it."""
    tree = parse_ts(source)
    go_end = source.index("go") + len("go")

    node = resolve(tree, go_end)

    assert tree.text_of(node) != "go"


def test_resolve_outside_every_node_returns_root(parse_ts, source):
    """Test that an offset past the end of the buffer yields the root."""
    tree = parse_ts(source)

    assert resolve(tree, len(source) + 10) is tree.root_node


def test_resolve_position_maps_line_and_column(parse_ts, source):
    """Test that a line/column cursor resolves like its offset."""
    tree = parse_ts(source)

    node = resolve_position(tree, 2, 4)

    assert tree.text_of(node) == "go"


def test_find_enclosing_if_statement(parse_ts, source):
    """Test that the walk up from a nested node finds the if-statement."""
    tree = parse_ts(source)

    if_node = find_enclosing(tree, resolve(tree, source.index("wait")), is_if_statement)

    assert if_node is not None
    assert if_node.kind == NodeKind.IF_STATEMENT
    assert tree.text_of(if_node).startswith("if (ready)")


def test_find_enclosing_tests_node_itself(parse_ts, source):
    """Test that a matching starting node is returned as is."""
    tree = parse_ts(source)
    [if_node] = [n for n in tree.nodes if n.kind == NodeKind.IF_STATEMENT]

    assert find_enclosing(tree, if_node, is_if_statement) == if_node


def test_find_enclosing_stops_at_root(parse_ts, source):
    """Test that no match outside any if-statement returns None."""
    tree = parse_ts(source)

    node = resolve(tree, source.index("limit"))

    assert find_enclosing(tree, node, is_if_statement) is None
    assert find_enclosing(tree, tree.root_node, lambda n: True) is None


def test_find_enclosing_nearest_conditional(parse_ts):
    """Test that the innermost ternary is found first."""
    source = "const r = a ? (b ? x : y) : z;\n"
    tree = parse_ts(source)

    node = find_enclosing(tree, resolve(tree, source.index("x")), is_conditional_expression)

    assert tree.text_of(node) == "b ? x : y"


def test_unwrap_parentheses(parse_ts):
    """Test that nested parentheses are stripped."""
    source = "const r = ((value));\n"
    tree = parse_ts(source)
    [outer] = [
        n for n in tree.nodes
        if n.kind == NodeKind.PARENTHESIZED_EXPRESSION and tree.text_of(n) == "((value))"
    ]

    assert tree.text_of(unwrap_parentheses(tree, outer)) == "value"
