"""
Unit tests for the TypeScript plugin.

Tests parsing into the syntax tree arena:
- Node kinds and semantic roles
- Parent/child links
- Character offsets for non-ASCII sources
"""

import pytest

from flipper.models.ast_node import NodeKind


@pytest.fixture
def guarded_function():
    """Sample function with an if/else on a negated condition."""
    return """function check(isAdmin: boolean) {
    if (!isAdmin) {
        return A;
    } else {
        return B;
    }
}
"""


def nodes_of_kind(tree, kind):
    return [node for node in tree.nodes if node.kind == kind]


class TestTypeScriptPlugin:
    """Test TypeScript plugin parsing."""

    def test_plugin_initialization(self, ts_plugin):
        """Test that the plugin initializes from its config.yaml."""
        assert ts_plugin.language_name == "typescript"
        assert ".ts" in ts_plugin.file_extensions
        assert ".js" in ts_plugin.file_extensions

    def test_parse_returns_program_root(self, ts_plugin, guarded_function):
        """Test that the root of the arena is the program node."""
        tree = ts_plugin.parse(guarded_function)

        assert tree.language == "typescript"
        assert tree.root_node.index == 0
        assert tree.root_node.kind == NodeKind.PROGRAM
        assert tree.root_node.parent is None
        assert len(tree.root_node.children) == 1

    def test_parent_links_match_children(self, ts_plugin, guarded_function):
        """Test that every child points back at its parent."""
        tree = ts_plugin.parse(guarded_function)

        for node in tree.nodes:
            for child in tree.children_of(node):
                assert child.parent == node.index
                assert node.start <= child.start <= child.end <= node.end

    def test_if_statement_roles(self, ts_plugin, guarded_function):
        """Test that an if/else exposes condition, consequence and alternative."""
        tree = ts_plugin.parse(guarded_function)

        [if_node] = nodes_of_kind(tree, NodeKind.IF_STATEMENT)
        condition = tree.field(if_node, "condition")
        consequence = tree.field(if_node, "consequence")
        alternative = tree.field(if_node, "alternative")

        assert condition.kind == NodeKind.PARENTHESIZED_EXPRESSION
        assert consequence.kind == NodeKind.BLOCK
        assert alternative.kind == NodeKind.ELSE_CLAUSE
        assert tree.field(alternative, "operand").kind == NodeKind.BLOCK
        assert tree.text_of(if_node).startswith("if (!isAdmin)")
        assert tree.text_of(if_node).endswith("}")

    def test_not_expression(self, ts_plugin, guarded_function):
        """Test that a '!' prefix is recognized with its operand."""
        tree = ts_plugin.parse(guarded_function)

        [not_node] = nodes_of_kind(tree, NodeKind.NOT_EXPRESSION)
        assert tree.text_of(not_node) == "!isAdmin"
        assert tree.text_of(tree.field(not_node, "operand")) == "isAdmin"

    def test_other_unary_operators_are_plain_expressions(self, ts_plugin):
        """Test that '-x' and 'typeof x' are not treated as negations."""
        tree = ts_plugin.parse("const a = -x;\nconst b = typeof y;\n")

        assert nodes_of_kind(tree, NodeKind.NOT_EXPRESSION) == []
        unary = [n for n in tree.nodes if n.node_type == "unary_expression"]
        assert len(unary) == 2
        assert all(n.kind == NodeKind.EXPRESSION for n in unary)

    def test_ternary_roles(self, ts_plugin):
        """Test that a ternary exposes its three parts."""
        tree = ts_plugin.parse("const r = ok ? yes : no;\n")

        [ternary] = nodes_of_kind(tree, NodeKind.CONDITIONAL_EXPRESSION)
        assert tree.text_of(tree.field(ternary, "condition")) == "ok"
        assert tree.text_of(tree.field(ternary, "consequence")) == "yes"
        assert tree.text_of(tree.field(ternary, "alternative")) == "no"

    def test_comments_are_kept(self, ts_plugin):
        """Test that comments inside blocks are part of the arena."""
        tree = ts_plugin.parse("if (a) {\n    // note\n    b();\n}\n")

        [comment] = nodes_of_kind(tree, NodeKind.COMMENT)
        assert tree.text_of(comment) == "// note"

    def test_offsets_are_characters_not_bytes(self, ts_plugin):
        """Test that offsets stay correct after multi-byte characters."""
        source = 'const s = "héllo wörld";\nconst t = a ? b : c;\n'
        tree = ts_plugin.parse(source)

        [ternary] = nodes_of_kind(tree, NodeKind.CONDITIONAL_EXPRESSION)
        assert ternary.start == source.index("a ? b")
        assert tree.text_of(ternary) == "a ? b : c"

    def test_parse_tolerates_syntax_errors(self, ts_plugin):
        """Test that broken code still yields a tree."""
        tree = ts_plugin.parse("if (a {\n    b();\n")

        assert tree.root_node.parent is None
        assert len(tree.nodes) > 1
