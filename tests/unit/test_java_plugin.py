"""
Unit tests for the Java plugin and Java refactorings.
"""

import pytest
from pathlib import Path

from flipper.engine.handlers import (
    propose_all,
    propose_conditional_expansion,
    propose_guard_clause_simplify,
    propose_invert_and_simplify,
)
from flipper.models.ast_node import NodeKind
from plugins.java.plugin import JavaPlugin


@pytest.fixture(scope="module")
def java_plugin():
    """Create a Java plugin instance."""
    return JavaPlugin(config_path=Path(__file__).parents[2] / "plugins" / "java" / "config.yaml")


@pytest.fixture
def sample_java_method():
    """Sample Java class with an if/else in a void method."""
    return """class Gate {
    void enter(boolean ok) {
        if (ok) {
            go();
        } else {
            stop();
        }
    }
}
"""


class TestJavaPlugin:
    """Test Java parsing and refactoring parity with TypeScript."""

    def test_plugin_initialization(self, java_plugin):
        """Test that the plugin initializes correctly."""
        assert java_plugin.language_name == "java"
        assert java_plugin.file_extensions == [".java"]

    def test_if_statement_roles(self, java_plugin, sample_java_method):
        """Test that the Java else branch is the block itself."""
        tree = java_plugin.parse(sample_java_method)

        [if_node] = [n for n in tree.nodes if n.kind == NodeKind.IF_STATEMENT]
        assert tree.field(if_node, "consequence").kind == NodeKind.BLOCK
        assert tree.field(if_node, "alternative").kind == NodeKind.BLOCK
        assert tree.parent_of(if_node).kind == NodeKind.BLOCK

    def test_simplify_if_else(self, java_plugin, sample_java_method):
        """Test guard-clause flattening in a Java method."""
        tree = java_plugin.parse(sample_java_method)

        [edit] = propose_guard_clause_simplify(tree, sample_java_method.index("go"))

        assert edit.apply(sample_java_method) == """class Gate {
    void enter(boolean ok) {
        if (ok) {
            go();
            return;
        }
        stop();
    }
}
"""

    def test_invert_and_simplify_if_else(self, java_plugin, sample_java_method):
        """Test inverted guard-clause flattening in a Java method."""
        tree = java_plugin.parse(sample_java_method)

        [edit] = propose_invert_and_simplify(tree, sample_java_method.index("stop"))

        assert edit.apply(sample_java_method) == """class Gate {
    void enter(boolean ok) {
        if (!ok) {
            stop();
            return;
        }
        go();
    }
}
"""

    def test_convert_ternary(self, java_plugin):
        """Test ternary expansion of a Java conditional expression."""
        source = "class C {\n    int f(boolean ok) {\n        return ok ? 1 : 2;\n    }\n}\n"
        tree = java_plugin.parse(source)

        [edit] = propose_conditional_expansion(tree, source.index("ok ?"))

        assert edit.range.start_offset == source.index("ok ?")
        assert edit.range.end_offset == source.index(";\n    }")
        assert edit.new_text == (
            "if (ok) {\n"
            "            return 1;\n"
            "        }\n"
            "        else {\n"
            "            return 2;\n"
            "        }"
        )

    def test_if_else_in_constructor(self, java_plugin):
        """Test that an if/else directly in a constructor body is offered."""
        source = """class Door {
    Door(boolean open) {
        if (open) {
            unlock();
        } else {
            lock();
        }
    }
}
"""
        tree = java_plugin.parse(source)

        [if_node] = [n for n in tree.nodes if n.kind == NodeKind.IF_STATEMENT]
        assert tree.parent_of(if_node).kind == NodeKind.BLOCK

        edits = propose_all(tree, source.index("unlock"))

        assert len(edits) == 2
        assert edits[0].apply(source) == """class Door {
    Door(boolean open) {
        if (open) {
            unlock();
            return;
        }
        lock();
    }
}
"""
        assert edits[1].apply(source) == """class Door {
    Door(boolean open) {
        if (!open) {
            lock();
            return;
        }
        unlock();
    }
}
"""
