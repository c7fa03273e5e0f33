"""
Base interface for language plugins.

A language plugin turns buffer text into the engine's SyntaxTree arena.
Plugins backed by a tree-sitter grammar share the conversion logic in
``TreeSitterPlugin``; they only differ in grammar and YAML configuration.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

import tree_sitter
import yaml

from flipper.models.ast_node import ASTNode, NodeKind, SourceText, SyntaxTree

logger = logging.getLogger(__name__)

# Kinds whose single wrapped child is exposed under the ``operand`` role
WRAPPER_KINDS = (NodeKind.PARENTHESIZED_EXPRESSION, NodeKind.ELSE_CLAUSE)


class LanguagePlugin(ABC):
    """Base interface for language plugins."""

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the language name (e.g., 'typescript', 'java')."""
        pass

    @property
    @abstractmethod
    def file_extensions(self) -> List[str]:
        """Return supported file extensions (e.g., ['.ts', '.js'])."""
        pass

    @abstractmethod
    def parse(self, content: str) -> SyntaxTree:
        """
        Parse buffer content into a fresh SyntaxTree.

        Args:
            content: Full buffer text

        Returns:
            SyntaxTree rooted at the file node

        Raises:
            ValueError: If the content cannot be parsed
        """
        pass


def _byte_to_char_table(text: str) -> List[int]:
    table: List[int] = []
    for i, char in enumerate(text):
        table.extend([i] * len(char.encode("utf-8")))
    table.append(len(text))
    return table


class TreeSitterPlugin(LanguagePlugin):
    """Language plugin driven by a tree-sitter grammar and a config.yaml."""

    def __init__(self, language: tree_sitter.Language, config: Dict[str, Any]):
        """
        Initialize the plugin.

        Args:
            language: Compiled tree-sitter language
            config: Parsed plugin configuration (see ``load_config``)
        """
        self._language = language
        self._config = config
        self._node_kinds = {
            node_type: NodeKind(kind)
            for node_type, kind in config.get('node_kinds', {}).items()
        }
        self._fields: Dict[str, Dict[str, str]] = config.get('fields', {})
        self._not_expression: Dict[str, str] = config.get('not_expression', {})

    @staticmethod
    def load_config(config_path: Path) -> Dict[str, Any]:
        """Load a plugin's YAML configuration."""
        with open(config_path, 'r') as f:
            return yaml.safe_load(f)

    @property
    def language_name(self) -> str:
        return self._config['name']

    @property
    def file_extensions(self) -> List[str]:
        return self._config.get('file_extensions', [])

    def parse(self, content: str) -> SyntaxTree:
        try:
            parser = tree_sitter.Parser(self._language)
            data = bytes(content, "utf8")
            ts_tree = parser.parse(data)

            if ts_tree.root_node is None:
                raise ValueError("tree-sitter returned no root node")

            if ts_tree.root_node.has_error:
                logger.debug(f"{self.language_name} source contains syntax errors")

            if len(data) == len(content):
                offsets = None
            else:
                offsets = _byte_to_char_table(content)

            nodes = self._convert(ts_tree.root_node, offsets)
            return SyntaxTree(
                language=self.language_name,
                source=SourceText(text=content),
                nodes=nodes,
                root=0
            )

        except Exception as e:
            logger.error(f"Error parsing {self.language_name} source: {e}")
            raise ValueError(f"Failed to parse {self.language_name} source: {e}") from e

    def _kind_of(self, ts_node: tree_sitter.Node) -> NodeKind:
        """Map a tree-sitter node onto the engine's node kinds."""
        node_type = ts_node.type

        not_type = self._not_expression.get('type')
        if node_type == not_type:
            operator = ts_node.child_by_field_name(self._not_expression['operator_field'])
            if operator is not None and operator.type == self._not_expression['operator']:
                return NodeKind.NOT_EXPRESSION
            return NodeKind.EXPRESSION

        if node_type in self._node_kinds:
            return self._node_kinds[node_type]
        if node_type.endswith(("_statement", "_declaration")):
            return NodeKind.STATEMENT
        if node_type.endswith("_expression"):
            return NodeKind.EXPRESSION
        return NodeKind.OTHER

    def _role_fields(self, ts_node: tree_sitter.Node, kind: NodeKind) -> Dict[str, str]:
        if kind == NodeKind.NOT_EXPRESSION:
            return {"operand": self._not_expression['operand_field']}
        return self._fields.get(ts_node.type, {})

    def _convert(
        self,
        root: tree_sitter.Node,
        offsets: Optional[List[int]]
    ) -> List[ASTNode]:
        """
        Flatten a tree-sitter tree into an arena of named nodes.

        Indices are assigned in pre-order, so the root is index 0 and every
        parent precedes its children.
        """
        ordered: List[tree_sitter.Node] = []
        parents: List[Optional[int]] = []
        index_of: Dict[int, int] = {}

        stack = [(root, None)]
        while stack:
            ts_node, parent = stack.pop()
            index_of[ts_node.id] = len(ordered)
            ordered.append(ts_node)
            parents.append(parent)
            own_index = len(ordered) - 1
            for child in reversed(ts_node.named_children):
                stack.append((child, own_index))

        def char_offset(byte_offset: int) -> int:
            return byte_offset if offsets is None else offsets[byte_offset]

        nodes = []
        for index, ts_node in enumerate(ordered):
            kind = self._kind_of(ts_node)
            children = [index_of[c.id] for c in ts_node.named_children]

            fields: Dict[str, int] = {}
            for role, field_name in self._role_fields(ts_node, kind).items():
                child = ts_node.child_by_field_name(field_name)
                if child is not None and child.id in index_of:
                    fields[role] = index_of[child.id]

            if kind in WRAPPER_KINDS:
                wrapped = [
                    c for c in children
                    if self._kind_of(ordered[c]) != NodeKind.COMMENT
                ]
                if wrapped:
                    fields["operand"] = wrapped[0]

            nodes.append(ASTNode(
                index=index,
                kind=kind,
                node_type=ts_node.type,
                start=char_offset(ts_node.start_byte),
                end=char_offset(ts_node.end_byte),
                parent=parents[index],
                children=children,
                fields=fields
            ))

        return nodes
