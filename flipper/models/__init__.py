"""Data models for the if-flipper refactoring service."""

from .api_response import LanguageInfo, RefactorRequest, RefactorResponse
from .ast_node import ASTNode, NodeKind, SourceText, SyntaxTree
from .edit import ProposedEdit, RefactorKind, TextPosition, TextRange
from .synthetic import (
    Block,
    IfStatement,
    NotExpression,
    ReturnStatement,
    SourceFragment,
)

__all__ = [
    # AST models
    "ASTNode",
    "NodeKind",
    "SourceText",
    "SyntaxTree",
    # Synthetic node models
    "Block",
    "IfStatement",
    "NotExpression",
    "ReturnStatement",
    "SourceFragment",
    # Edit models
    "ProposedEdit",
    "RefactorKind",
    "TextPosition",
    "TextRange",
    # API models
    "LanguageInfo",
    "RefactorRequest",
    "RefactorResponse",
]
