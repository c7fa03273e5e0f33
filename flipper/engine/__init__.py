"""Tree navigation and rewriting engine."""

from flipper.engine.errors import PreconditionError, RefactorError
from flipper.engine.handlers import (
    propose_all,
    propose_conditional_expansion,
    propose_guard_clause_simplify,
    propose_invert_and_simplify,
)
from flipper.engine.inverter import invert
from flipper.engine.navigation import find_enclosing, resolve, resolve_position
from flipper.engine.printer import print_node, print_nodes, print_range
from flipper.engine.statements import extract

__all__ = [
    "PreconditionError",
    "RefactorError",
    "propose_all",
    "propose_conditional_expansion",
    "propose_guard_clause_simplify",
    "propose_invert_and_simplify",
    "invert",
    "find_enclosing",
    "resolve",
    "resolve_position",
    "print_node",
    "print_nodes",
    "print_range",
    "extract",
]
