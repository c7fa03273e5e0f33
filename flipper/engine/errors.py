"""Refactoring engine exceptions."""


class RefactorError(Exception):
    """Base exception for refactoring errors."""
    pass


class PreconditionError(RefactorError):
    """A rewrite was asked to operate on a node of the wrong shape."""
    pass
