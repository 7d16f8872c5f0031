"""
Custom exceptions for Prism Nodes.

This module provides a hierarchy of exceptions for the graph compiler.
Every compile failure is a CompilationError; GraphCompiler.compile turns
them into a failed CompiledResult so callers never see them raised.

Exception Hierarchy:
    PrismNodesError (base)
    └── CompilationError
        ├── NoOutputNodeError
        ├── CycleError
        ├── UnknownNodeTypeError
        └── HelperNotFoundError
"""


class PrismNodesError(Exception):
    """Base exception for all Prism Nodes errors."""
    pass


# =============================================================================
# Compilation Errors
# =============================================================================

class CompilationError(PrismNodesError):
    """
    Base exception for compilation/code generation errors.

    Attributes:
        node_id: Id of the offending node, when one can be blamed
    """

    def __init__(self, message: str, node_id: str = None):
        super().__init__(message)
        self.node_id = node_id


class NoOutputNodeError(CompilationError):
    """Raised when the graph has no node of the terminal (output) category."""

    def __init__(self, message: str = "No output node found"):
        super().__init__(message)


class CycleError(CompilationError):
    """
    Raised when the dependency graph is not a DAG.

    The members of the cycle are not identified.
    """

    def __init__(self, message: str = "Cycle detected in node graph"):
        super().__init__(message)


class UnknownNodeTypeError(CompilationError):
    """Raised when a node references a type missing from the registry."""

    def __init__(self, message: str, node_id: str = None, node_type: str = None):
        super().__init__(message, node_id=node_id)
        self.node_type = node_type


class HelperNotFoundError(CompilationError):
    """Raised when a node requires a helper block that has no source."""

    def __init__(self, message: str, node_id: str = None, helper_name: str = None):
        super().__init__(message, node_id=node_id)
        self.helper_name = helper_name
