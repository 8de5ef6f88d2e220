"""
errors.py — Exception hierarchy
================================
Guard conditions (underflow, bad index, …) are NEVER raised — they are
reported as a rejected Step.  These exceptions are for defects and for
malformed input arriving from outside the core.
"""


class VisualizerError(Exception):
    """Base class for every error raised by this project."""


class ContainerIntegrityError(VisualizerError):
    """A node id is referenced but missing from its container's arena."""

    def __init__(self, container: str, node_id: str):
        super().__init__(f"{container}: dangling reference to node '{node_id}'")
        self.container = container
        self.node_id = node_id


class UnknownOperationError(VisualizerError, KeyError):
    """Registry lookup for an operation key that doesn't exist."""

    def __str__(self) -> str:
        return f"Unknown operation: {self.args[0]}" if self.args else "Unknown operation"


class InvalidContainerError(VisualizerError, ValueError):
    """Container JSON couldn't be turned into a container."""
