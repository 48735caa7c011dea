"""Exception types and basic constants shared across the package."""

MAX_INDEX = 2**32 - 1
"""Largest index value a mesh element handle may hold."""


class InvalidInputException(ValueError):
    """Invalid input was passed to a function.

    Signals a violated precondition, e.g. an algorithm that expects a
    triangle mesh received a general polygon mesh.
    """


class SolverException(RuntimeError):
    """Solving an equation system failed."""


class AllocationException(OverflowError):
    """An allocation would exceed implementation-defined limits."""


class TopologyException(RuntimeError):
    """A topological error has occurred."""


class IOException(OSError):
    """An error occurred while reading or writing."""


class GLException(RuntimeError):
    """An OpenGL error occurred."""