"""Exception hierarchy for SequentialList.

Defines all custom exceptions raised by the container.
"""

from __future__ import annotations


class SequentialListError(Exception):
    """Base exception for all SequentialList errors."""
    pass


class ListIndexError(SequentialListError, IndexError):
    """Raised when an index falls outside the valid range for an operation."""
    pass


class EmptyListError(SequentialListError):
    """Raised when an operation requires a non-empty list."""
    pass
