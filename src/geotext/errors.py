"""Exception types raised by geotext.

FormatError      -- malformed coordinate input (bad array lengths)
WriterStateError -- a writer was driven out of protocol by its caller
"""

from __future__ import annotations


class FormatError(ValueError):
    """Raised when coordinate values do not have the expected shape."""


class WriterStateError(RuntimeError):
    """Raised when a writer's container or coordinate type stack is unbalanced."""
