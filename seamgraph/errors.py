"""
Exception types for seamgraph.

Every error signals a contract violation by the caller, never a transient
condition, so none of them are retried or caught inside the library.
"""


class SeamGraphError(Exception):
    """Base class for all seamgraph errors."""


class DuplicateItemError(SeamGraphError, ValueError):
    """An item was added to a priority queue that already holds it."""


class NotFoundError(SeamGraphError, KeyError):
    """A priority change or lookup referenced an item not in the queue."""


class EmptyQueueError(SeamGraphError, IndexError):
    """peek_min or remove_min was called on an empty priority queue."""


class UnreachableGoalError(SeamGraphError, KeyError):
    """A shortest-path solution was requested for a vertex never reached."""
