# termpath/errors.py
from __future__ import annotations


class PathfindingError(Exception):
    pass


class InvalidEndpoints(PathfindingError):
    """Start equals end, or an endpoint would sit on a wall."""


class InvariantViolation(PathfindingError):
    """Internal bookkeeping is inconsistent; the search cannot be trusted."""
