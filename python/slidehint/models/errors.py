"""Error types raised by the solver core."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """A board, blank index, or budget violates the caller's preconditions."""
