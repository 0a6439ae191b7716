"""Search budget and result types."""

from __future__ import annotations

from dataclasses import dataclass, field

from slidehint.models.board import Direction
from slidehint.models.errors import InvalidInputError

# Keeps the recursive search well under the interpreter's recursion limit.
MAX_SEARCH_DEPTH = 512


@dataclass(frozen=True)
class SearchBudget:
    """Wall-clock and depth limits for a single ``solve`` call."""

    time_budget_ms: float = 800
    max_depth: int = 128

    def __post_init__(self) -> None:
        if self.time_budget_ms <= 0:
            raise InvalidInputError(
                f"time_budget_ms must be positive, got {self.time_budget_ms}."
            )
        if not 0 <= self.max_depth <= MAX_SEARCH_DEPTH:
            raise InvalidInputError(
                f"max_depth must be between 0 and {MAX_SEARCH_DEPTH}, "
                f"got {self.max_depth}."
            )


@dataclass
class SearchResult:
    """Outcome of a search.

    ``path`` is an exact solution when the search succeeded, otherwise the
    best partial prefix found before the budget ran out.
    """

    path: list[Direction] = field(default_factory=list)
    nodes_expanded: int = 0
    timed_out: bool = False

    @property
    def moves(self) -> int:
        return len(self.path)

    def to_dict(self) -> dict:
        return {
            "path": [d.value for d in self.path],
            "nodes_expanded": self.nodes_expanded,
            "timed_out": self.timed_out,
        }
