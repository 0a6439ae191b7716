from slidehint.models.board import Board, Direction, validate_board
from slidehint.models.budget import MAX_SEARCH_DEPTH, SearchBudget, SearchResult
from slidehint.models.errors import InvalidInputError

__all__ = [
    "Board",
    "Direction",
    "InvalidInputError",
    "MAX_SEARCH_DEPTH",
    "SearchBudget",
    "SearchResult",
    "validate_board",
]
