from slidehint.engine.gameplay.moves import (
    Move,
    apply_move,
    apply_path,
    first_move_tile_and_direction,
    is_goal,
    neighbors,
    target_index,
)

__all__ = [
    "Move",
    "apply_move",
    "apply_path",
    "first_move_tile_and_direction",
    "is_goal",
    "neighbors",
    "target_index",
]
