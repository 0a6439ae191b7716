from slidehint.engine.heuristic.manhattan import goal_positions, manhattan

__all__ = ["goal_positions", "manhattan"]
