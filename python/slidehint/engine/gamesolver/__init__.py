from slidehint.engine.gamesolver.solver import FOUND, TIMED_OUT, Solver, solve

__all__ = ["FOUND", "TIMED_OUT", "Solver", "solve"]
