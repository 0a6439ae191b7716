"""Search engine: heuristic, move model, solver, generator and hints."""
