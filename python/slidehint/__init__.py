"""Time-bounded IDA* solver and hint engine for N×N sliding puzzles."""

__version__ = "0.1.0"
