from backend.engine.solvability.check import is_solvable

__all__ = ["is_solvable"]
