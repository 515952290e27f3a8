from backend.engine.pathsearch.engine import (
    Frontier,
    SearchRecord,
    Session,
    ShortestPathEngine,
    by_distance_then_steps,
)

__all__ = [
    "Frontier",
    "SearchRecord",
    "Session",
    "ShortestPathEngine",
    "by_distance_then_steps",
]
