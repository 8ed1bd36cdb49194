"""
snapshot_history — bounded linear undo/redo over opaque state snapshots.
"""
from .bounded_stack import BoundedStack
from .manager import HistoryClosedError, HistoryError, HistoryManager
from .options import DEFAULT_MAX_SIZE, HistoryOptions

__all__ = [
    "BoundedStack",
    "DEFAULT_MAX_SIZE",
    "HistoryClosedError",
    "HistoryError",
    "HistoryManager",
    "HistoryOptions",
]
