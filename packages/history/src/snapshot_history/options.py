"""
History options — typed, validated configuration for HistoryManager.
"""
from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel, Field

DEFAULT_MAX_SIZE = 25


class HistoryOptions(BaseModel):
    """Configuration for a HistoryManager instance."""

    # Upper bound (exclusive) on the size of each of the past/future stacks
    max_size: int = Field(default=DEFAULT_MAX_SIZE, ge=1, strict=True)

    # Called once for every snapshot the manager drops (eviction, redo branch
    # discard, clear, close). Never called for values returned by undo/redo.
    release: Callable[[Any], Any] | None = None

    # Applied to the caller's value on record_snapshot, e.g. copy.deepcopy
    clone: Callable[[Any], Any] | None = None

    # Fired after any operation that changed either stack
    on_change: Callable[[], Any] | None = None

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    @property
    def is_degenerate(self) -> bool:
        """True when the capacity leaves no room for any history at all."""
        return self.max_size <= 1
