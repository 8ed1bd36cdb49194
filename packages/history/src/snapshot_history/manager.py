"""
HistoryManager — linear undo/redo over caller-owned state snapshots.

The manager never holds the current state. Callers pass it in on every call:

    history = HistoryManager()
    history.record_snapshot(state)      # before mutating state
    state = mutate(state)
    state = history.undo(state)         # back to the recorded value
    state = history.redo(state)         # forward again

Both directions are BoundedStacks, so the oldest snapshots are forgotten once
the capacity is reached.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Generic, TypeVar

from .bounded_stack import BoundedStack
from .options import HistoryOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET: Any = object()


class HistoryError(Exception):
    """Base class for snapshot_history errors."""


class HistoryClosedError(HistoryError, RuntimeError):
    """Raised when a closed HistoryManager is asked to move snapshots."""


class HistoryManager(Generic[T]):
    """
    Two-stack undo/redo history.

    ``past`` holds recorded snapshots (newest on top), ``future`` holds
    snapshots stepped over by undo (most recently undone on top). Every
    snapshot the manager holds is owned by it until it is returned from
    undo/redo or released.
    """

    def __init__(
        self,
        max_size: int | None = None,
        *,
        options: HistoryOptions | None = None,
        release: Callable[[T], Any] | None | object = _UNSET,
        clone: Callable[[T], T] | None | object = _UNSET,
        on_change: Callable[[], Any] | None | object = _UNSET,
    ) -> None:
        # max_size=None inherits from options; hooks inherit only when omitted,
        # so an explicit None switches a hook off.
        base = options or HistoryOptions()
        fields = {name: getattr(base, name) for name in HistoryOptions.model_fields}
        if max_size is not None:
            fields["max_size"] = max_size
        hooks = {"release": release, "clone": clone, "on_change": on_change}
        fields.update({k: v for k, v in hooks.items() if v is not _UNSET})
        self._options = HistoryOptions(**fields)

        if self._options.is_degenerate:
            logger.warning(
                "HistoryManager created with max_size=%d; no snapshots will be retained",
                self._options.max_size,
            )

        self._past: BoundedStack[T] = BoundedStack(self._options.max_size, self._options.release)
        self._future: BoundedStack[T] = BoundedStack(self._options.max_size, self._options.release)
        self._closed = False

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def options(self) -> HistoryOptions:
        return self._options

    @property
    def max_size(self) -> int:
        return self._options.max_size

    @property
    def past(self) -> tuple[T, ...]:
        """Recorded snapshots, oldest first."""
        return self._past.snapshot()

    @property
    def future(self) -> tuple[T, ...]:
        """Undone snapshots, oldest first (the last one is restored first by redo)."""
        return self._future.snapshot()

    @property
    def undo_count(self) -> int:
        return len(self._past)

    @property
    def redo_count(self) -> int:
        return len(self._future)

    @property
    def can_undo(self) -> bool:
        return bool(self._past)

    @property
    def can_redo(self) -> bool:
        return bool(self._future)

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # History operations
    # ------------------------------------------------------------------

    def record_snapshot(self, current: T) -> None:
        """
        Record *current* as a step to come back to.

        Any redo branch left by earlier undo calls is discarded. The manager
        takes ownership of the recorded value (or of its clone when a ``clone``
        callable is configured). If ``clone`` raises, both stacks are untouched.
        """
        self._ensure_open()
        value = self._options.clone(current) if self._options.clone is not None else current
        discarded = self._future.clear()
        if discarded:
            logger.debug("Discarded %d redo snapshot(s) on new record", discarded)
        self._past.push(value)
        self._notify()

    def undo(self, current: T) -> T:
        """
        Step back one snapshot.

        Returns the previous snapshot and keeps *current* for redo. With no
        past, *current* is returned unchanged and nothing is retained.
        """
        return self._step(current, source=self._past, target=self._future)

    def redo(self, current: T) -> T:
        """Step forward one snapshot. Mirror image of undo."""
        return self._step(current, source=self._future, target=self._past)

    def clear(self) -> None:
        """Release every snapshot in both directions."""
        if self._closed:
            return
        released = self._past.clear() + self._future.clear()
        if released:
            logger.debug("Cleared %d snapshot(s)", released)
            self._notify()

    def close(self) -> None:
        """Release everything still held. Safe to call more than once."""
        if self._closed:
            return
        self.clear()
        self._closed = True

    def _step(self, current: T, source: BoundedStack[T], target: BoundedStack[T]) -> T:
        self._ensure_open()
        if not source:
            return current
        target.push(current)
        restored = source.pop()
        self._notify()
        return restored

    def _ensure_open(self) -> None:
        if self._closed:
            raise HistoryClosedError("HistoryManager is closed")

    def _notify(self) -> None:
        if self._options.on_change is not None:
            self._options.on_change()

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __enter__(self) -> HistoryManager[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._past) + len(self._future)

    def __repr__(self) -> str:
        return (
            f"HistoryManager(max_size={self.max_size}, "
            f"undo_count={self.undo_count}, redo_count={self.redo_count})"
        )
