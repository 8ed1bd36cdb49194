"""Shared fixtures for snapshot_history tests."""
from __future__ import annotations

import pytest

from snapshot_history import HistoryManager


class ReleaseTracker:
    """Collects every snapshot a manager hands to its release callback."""

    def __init__(self) -> None:
        self.released: list = []

    def __call__(self, snapshot) -> None:
        self.released.append(snapshot)


@pytest.fixture
def tracker() -> ReleaseTracker:
    return ReleaseTracker()


@pytest.fixture
def history(tracker: ReleaseTracker) -> HistoryManager[str]:
    return HistoryManager(3, release=tracker)
