"""Tests for snapshot_history.options"""
import copy

import pytest
from pydantic import ValidationError

from snapshot_history.options import DEFAULT_MAX_SIZE, HistoryOptions


class TestHistoryOptions:
    def test_defaults(self):
        options = HistoryOptions()
        assert options.max_size == DEFAULT_MAX_SIZE == 25
        assert options.release is None
        assert options.clone is None
        assert options.on_change is None
        assert not options.is_degenerate

    def test_rejects_zero_and_negative_capacity(self):
        with pytest.raises(ValidationError):
            HistoryOptions(max_size=0)
        with pytest.raises(ValidationError):
            HistoryOptions(max_size=-1)

    def test_rejects_non_int_capacity(self):
        for value in ("3", 3.0, True):
            with pytest.raises(ValidationError):
                HistoryOptions(max_size=value)

    def test_capacity_one_is_degenerate(self):
        assert HistoryOptions(max_size=1).is_degenerate

    def test_accepts_callables(self):
        options = HistoryOptions(clone=copy.deepcopy, release=print)
        assert options.clone is copy.deepcopy
        assert options.release is print

    def test_rejects_non_callable_hooks(self):
        with pytest.raises(ValidationError):
            HistoryOptions(release="not callable")

    def test_frozen(self):
        options = HistoryOptions()
        with pytest.raises(ValidationError):
            options.max_size = 5
