"""Tests for DiffConfig validation."""

import pytest

from listdiff.config import STRATEGIES, DiffConfig
from listdiff.observability import NoopMetricsHook


class TestDefaults:
    def test_defaults(self, config):
        assert config.strategy == "index_set"
        assert config.reduce_moves is True
        assert config.max_matrix_cells is None
        assert config.metrics is None
        assert config.debug_dump_diff is False

    def test_strategy_names(self):
        assert STRATEGIES == ("index_set", "wagner_fischer")

    def test_accepts_every_known_strategy(self):
        for name in STRATEGIES:
            assert DiffConfig(strategy=name).strategy == name

    def test_accepts_metrics_hook(self):
        hook = NoopMetricsHook()
        assert DiffConfig(metrics=hook).metrics is hook


class TestValidation:
    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="strategy must be one of"):
            DiffConfig(strategy="myers")  # type: ignore[arg-type]

    @pytest.mark.parametrize("cells", [0, -5])
    def test_non_positive_cell_cap(self, cells):
        with pytest.raises(ValueError, match="max_matrix_cells"):
            DiffConfig(max_matrix_cells=cells)

    def test_positive_cell_cap(self):
        assert DiffConfig(max_matrix_cells=1).max_matrix_cells == 1
