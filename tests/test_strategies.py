"""Tests for the strategy catalog."""

from __future__ import annotations

import pytest

from fii_core.config.schema import StrategyOverride
from fii_core.engine.strategies import STRATEGY_IDS, get_strategy, list_strategies

EXPECTED_IDS = ["yield-hunter", "momentum-trader", "arbitrage-master", "mean-reversion"]


class TestListStrategies:
    def test_exactly_four_stable_ids(self):
        strategies = list_strategies()
        assert len(strategies) == 4
        assert [s.id for s in strategies] == EXPECTED_IDS
        assert list(STRATEGY_IDS) == EXPECTED_IDS

    def test_types(self):
        types = {s.id: s.type for s in list_strategies()}
        assert types == {
            "yield-hunter": "YIELD_HUNTING",
            "momentum-trader": "MOMENTUM",
            "arbitrage-master": "ARBITRAGE",
            "mean-reversion": "MEAN_REVERSION",
        }

    def test_default_active_flags(self):
        active = {s.id: s.active for s in list_strategies()}
        assert active == {
            "yield-hunter": True,
            "momentum-trader": True,
            "arbitrage-master": False,
            "mean-reversion": True,
        }

    def test_static_performance(self):
        perf = get_strategy("arbitrage-master").performance
        assert perf.total_return == 15.8
        assert perf.win_rate == 85.2
        assert perf.sharpe_ratio == 2.1
        assert perf.max_drawdown == 4.5

    def test_caller_toggle_does_not_leak(self):
        first = list_strategies()
        first[0].active = not first[0].active
        first[0].parameters["minYield"] = 99.0
        again = list_strategies()[0]
        assert again.active is True
        assert again.parameters["minYield"] == 8.0


class TestOverrides:
    def test_active_and_params(self):
        overrides = {
            "arbitrage-master": StrategyOverride(active=True, params={"minDiscount": 4.0}),
        }
        arb = get_strategy("arbitrage-master", overrides)
        assert arb.active is True
        assert arb.parameters["minDiscount"] == 4.0
        assert arb.parameters["holdingPeriod"] == 30

    def test_params_only_keeps_active(self):
        overrides = {"momentum-trader": StrategyOverride(params={"stopLoss": 3.0})}
        mom = get_strategy("momentum-trader", overrides)
        assert mom.active is True
        assert mom.parameters["stopLoss"] == 3.0

    def test_unknown_override_ignored(self):
        overrides = {"ghost": StrategyOverride(active=True)}
        assert [s.id for s in list_strategies(overrides)] == EXPECTED_IDS


class TestGetStrategy:
    @pytest.mark.parametrize("strategy_id", EXPECTED_IDS)
    def test_lookup(self, strategy_id):
        assert get_strategy(strategy_id).id == strategy_id

    def test_unknown_raises(self):
        with pytest.raises(KeyError):
            get_strategy("nonexistent")
