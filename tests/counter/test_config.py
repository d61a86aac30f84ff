"""
Unit tests for CounterConfig.
"""

import pytest

from spring_arrangements.counter import ArrangementCounter, CounterConfig


class TestCounterConfig:
    """Tests for CounterConfig dataclass."""

    def test_init_when_defaults_then_five_fold_unbounded(self):
        config = CounterConfig()
        assert config.unfold_factor == 5
        assert config.short_circuit is True
        assert config.thread_safe_cache is False
        assert config.max_cache_entries is None

    def test_init_when_zero_factor_then_raises_error(self):
        with pytest.raises(ValueError, match="unfold_factor must be positive"):
            CounterConfig(unfold_factor=0)

    def test_init_when_zero_cache_bound_then_raises_error(self):
        with pytest.raises(ValueError, match="max_cache_entries"):
            CounterConfig(max_cache_entries=0)

    def test_init_when_frozen_then_immutable(self):
        config = CounterConfig()
        with pytest.raises(AttributeError):
            config.unfold_factor = 3  # type: ignore

    def test_counter_when_config_given_then_cache_follows_config(self):
        """The counter builds its cache from the config's cache policy."""
        counter = ArrangementCounter(CounterConfig(max_cache_entries=8))
        assert counter.cache.max_entries == 8
