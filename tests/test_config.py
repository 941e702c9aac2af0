# tests/test_config.py
"""
Tests for GenerationConfig and sample().
"""

import logging

import pytest

from shrinkcheck.config import GenerationConfig, sample
from shrinkcheck.errors import ConfigurationError
from shrinkcheck.primitives import constant, integer


class TestGenerationConfig:

    def test_defaults_valid(self):
        assert GenerationConfig().validate() == []

    def test_negative_samples(self):
        assert GenerationConfig(num_samples=-1).validate() == ["num_samples must be non-negative"]

    def test_low_bias_frequency(self):
        assert GenerationConfig(bias_frequency=1).validate() == ["bias_frequency must be at least 2"]


class TestSample:

    def test_default_sample_size(self):
        assert len(sample(integer(0, 100))) == 10

    def test_reproducible(self):
        config = GenerationConfig(seed=99, num_samples=25)
        assert sample(integer(-50, 50), config) == sample(integer(-50, 50), config)

    def test_seed_changes_values(self):
        arb = integer(0, 1_000_000)
        assert sample(arb, GenerationConfig(seed=1)) != sample(arb, GenerationConfig(seed=2))

    def test_zero_samples(self):
        assert sample(constant(1), GenerationConfig(num_samples=0)) == []

    def test_bias_frequency_applied(self):
        config = GenerationConfig(seed=3, num_samples=200, bias_frequency=2)
        values = sample(integer(0, 1_000_000), config)
        assert all(0 <= v <= 1_000_000 for v in values)
        assert sum(v <= 20 or v >= 999_980 for v in values) > 50

    def test_invalid_config_raises_and_logs(self, caplog):
        with caplog.at_level(logging.WARNING, logger="shrinkcheck.config"):
            with pytest.raises(ConfigurationError):
                sample(constant(1), GenerationConfig(num_samples=-3))
        assert "num_samples must be non-negative" in caplog.text
