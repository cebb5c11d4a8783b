"""
Unit tests for the 'evolve' entry point.
"""

import pytest
import random

from wann import evolve
from wann.genotype import Network
from wann.run import Config


@pytest.fixture
def config():
    config = Config()
    config.population_size = 6
    config.max_number_generations = 4
    return config


class TestEvolve:

    def test_returns_network(self, config, arrows, up_multipliers):
        network = evolve(config, arrows, up_multipliers, rng=random.Random(1))
        assert isinstance(network, Network)
        assert network.num_inputs == 6
        assert isinstance(network.evaluate(arrows[0]), float)

    def test_sets_num_inputs(self, config):
        evolve(config, [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]], [1.0], rng=random.Random(1))
        assert config.num_inputs == 3

    def test_reproducible(self, config, arrows, up_multipliers):
        a = evolve(config, arrows, up_multipliers, rng=random.Random(5))
        b = evolve(config, arrows, up_multipliers, rng=random.Random(5))
        assert a.to_dict() == b.to_dict()

    def test_parallel_scoring(self, config, arrows, up_multipliers):
        serial   = evolve(config, arrows, up_multipliers, rng=random.Random(5))
        parallel = evolve(config, arrows, up_multipliers, rng=random.Random(5), num_jobs=2)
        assert serial.to_dict() == parallel.to_dict()

    def test_empty_input_data(self, config):
        with pytest.raises(ValueError, match="no input data"):
            evolve(config, [], [1.0])

    def test_multiplier_mismatch(self, config, arrows):
        with pytest.raises(ValueError):
            evolve(config, arrows, [1.0, -1.0, -1.0])
