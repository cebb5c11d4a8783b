"""Pytest configuration and shared fixtures."""

import pytest
import random
import sys
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def rng():
    """Seeded source of randomness, for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def arrows():
    """The four 2x3 arrow shapes: up, down, left and right."""
    return [
        [0.0, 1.0, 0.0,
         1.0, 1.0, 1.0],
        [1.0, 1.0, 1.0,
         0.0, 1.0, 0.0],
        [1.0, 1.0, 1.0,
         0.0, 0.0, 1.0],
        [1.0, 1.0, 1.0,
         0.1, 0.0, 0.0],
    ]


@pytest.fixture
def up_multipliers():
    """Reward the 'up' arrow, penalize the other three."""
    return [1.0, -1.0, -1.0, -1.0]


@pytest.fixture
def identity_network_dict():
    """
    Two inputs, one hidden neuron; every neuron uses the identity:
        3 = w*(x0 + x1)
        2 = w*(n3 + x1)     (output)
    """
    return {
        "num_inputs": 2,
        "weight": 0.5,
        "neurons": [
            {"activation": None,       "inputs": []},
            {"activation": None,       "inputs": []},
            {"activation": "identity", "inputs": [3, 1]},
            {"activation": "identity", "inputs": [0, 1]},
        ]
    }


@pytest.fixture
def identity_network(identity_network_dict, rng):
    """Network built from 'identity_network_dict'."""
    from wann.genotype import Network
    return Network.from_dict(identity_network_dict, rng=rng)
