"""
Unit tests for exporting networks as Python source code.
"""

import math
import numpy as np
import pytest
import random

from wann.genotype import Network
from wann.phenotype import network_to_python_source


def compile_function(source, function_name="wann_network"):
    """Execute the generated source and return the function it defines."""
    namespace = {}
    exec(source, namespace)
    return namespace[function_name]


class TestSourceLayout:
    """Test the shape of the generated code."""

    def test_identity_network_source(self, identity_network):
        assert network_to_python_source(identity_network) == (
            "import math\n"
            "\n"
            "\n"
            "def wann_network(inputs):\n"
            "    # 2 input(s), 1 hidden neuron(s)\n"
            "    w = 0.5\n"
            "    s3 = inputs[0] * w + inputs[1] * w\n"
            "    n3 = s3\n"
            "    s2 = n3 * w + inputs[1] * w\n"
            "    n2 = s2\n"
            "    return n2\n"
        )

    def test_only_math_is_imported(self, identity_network):
        source  = identity_network.to_python_source()
        imports = [line for line in source.splitlines() if 'import' in line]
        assert imports == ["import math"]

    def test_function_name(self, identity_network):
        source = identity_network.to_python_source("recognize_up")
        assert "def recognize_up(inputs):" in source
        assert compile_function(source, "recognize_up")([2.0, 4.0]) == pytest.approx(3.5)

    @pytest.mark.parametrize("name", ["", "1st", "my-function", "class", "a b"])
    def test_invalid_function_name(self, identity_network, name):
        with pytest.raises(ValueError, match="not a valid Python function name"):
            network_to_python_source(identity_network, name)

    def test_unconnected_output(self, rng):
        network = Network.from_dict({
            "num_inputs": 1,
            "neurons": [{"activation": None,  "inputs": []},
                        {"activation": "cos", "inputs": []}]
        }, rng=rng)
        source = network.to_python_source()
        assert "    s1 = 0.0\n" in source
        assert compile_function(source)([7.0]) == pytest.approx(1.0)

    def test_dangling_neurons_not_exported(self, identity_network):
        index = identity_network.new_neuron()
        identity_network.add_connection(0, index)
        assert f"n{index}" not in identity_network.to_python_source()


class TestSourceEquivalence:
    """The generated function computes the same values as Network.evaluate()."""

    def test_identity_network(self, identity_network):
        function = compile_function(identity_network.to_python_source())
        for inputs in ([2.0, 4.0], [0.0, 0.0], [-1.5, 3.25]):
            assert function(inputs) == pytest.approx(identity_network.evaluate(inputs))

    def test_weight_is_baked_in(self, identity_network):
        identity_network.set_weight(-0.75)
        function = compile_function(identity_network.to_python_source())
        expected = identity_network.evaluate([1.0, 2.0])

        # later changes of the weight do not affect the exported function
        identity_network.set_weight(1.0)
        assert function([1.0, 2.0]) == pytest.approx(expected)

    @pytest.mark.parametrize("activation", ["sin", "cos", "relu", "inverse"])
    def test_non_finite_values(self, rng, activation):
        """An infinite weight gives the same inf or NaN outputs, without raising."""
        network = Network.from_dict({
            "num_inputs": 1,
            "neurons": [{"activation": None,       "inputs": []},
                        {"activation": activation, "inputs": [2]},
                        {"activation": "identity", "inputs": [0]}]
        }, rng=rng)
        network.set_weight(math.inf)
        function = compile_function(network.to_python_source())

        for inputs in ([1.0], [0.0], [-1.0]):
            with np.errstate(all='ignore'):
                expected = network.evaluate(inputs)
            actual = function(inputs)
            if math.isnan(expected):
                assert math.isnan(actual)
            else:
                assert actual == pytest.approx(expected)

    @pytest.mark.parametrize("seed", range(5))
    def test_random_networks(self, seed):
        rng     = random.Random(seed)
        network = Network(6, initial_cxn_fraction=0.5, rng=rng)
        for _ in range(60):
            network.modify(50)
        network.set_weight(rng.uniform(-2.0, 2.0))

        function = compile_function(network.to_python_source())
        for _ in range(5):
            inputs   = [rng.uniform(-1.0, 1.0) for _ in range(6)]
            expected = network.evaluate(inputs)
            actual   = function(inputs)
            if math.isnan(expected):
                assert math.isnan(actual)
            else:
                assert actual == pytest.approx(expected, rel=1e-6, abs=1e-9)
