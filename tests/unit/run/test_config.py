"""
Unit tests for Config class.
"""

import configparser
import pytest

from wann.activations import activations
from wann.run.config import Config


FULL_CONFIG = """
[POPULATION_INIT]
population_size      = 30
initial_cxn_fraction = 0.25

[NETWORK]
activation_options = tanh, step, inverse

[MUTATION]
max_mutation_attempts = 20

[SCORING]
shared_weight_min = -1.0
shared_weight_max =  2.0

[TERMINATION]
max_number_generations = 250
max_stagnation_period  = 40

[REPORTING]
verbose = true
"""

MINIMAL_CONFIG = """
[POPULATION_INIT]
population_size      = 10
initial_cxn_fraction = 0.5

[TERMINATION]
max_number_generations = 5
"""


@pytest.fixture
def write_config(tmp_path):
    """Write an INI file and return its path."""
    def _write(content, name="config.ini"):
        path = tmp_path / name
        path.write_text(content)
        return str(path)
    return _write


class TestDefaultConfig:

    def test_defaults(self):
        config = Config()
        assert config.num_inputs is None
        assert config.population_size == 100
        assert config.initial_cxn_fraction == 0.05
        assert config.activation_options == list(activations.keys())
        assert config.max_mutation_attempts == 100
        assert config.shared_weight_min == 0.0
        assert config.shared_weight_max == 1.0
        assert config.max_number_generations == 4000
        assert config.max_stagnation_period is None
        assert config.verbose is False

    def test_defaults_are_valid(self):
        Config().validate()


class TestConfigFile:

    def test_full_file(self, write_config):
        config = Config(write_config(FULL_CONFIG))
        assert config.population_size == 30
        assert config.initial_cxn_fraction == 0.25
        assert config.activation_options == ['tanh', 'step', 'inverse']
        assert config.max_mutation_attempts == 20
        assert config.shared_weight_min == -1.0
        assert config.shared_weight_max == 2.0
        assert config.max_number_generations == 250
        assert config.max_stagnation_period == 40
        assert config.verbose is True

    def test_optional_values_default(self, write_config):
        config = Config(write_config(MINIMAL_CONFIG))
        assert config.activation_options == list(activations.keys())
        assert config.max_mutation_attempts == 100
        assert config.shared_weight_min == 0.0
        assert config.shared_weight_max == 1.0
        assert config.max_stagnation_period is None
        assert config.verbose is False

    def test_none_values(self, write_config):
        content = MINIMAL_CONFIG + "\n[MUTATION]\nmax_mutation_attempts = None\n"
        assert Config(write_config(content)).max_mutation_attempts is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "missing.ini"))

    def test_missing_required_option(self, write_config):
        content = "[POPULATION_INIT]\npopulation_size = 10\n\n[TERMINATION]\nmax_number_generations = 5\n"
        with pytest.raises(configparser.NoOptionError):
            Config(write_config(content))

    def test_missing_required_section(self, write_config):
        content = "[POPULATION_INIT]\npopulation_size = 10\ninitial_cxn_fraction = 0.5\n"
        with pytest.raises(configparser.NoSectionError):
            Config(write_config(content))

    def test_unknown_activation(self, write_config):
        content = MINIMAL_CONFIG + "\n[NETWORK]\nactivation_options = tanh, softplus\n"
        with pytest.raises(ValueError, match="softplus"):
            Config(write_config(content))

    def test_none_activation_options(self, write_config):
        content = MINIMAL_CONFIG + "\n[NETWORK]\nactivation_options = none\n"
        with pytest.raises(ValueError, match="activation_options"):
            Config(write_config(content))

    def test_invalid_value_rejected(self, write_config):
        content = MINIMAL_CONFIG.replace("population_size      = 10", "population_size      = 0")
        with pytest.raises(ValueError, match="population_size"):
            Config(write_config(content))


class TestActivationOptionsParsing:

    def test_comma_separated_string(self):
        config = Config()
        config.activation_options = " sin ,cos,relu "
        assert config.activation_options == ['sin', 'cos', 'relu']

    def test_all(self):
        config = Config()
        config.activation_options = 'step'
        config.activation_options = 'all'
        assert config.activation_options == list(activations.keys())

    def test_list_kept(self):
        config = Config()
        config.activation_options = ['gaussian']
        assert config.activation_options == ['gaussian']

    def test_invalid_name(self):
        config = Config()
        with pytest.raises(ValueError, match="Invalid activation function"):
            config.activation_options = 'tanh, bogus'


class TestValidate:

    @pytest.mark.parametrize("name, value", [
        ("population_size", 0),
        ("initial_cxn_fraction", -0.5),
        ("initial_cxn_fraction", 1.5),
        ("max_number_generations", 0),
        ("max_mutation_attempts", 0),
        ("max_stagnation_period", 0),
        ("shared_weight_min", 1.0),
        ("activation_options", []),
    ])
    def test_out_of_range(self, name, value):
        config = Config()
        setattr(config, name, value)
        with pytest.raises(ValueError):
            config.validate()

    def test_unlimited_mutation_attempts_allowed(self):
        config = Config()
        config.max_mutation_attempts = None
        config.validate()

    @pytest.mark.parametrize("value", [100.0, True, "100"])
    def test_mutation_attempts_must_be_integer(self, value):
        """A non-integer retry budget is rejected before any network is built."""
        config = Config()
        config.max_mutation_attempts = value
        with pytest.raises(ValueError, match="max_mutation_attempts"):
            config.validate()
