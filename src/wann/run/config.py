import configparser
import os
from wann.activations import activations

class Config:

    @staticmethod
    def _parse_activation_options(raw_options):
        """
        Parse activation_options from string to list.

        Parameters:
            raw_options: Either "all", a comma-separated list, or already a list

        Returns:
            List of activation function names
        """
        if raw_options is None:
            raise ValueError("'activation_options' cannot be None")

        # If already a list, return as-is
        if isinstance(raw_options, list):
            return raw_options

        # Parse string values
        if raw_options == 'all':
            return list(activations.keys())
        else:
            # Parse comma-separated list
            parsed = [opt.strip() for opt in raw_options.split(',')]
            for opt in parsed:
                if opt not in activations:
                    raise ValueError(f"Invalid activation function '{opt}' in activation_options")
            return parsed

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config holding default values.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config with default values, suitable
                         for manual attribute setting.
        """

        # The number of input neurons. Not read from the configuration
        # file: it is derived from the training data by 'evolve()'.
        self.num_inputs = None

        # Default config for testing/manual setup
        if config_file is None:
            self.population_size        = 100
            self.initial_cxn_fraction   = 0.05
            self.activation_options     = 'all'
            self.max_mutation_attempts  = 100
            self.shared_weight_min      = 0.0
            self.shared_weight_max      = 1.0
            self.max_number_generations = 4000
            self.max_stagnation_period  = None
            self.verbose                = False
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [POPULATION_INIT]

        # The number of networks in each generation.
        self.population_size = get_value('POPULATION_INIT', 'population_size', int)

        # The fraction of all possible input => output connections instantiated,
        # at random, in newly-created networks (at least one connection is made).
        self.initial_cxn_fraction = get_value('POPULATION_INIT', 'initial_cxn_fraction', float)

        # [NETWORK]

        # Which activation functions neurons can use.
        # Options: "all" or a comma-separated list (see 'basic_activations.py')
        raw_options = get_value('NETWORK', 'activation_options', str, default='all')
        self.activation_options = raw_options

        # [MUTATION]

        # How many random neuron pairs a structural mutation tries before
        # falling back (insert node) or giving up (add connection).
        # Use "None" for no limit other than one derived from the network size.
        self.max_mutation_attempts = get_value('MUTATION', 'max_mutation_attempts', int, default=100)

        # [SCORING]

        # Each generation, the weight shared by all connections of all networks
        # is drawn uniformly from [shared_weight_min, shared_weight_max).
        self.shared_weight_min = get_value('SCORING', 'shared_weight_min', float, default=0.0)
        self.shared_weight_max = get_value('SCORING', 'shared_weight_max', float, default=1.0)

        # [TERMINATION]

        # The number of generations after which to stop the run.
        self.max_number_generations = get_value('TERMINATION', 'max_number_generations', int)

        # Stop the run early if the best score has not improved for more than
        # this many consecutive generations. Use "None" to always run for
        # 'max_number_generations' generations.
        self.max_stagnation_period = get_value('TERMINATION', 'max_stagnation_period', int, default=None)

        # [REPORTING]

        # Whether to print progress information after each generation.
        self.verbose = get_value('REPORTING', 'verbose', bool, default=False)

        self.validate()

    def validate(self) -> None:
        """
        Check that the configuration values are usable.

        Raises:
            ValueError: If a configuration value is out of range
        """
        if self.population_size is None or self.population_size < 1:
            raise ValueError(f"'population_size' must be at least 1, got {self.population_size}")
        if self.initial_cxn_fraction is None or not 0.0 <= self.initial_cxn_fraction <= 1.0:
            raise ValueError(f"'initial_cxn_fraction' must be in [0, 1], got {self.initial_cxn_fraction}")
        if self.max_number_generations is None or self.max_number_generations < 1:
            raise ValueError(f"'max_number_generations' must be at least 1, got {self.max_number_generations}")
        attempts = self.max_mutation_attempts
        if attempts is not None and (isinstance(attempts, bool) or not isinstance(attempts, int) or attempts < 1):
            raise ValueError(f"'max_mutation_attempts' must be an integer of at least 1 or None, got {attempts!r}")
        if self.max_stagnation_period is not None and self.max_stagnation_period < 1:
            raise ValueError(f"'max_stagnation_period' must be at least 1 or None, got {self.max_stagnation_period}")
        if not self.shared_weight_min < self.shared_weight_max:
            raise ValueError(f"'shared_weight_min' ({self.shared_weight_min}) must be smaller "
                             f"than 'shared_weight_max' ({self.shared_weight_max})")
        if not self.activation_options:
            raise ValueError("'activation_options' cannot be empty")

    def __setattr__(self, name, value):
        """
        Override 'setattr' to automatically parse activation_options when set.
        This allows users to write config.activation_options = "tanh, step" and have it
        automatically converted to the list of activation names.
        """
        if name == 'activation_options':
            value = self._parse_activation_options(value)
        super().__setattr__(name, value)
