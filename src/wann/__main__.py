"""
Command-line driver: evolve a network recognizing the "up" arrow among four
2x3 arrow shapes, and print it as a Python function.

Usage:
    python -m wann
    python -m wann --generations 200 --population-size 50 --seed 1
    python -m wann --config config_arrows.ini --verbose
"""

import argparse
import configparser
import random
import sys

from wann.run import Config, evolve, recognizes_target

# Four shapes, representing: up, down, left and right
ARROWS = {
    "up":    [0.0, 1.0, 0.0,    #  o
              1.0, 1.0, 1.0],   # ooo
    "down":  [1.0, 1.0, 1.0,    # ooo
              0.0, 1.0, 0.0],   #  o
    "left":  [1.0, 1.0, 1.0,    # ooo
              0.0, 0.0, 1.0],   #   o
    "right": [1.0, 1.0, 1.0,    # ooo
              0.1, 0.0, 0.0],   # o  (faint)
}

# Recognize "up", reject the other three shapes
MULTIPLIERS_UP = [1.0, -1.0, -1.0, -1.0]

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wann",
                                     description="Evolve a weight-agnostic network recognizing an arrow shape")
    parser.add_argument('--config', help='INI configuration file (other options override it)')
    parser.add_argument('--generations', type=int, help='Number of generations')
    parser.add_argument('--population-size', type=int, help='Number of networks per generation')
    parser.add_argument('--connection-ratio', type=float,
                        help='Fraction of input => output connections in new networks')
    parser.add_argument('--seed', type=int, help='Random seed, for reproducible runs')
    parser.add_argument('--num-jobs', type=int, default=1, help='Number of parallel scoring processes')
    parser.add_argument('--function-name', default='wann_network', help='Name of the generated function')
    parser.add_argument('--verbose', action='store_true', help='Report progress after each generation')
    return parser

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = Config(args.config)
        if args.generations is not None:
            config.max_number_generations = args.generations
        if args.population_size is not None:
            config.population_size = args.population_size
        if args.connection_ratio is not None:
            config.initial_cxn_fraction = args.connection_ratio
        if args.verbose:
            config.verbose = True

        rng     = random.Random(args.seed)
        network = evolve(config, ARROWS, MULTIPLIERS_UP, rng=rng, num_jobs=args.num_jobs)
        source  = network.to_python_source(args.function_name)
    except (ValueError, OSError, configparser.Error) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1

    if config.verbose:
        if recognizes_target(network, list(ARROWS.values()), MULTIPLIERS_UP):
            print("Network training complete, the results are good.")
        else:
            print("Network training complete, but the results did not pass the test.")

    print(source)
    return 0

if __name__ == '__main__':
    sys.exit(main())
