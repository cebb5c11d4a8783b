"""
WANN Pool Package

This package manages the population of networks being evolved: weight-agnostic
scoring, ranking, selection and replacement, and per-generation statistics.

Modules:
    population: Scoring functions and the Population class
    statistics: GenerationStats class

Exported:
    Population:                The collection of networks being evolved
    GenerationStats:           Best/average/worst scores and stagnation counters
    expand_output_multipliers: Apply the "one correct pattern" multiplier convention
    score_network:             Complexity-penalized score of one network
    score_population:          Score every network under one shared weight
"""

from wann.pool.population import Population, expand_output_multipliers, score_network, score_population
from wann.pool.statistics import GenerationStats

__all__ = [
    'GenerationStats',
    'Population',
    'expand_output_multipliers',
    'score_network',
    'score_population',
]
