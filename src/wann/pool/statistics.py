"""
WANN Generation Statistics Module

Classes:
    GenerationStats: Best/average/worst score of a generation and stagnation counters
"""

from dataclasses import dataclass

@dataclass
class GenerationStats:
    """
    Score statistics of the current generation.

    Besides the best, average and worst score of the generation, it counts for
    how many consecutive generations each of these has failed to improve (that
    is, to become strictly larger than in the previous generation).
    """
    generation: int   = -1
    best      : float = float('-inf')
    average   : float = float('-inf')
    worst     : float = float('-inf')

    no_improvement_best   : int = 0
    no_improvement_average: int = 0
    no_improvement_worst  : int = 0

    def update(self, scores: list[float]) -> None:
        """
        Replace the statistics with those of the next generation.

        Parameters:
            scores: The scores of every individual in the new generation
        """
        if not scores:
            raise ValueError("Cannot compute statistics of an empty generation")

        best    = max(scores)
        average = sum(scores) / len(scores)
        worst   = min(scores)

        # There is nothing to improve on in the first generation
        if self.generation >= 0:
            self.no_improvement_best    = 0 if best    > self.best    else self.no_improvement_best    + 1
            self.no_improvement_average = 0 if average > self.average else self.no_improvement_average + 1
            self.no_improvement_worst   = 0 if worst   > self.worst   else self.no_improvement_worst   + 1

        self.generation += 1
        self.best    = best
        self.average = average
        self.worst   = worst

    def __str__(self):
        return (f"best={self.best:+.6f} average={self.average:+.6f} worst={self.worst:+.6f} "
                f"(no improvement for {self.no_improvement_best}/"
                f"{self.no_improvement_average}/{self.no_improvement_worst} generations)")
