from .stats.lidstone import ELEProbDist, LaplaceProbDist, LidstoneProbDist
from .stats.mle import MLEProbDist
from .stats.randomized import RandomProbDist
from .stats.uniform import UniformProbDist

__all__ = [
    "ELEProbDist",
    "LaplaceProbDist",
    "LidstoneProbDist",
    "MLEProbDist",
    "RandomProbDist",
    "UniformProbDist",
]
