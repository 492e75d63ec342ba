from ._generics import Discounting, ProbDist, discount, generate, logprob, sample
from .lidstone import ELEProbDist, LaplaceProbDist, LidstoneParams, LidstoneProbDist
from .mle import MLEProbDist
from .randomized import RandomProbDist
from .uniform import UniformProbDist

__all__ = [
    "Discounting",
    "ELEProbDist",
    "LaplaceProbDist",
    "LidstoneParams",
    "LidstoneProbDist",
    "MLEProbDist",
    "ProbDist",
    "RandomProbDist",
    "UniformProbDist",
    "discount",
    "generate",
    "logprob",
    "sample",
]
