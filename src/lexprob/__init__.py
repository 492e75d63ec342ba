from .freqdist import FreqDist
from .logspace import add_log, sum_logs
from .models.stats import (
    ELEProbDist,
    LaplaceProbDist,
    LidstoneProbDist,
    MLEProbDist,
    ProbDist,
    RandomProbDist,
    UniformProbDist,
    discount,
    generate,
    logprob,
    sample,
)

__all__ = [
    "ELEProbDist",
    "FreqDist",
    "LaplaceProbDist",
    "LidstoneProbDist",
    "MLEProbDist",
    "ProbDist",
    "RandomProbDist",
    "UniformProbDist",
    "add_log",
    "discount",
    "generate",
    "logprob",
    "sample",
    "sum_logs",
]
