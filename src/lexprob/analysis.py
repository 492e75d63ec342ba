import warnings
from collections import Counter
from collections.abc import Hashable, Sequence
from dataclasses import dataclass

import numpy as np
import pandas as pd  # type: ignore
from scipy import stats  # type: ignore

from .freqdist import FreqDist
from .models.stats._generics import ProbDist

__all__ = ["FitResult", "compute_sample_frequencies", "entropy", "goodness_of_fit"]


def compute_sample_frequencies(freqdists: dict[str, FreqDist]) -> pd.DataFrame:
    """
    Compute sample frequencies for multiple named frequency distributions.

    Takes a dictionary containing one or more named frequency distributions,
    and returns a long format DataFrame with the count and relative frequency
    of each sample in each distribution. Distributions with no recorded
    outcomes contribute no rows.

    Args:
        freqdists: Dictionary where keys are distribution names and values
            are frequency distributions.

    Returns:
        DataFrame with columns:
            - 'distribution': Name of the distribution
            - 'sample': The observed sample
            - 'count': Number of times the sample was observed
            - 'freq': Relative frequency of the sample in its distribution

    Examples:
        >>> fds = {
        ...     "first": FreqDist("aab"),
        ...     "second": FreqDist("bc"),
        ... }
        >>> result = compute_sample_frequencies(fds)
        >>> list(result.columns)
        ['distribution', 'sample', 'count', 'freq']
        >>> len(result)
        4
        >>> result.groupby("distribution")["freq"].sum().round(6).tolist()
        [1.0, 1.0]
    """

    result_data: list[pd.DataFrame] = []

    for dist_name, fd in freqdists.items():
        if fd.N() == 0:
            continue

        entries = fd.most_common()
        data = {
            "distribution": dist_name,
            "sample": [sample for sample, _ in entries],
            "count": [count for _, count in entries],
            "freq": [fd.freq(sample) for sample, _ in entries],
        }
        result_data.append(pd.DataFrame(data))

    if not result_data:
        return pd.DataFrame(columns=["distribution", "sample", "count", "freq"]).astype(
            {"count": int, "freq": float}
        )

    result = pd.concat(result_data, ignore_index=True)
    result["count"] = result["count"].astype(int)
    return result


def entropy(dist: ProbDist) -> float:
    """Shannon entropy, in bits, of a probability distribution.

    The probabilities of :meth:`ProbDist.samples` are renormalized, so for
    smoothed estimators this is the entropy over the observed samples only.

    Args:
        dist: Probability distribution.

    Returns:
        Entropy in bits, 0.0 if the distribution has no samples.

    Examples:
        >>> from lexprob.models.stats import UniformProbDist
        >>> round(entropy(UniformProbDist("abcd")), 10)
        2.0
        >>> entropy(UniformProbDist([]))
        0.0
    """
    probs = np.array([dist.prob(s) for s in dist.samples()], dtype=float)
    if probs.size == 0 or probs.sum() == 0:
        return 0.0

    return float(stats.entropy(probs, base=2))


@dataclass
class FitResult:
    """Result of a chi-square goodness of fit test.

    Attributes:
        statistic: Chi-square statistic.
        pvalue: Probability of a statistic at least as extreme under the
            tested distribution.
        n_draws: Number of draws tested.
    """

    statistic: float
    pvalue: float
    n_draws: int


def goodness_of_fit(dist: ProbDist, draws: Sequence[Hashable]) -> FitResult:
    """Test whether draws are consistent with a probability distribution.

    Observed counts of each sample of ``dist`` are compared with the counts
    expected from ``dist.prob`` using Pearson's chi-square test. Expected
    counts are renormalized over :meth:`ProbDist.samples`.

    Args:
        dist: Probability distribution the draws are assumed to come from.
        draws: Observed samples.

    Returns:
        FitResult with the test statistic and p-value.

    Raises:
        ValueError: If draws is empty, the distribution has fewer than two
            samples, or a draw is not a sample of the distribution.

    Examples:
        >>> from lexprob.models.stats import UniformProbDist
        >>> result = goodness_of_fit(UniformProbDist("ab"), list("ab" * 50))
        >>> result.statistic
        0.0
        >>> result.pvalue
        1.0
    """
    if len(draws) == 0:
        raise ValueError("Draws cannot be empty")

    samples = dist.samples()
    if len(samples) < 2:
        raise ValueError(
            f"Distribution needs at least 2 samples to test, got {len(samples)}"
        )

    observed_counts = Counter(draws)
    if unknown := set(observed_counts) - set(samples):
        raise ValueError(f"Draws outside the distribution support: {sorted(map(repr, unknown))}")

    n_draws = len(draws)
    observed = np.array([observed_counts[s] for s in samples], dtype=float)
    probs = np.array([dist.prob(s) for s in samples], dtype=float)
    expected = probs / probs.sum() * n_draws

    if np.any(expected < 5):
        warnings.warn(
            "Some expected counts are below 5, the chi-square approximation "
            "may be inaccurate.",
            UserWarning,
            stacklevel=2,
        )

    statistic, pvalue = stats.chisquare(observed, expected)

    return FitResult(statistic=float(statistic), pvalue=float(pvalue), n_draws=n_draws)
