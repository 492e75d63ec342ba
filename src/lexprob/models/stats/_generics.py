import warnings
from collections.abc import Hashable
from typing import ClassVar, Protocol, TypeVar, runtime_checkable

import numpy as np

__all__ = ["Discounting", "ProbDist", "discount", "generate", "logprob", "sample"]

Sample_ = TypeVar("Sample_", bound=Hashable)


class ProbDist(Protocol[Sample_]):  # pragma: no cover
    """Protocol for discrete probability distributions over samples.

    A probability distribution maps every sample to a probability in
    ``[0, 1]``; samples outside the support have probability 0. When
    ``SUM_TO_ONE`` is true, the probabilities of the samples returned by
    :meth:`samples` add up to 1.

    Shared behavior (log probabilities, discounting and random generation) is
    provided by the module level functions :func:`logprob`, :func:`discount`,
    :func:`generate` and :func:`sample`, written purely in terms of this
    protocol.
    """

    SUM_TO_ONE: ClassVar[bool] = True

    def prob(self, sample: Sample_) -> float:
        """Probability of ``sample``, 0.0 for samples outside the support.

        Examples:
            >>> from lexprob.models.stats import UniformProbDist
            >>> dist = UniformProbDist("ab")
            >>> dist.prob("a"), dist.prob("z")
            (0.5, 0.0)
        """
        ...

    def max(self) -> Sample_ | None:
        """Sample with the greatest probability, None if there is no sample.

        If several samples share the greatest probability, one of them is
        returned.
        """
        ...

    def samples(self) -> list[Sample_]:
        """All samples with nonzero probability, always in the same order."""
        ...


@runtime_checkable
class Discounting(Protocol):  # pragma: no cover
    """Protocol for estimators that move probability mass to unseen samples."""

    def discount(self) -> float:
        """Ratio by which counts are discounted on average: c*/c."""
        ...


def logprob(dist: ProbDist[Sample_], sample: Sample_) -> float | None:
    """Base 2 logarithm of the probability of ``sample``.

    Args:
        dist: Probability distribution.
        sample: Sample to score.

    Returns:
        ``log2(dist.prob(sample))``, or None when the probability is 0 and the
        logarithm is undefined.

    Examples:
        >>> from lexprob.models.stats import UniformProbDist
        >>> dist = UniformProbDist("abcd")
        >>> logprob(dist, "a")
        -2.0
        >>> logprob(dist, "z") is None
        True
    """
    p = dist.prob(sample)
    if p == 0:
        return None
    return float(np.log2(p))


def discount(dist: ProbDist) -> float:
    """Ratio by which ``dist`` discounts observed counts on average.

    Estimators that apply no smoothing do not implement
    :class:`Discounting` and have a discount of 0.0.

    Examples:
        >>> from lexprob.models.stats import UniformProbDist
        >>> discount(UniformProbDist("ab"))
        0.0
    """
    if isinstance(dist, Discounting):
        return float(dist.discount())
    return 0.0


def generate(
    dist: ProbDist[Sample_],
    *,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
) -> Sample_ | None:
    """Draw one sample with probability ``dist.prob(sample)``.

    A uniform value in ``[0, 1)`` is drawn and the probabilities of the
    samples, taken in the order of :meth:`ProbDist.samples`, are subtracted
    from it until it drops to zero or below. If rounding leaves some value
    after every sample was visited, a sample is picked uniformly at random.

    For distributions whose listed samples do not carry all of the
    probability mass (``SUM_TO_ONE`` is false), the drawn value is scaled by
    the listed mass, so samples are drawn in proportion to their probability
    among the listed ones.

    Args:
        dist: Probability distribution to draw from.
        rng: Random number generator for reproducible sampling.
        seed: Random seed (used only if rng is None).

    Returns:
        The drawn sample, or None if the distribution has no samples.

    Examples:
        >>> from lexprob.models.stats import UniformProbDist
        >>> generate(UniformProbDist(["a", "b"]), seed=42) in {"a", "b"}
        True
        >>> generate(UniformProbDist([]), seed=42) is None
        True
    """
    samples = dist.samples()
    if not samples:
        return None

    if rng is None:
        rng = np.random.default_rng(seed)

    p = rng.random()
    if not dist.SUM_TO_ONE:
        p *= sum(dist.prob(s) for s in samples)
    for s in samples:
        p -= dist.prob(s)
        if p <= 0:
            return s

    if dist.SUM_TO_ONE:
        msg = "Probabilities summed to less than the drawn value, picking uniformly"
        warnings.warn(msg, RuntimeWarning, stacklevel=2)

    return samples[int(rng.integers(len(samples)))]


def sample(
    dist: ProbDist[Sample_],
    n_samples: int,
    *,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
) -> list[Sample_ | None]:
    """Draw ``n_samples`` independent samples with :func:`generate`.

    Args:
        dist: Probability distribution to draw from.
        n_samples: Number of samples to draw.
        rng: Random number generator for reproducible sampling.
        seed: Random seed (used only if rng is None).

    Returns:
        List of drawn samples.

    Raises:
        ValueError: If n_samples is negative.

    Examples:
        >>> from lexprob.models.stats import UniformProbDist
        >>> draws = sample(UniformProbDist("xy"), 10, seed=42)
        >>> len(draws)
        10
        >>> set(draws) <= {"x", "y"}
        True
    """
    if n_samples < 0:
        raise ValueError("n_samples must be non-negative")

    if rng is None:
        rng = np.random.default_rng(seed)

    return [generate(dist, rng=rng) for _ in range(n_samples)]
