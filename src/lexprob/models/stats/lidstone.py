from collections.abc import Hashable
from dataclasses import dataclass
from numbers import Integral

import numpy as np

from ...freqdist import FreqDist
from ._generics import ProbDist

__all__ = ["ELEProbDist", "LaplaceProbDist", "LidstoneParams", "LidstoneProbDist"]


@dataclass
class LidstoneParams:
    """Parameters for Lidstone smoothing.

    Attributes:
        gamma: Pseudo-count added to every bin (gamma >= 0).
        bins: Number of possible sample values, observed or not.
    """

    gamma: float
    bins: int


class LidstoneProbDist(ProbDist[Hashable]):
    """Lidstone estimate of the distribution behind a FreqDist.

    Every bin, observed or not, receives ``gamma`` extra counts, giving

        prob(sample) = (count(sample) + gamma) / (N + bins * gamma)

    Unseen bins carry probability mass that :meth:`samples` cannot list, so
    the probabilities of the listed samples do not sum to one in general.

    Examples:
        >>> fd = FreqDist("aab")
        >>> dist = LidstoneProbDist(fd, gamma=0.5, bins=4)
        >>> dist.prob("a")
        0.5
        >>> dist.prob("z")
        0.1
        >>> round(dist.discount(), 4)
        0.4
    """

    SUM_TO_ONE = False

    def __init__(self, freqdist: FreqDist, gamma: float, bins: int | None = None) -> None:
        """Initialize the estimate from observed counts.

        Args:
            freqdist: Observed frequency distribution; it is copied.
            gamma: Pseudo-count added to every bin.
            bins: Number of possible sample values. If None, only the
                observed samples are counted as bins.

        Raises:
            ValueError: If freqdist is empty, gamma is negative or not finite,
                or bins is not an integer, zero or smaller than the number of
                observed samples.
        """
        if freqdist.N() == 0:
            raise ValueError("Cannot estimate probabilities from an empty FreqDist")
        if not np.isfinite(gamma) or gamma < 0:
            raise ValueError(f"gamma must be finite and non-negative, got {gamma}")

        if bins is None:
            bins = freqdist.B()
        if not isinstance(bins, Integral):
            raise ValueError(f"bins must be an integer, got {bins!r}")
        if bins == 0 or bins < freqdist.B():
            raise ValueError(
                f"bins must be at least the number of observed samples "
                f"({freqdist.B()}), got {bins}"
            )

        self._freqdist = freqdist.copy()
        self.params = LidstoneParams(gamma=float(gamma), bins=int(bins))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(gamma={self.params.gamma}, "
            f"bins={self.params.bins}, N={self._freqdist.N()})"
        )

    @property
    def gamma(self) -> float:
        """Pseudo-count added to every bin."""
        return self.params.gamma

    @property
    def bins(self) -> int:
        """Number of possible sample values."""
        return self.params.bins

    def freqdist(self) -> FreqDist:
        """Copy of the counts this estimate was built from."""
        return self._freqdist.copy()

    def prob(self, sample: Hashable) -> float:
        count = self._freqdist[sample]
        return (count + self.gamma) / self._denominator()

    def max(self) -> Hashable | None:
        return self._freqdist.max()

    def samples(self) -> list[Hashable]:
        return self._freqdist.list_keys()

    def discount(self) -> float:
        """Share of the probability mass moved away from observed counts."""
        gb = self.gamma * self.bins
        return gb / (self._freqdist.N() + gb)

    def _denominator(self) -> float:
        return self._freqdist.N() + self.bins * self.gamma


class LaplaceProbDist(LidstoneProbDist):
    """Laplace (add-one) estimate: Lidstone smoothing with ``gamma = 1``.

    Examples:
        >>> dist = LaplaceProbDist(FreqDist("aab"), bins=3)
        >>> dist.prob("a")
        0.5
        >>> dist.prob("c")
        0.16666666666666666
    """

    def __init__(self, freqdist: FreqDist, bins: int | None = None) -> None:
        super().__init__(freqdist, 1.0, bins)


class ELEProbDist(LidstoneProbDist):
    """Expected likelihood estimate: Lidstone smoothing with ``gamma = 0.5``."""

    def __init__(self, freqdist: FreqDist, bins: int | None = None) -> None:
        super().__init__(freqdist, 0.5, bins)
