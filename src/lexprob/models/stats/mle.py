from collections.abc import Hashable

from ...freqdist import FreqDist
from ._generics import ProbDist


class MLEProbDist(ProbDist[Hashable]):
    """Maximum likelihood estimate of the distribution behind a FreqDist.

    The probability of each sample is its relative frequency,
    ``count(sample) / N``. Samples never observed get probability 0.

    Examples:
        >>> fd = FreqDist(["apple", "banana", "apple", "apple", "pineapple"])
        >>> dist = MLEProbDist(fd)
        >>> dist.prob("apple")
        0.6
        >>> dist.max()
        'apple'
    """

    def __init__(self, freqdist: FreqDist) -> None:
        """Initialize the estimate from observed counts.

        The counts are copied, so later changes to ``freqdist`` do not
        affect the estimate.

        Args:
            freqdist: Observed frequency distribution.

        Raises:
            ValueError: If freqdist has no recorded outcomes.
        """
        if freqdist.N() == 0:
            raise ValueError("Cannot estimate probabilities from an empty FreqDist")

        self._freqdist = freqdist.copy()

    def __repr__(self) -> str:
        return f"MLEProbDist(B={self._freqdist.B()}, N={self._freqdist.N()})"

    def freqdist(self) -> FreqDist:
        """Copy of the counts this estimate was built from."""
        return self._freqdist.copy()

    def prob(self, sample: Hashable) -> float:
        """Relative frequency of ``sample`` in the observed counts.

        Args:
            sample: Sample to score.

        Returns:
            ``count(sample) / N``, 0.0 for samples never observed.

        Examples:
            >>> dist = MLEProbDist(FreqDist("aab"))
            >>> dist.prob("b"), dist.prob("z")
            (0.3333333333333333, 0.0)
        """
        return self._freqdist.freq(sample)

    def max(self) -> Hashable | None:
        """Most frequently observed sample.

        Examples:
            >>> MLEProbDist(FreqDist("abb")).max()
            'b'
        """
        return self._freqdist.max()

    def samples(self) -> list[Hashable]:
        """Observed samples, in the order they were first recorded.

        Examples:
            >>> MLEProbDist(FreqDist("baab")).samples()
            ['b', 'a']
        """
        return self._freqdist.list_keys()
