from collections.abc import Hashable, Iterable

from ._generics import ProbDist, Sample_


class UniformProbDist(ProbDist[Sample_]):
    """Distribution giving equal probability to each sample of a fixed set.

    Every sample of the support has probability ``1 / len(support)`` and any
    other sample has probability 0. An empty support is allowed; in that case
    every probability is 0 and there is no sample to return.

    Examples:
        >>> dist = UniformProbDist(["a", "b", "c", "d"])
        >>> dist.prob("a")
        0.25
        >>> dist.prob("z")
        0.0
    """

    def __init__(self, samples: Iterable[Sample_]) -> None:
        """Initialize uniform distribution.

        Args:
            samples: Support of the distribution. Duplicates are collapsed,
                the order of first appearance is kept.

        Examples:
            >>> UniformProbDist("abca").samples()
            ['a', 'b', 'c']
        """
        self._support: tuple[Sample_, ...] = tuple(dict.fromkeys(samples))
        self._members: frozenset[Hashable] = frozenset(self._support)

    def __repr__(self) -> str:
        return f"UniformProbDist(bins={len(self._support)})"

    def prob(self, sample: Sample_) -> float:
        """Probability of ``sample``: one over the support size, or 0.0.

        Args:
            sample: Sample to score.

        Returns:
            ``1 / len(support)`` for members of the support, 0.0 otherwise.

        Examples:
            >>> dist = UniformProbDist("abcd")
            >>> dist.prob("b")
            0.25
            >>> UniformProbDist([]).prob("b")
            0.0
        """
        if sample not in self._members:
            return 0.0
        return 1.0 / len(self._support)

    def max(self) -> Sample_ | None:
        """Any member of the support, as all are equally likely.

        Returns:
            The first sample of the support, or None if it is empty.

        Examples:
            >>> UniformProbDist("xyz").max()
            'x'
            >>> UniformProbDist([]).max() is None
            True
        """
        if not self._support:
            return None
        return self._support[0]

    def samples(self) -> list[Sample_]:
        """Samples of the support, in the order they were first given.

        Examples:
            >>> UniformProbDist(["b", "a", "b"]).samples()
            ['b', 'a']
        """
        return list(self._support)
