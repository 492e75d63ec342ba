from collections.abc import Hashable, Iterable

import numpy as np

from ._generics import ProbDist, Sample_


class RandomProbDist(ProbDist[Sample_]):
    """Distribution with randomly drawn probabilities over a fixed set.

    Each distinct sample receives an independent weight drawn uniformly from
    ``[0, 1)``; the weights are then normalized to sum to one.

    Examples:
        >>> dist = RandomProbDist(["a", "b", "c"], seed=42)
        >>> round(sum(dist.prob(s) for s in dist.samples()), 10)
        1.0
        >>> dist.prob("z")
        0.0
    """

    def __init__(
        self,
        samples: Iterable[Sample_],
        *,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        """Initialize random distribution.

        Args:
            samples: Support of the distribution; duplicates are collapsed.
            rng: Random number generator for reproducible weights.
            seed: Random seed (used only if rng is None).
        """
        if rng is None:
            rng = np.random.default_rng(seed)

        support = list(dict.fromkeys(samples))
        weights = rng.random(len(support))
        total = weights.sum()
        if total > 0:
            weights = weights / total

        self._probs: dict[Hashable, float] = {
            s: float(w) for s, w in zip(support, weights)
        }

    def __repr__(self) -> str:
        return f"RandomProbDist(bins={len(self._probs)})"

    def prob(self, sample: Sample_) -> float:
        """Normalized random weight of ``sample``, 0.0 outside the support.

        Examples:
            >>> dist = RandomProbDist(["a"], seed=0)
            >>> dist.prob("a"), dist.prob("b")
            (1.0, 0.0)
        """
        return self._probs.get(sample, 0.0)

    def max(self) -> Sample_ | None:
        """Sample with the heaviest weight, None if the support is empty.

        Examples:
            >>> dist = RandomProbDist("abc", seed=3)
            >>> dist.prob(dist.max()) == max(dist.prob(s) for s in "abc")
            True
            >>> RandomProbDist([], seed=3).max() is None
            True
        """
        if not self._probs:
            return None
        return max(self._probs, key=self._probs.__getitem__)

    def samples(self) -> list[Sample_]:
        """Samples of the support, in the order they were first given.

        Examples:
            >>> RandomProbDist("cab", seed=1).samples()
            ['c', 'a', 'b']
        """
        return list(self._probs)
