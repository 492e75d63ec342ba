from collections import Counter
from collections.abc import Hashable, Iterable, Iterator
from typing import Self

import pandas as pd  # type: ignore[import-untyped]

__all__ = ["FreqDist"]


class FreqDist:
    """Frequency distribution over the outcomes of an experiment.

    A frequency distribution records how many times each outcome (sample)
    has occurred, e.g. how often each word type occurs in a document. Only
    samples that have been observed are stored, so every stored count is at
    least one.

    Examples:
        >>> fd = FreqDist(["apple", "banana", "apple", "apple", "pineapple"])
        >>> fd.N()
        5
        >>> fd.B()
        3
        >>> sorted(fd.hapaxes())
        ['banana', 'pineapple']
        >>> fd["apple"]
        3
    """

    def __init__(self, samples: Iterable[Hashable] | None = None) -> None:
        """Initialize the distribution, optionally from a batch of samples.

        Args:
            samples: Observed samples; duplicates increment the count.

        Examples:
            >>> FreqDist().N()
            0
            >>> FreqDist("abca").B()
            3
        """
        self._counts: Counter = Counter()
        self._total = 0
        if samples is not None:
            self.init(samples)

    def __repr__(self) -> str:
        return f"FreqDist(B={self.B()}, N={self.N()})"

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, sample: object) -> bool:
        return sample in self._counts

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._counts)

    def __getitem__(self, sample: Hashable) -> int:
        return self._counts.get(sample, 0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FreqDist):
            return NotImplemented
        return self._counts == other._counts

    def __add__(self, other: "FreqDist") -> "FreqDist":
        """Combine the counts of two distributions into a new one.

        Examples:
            >>> total = FreqDist("aab") + FreqDist("bc")
            >>> total["b"], total.N()
            (2, 5)
        """
        if not isinstance(other, FreqDist):
            return NotImplemented
        combined = self.copy()
        for sample, count in other._counts.items():
            combined._counts[sample] += count
            combined._total += count
        return combined

    def init(self, samples: Iterable[Hashable]) -> None:
        """Record every sample of a batch.

        A sample seen for the first time starts at count 1, any repeat
        increments its count.

        Args:
            samples: Observed samples, possibly with duplicates.
        """
        for sample in samples:
            self._counts[sample] += 1
            self._total += 1

    def add(self, sample: Hashable) -> Self:
        """Record a single sample.

        Args:
            sample: The observed sample.

        Returns:
            The distribution itself, so calls can be chained.

        Examples:
            >>> FreqDist().add("x").add("x").add("y")["x"]
            2
        """
        self._counts[sample] += 1
        self._total += 1
        return self

    def count(self, sample: Hashable) -> int:
        """Number of times ``sample`` was recorded, 0 if never seen."""
        return self[sample]

    def N(self) -> int:
        """Total number of sample outcomes recorded.

        For the number of distinct samples use :meth:`B`.
        """
        return self._total

    def B(self) -> int:
        """Number of distinct samples (bins) with a nonzero count."""
        return len(self._counts)

    def hapaxes(self) -> list[Hashable]:
        """Samples that occur exactly once."""
        return [sample for sample, count in self._counts.items() if count == 1]

    def freq(self, sample: Hashable) -> float:
        """Relative frequency of ``sample``.

        The count of the sample divided by the total number of outcomes,
        always a number in ``[0, 1]``.

        Examples:
            >>> fd = FreqDist("aab")
            >>> round(fd.freq("a"), 4)
            0.6667
            >>> fd.freq("z")
            0.0
            >>> FreqDist().freq("a")
            0.0
        """
        if self._total == 0:
            return 0.0
        return self[sample] / self._total

    def max(self) -> Hashable | None:
        """Sample with the greatest count.

        If several samples share the greatest count, one of them is
        returned. ``None`` is returned when nothing has been recorded.

        Examples:
            >>> FreqDist("abb").max()
            'b'
            >>> FreqDist().max() is None
            True
        """
        if not self._counts:
            return None
        return self._counts.most_common(1)[0][0]

    def most_common(self, n: int | None = None) -> list[tuple[Hashable, int]]:
        """``(sample, count)`` pairs ordered from the most to the least common."""
        return self._counts.most_common(n)

    def r_Nr(self, r: int) -> list[tuple[Hashable, int]]:
        """All ``(sample, count)`` pairs whose count equals ``r``.

        Args:
            r: Target frequency.

        Examples:
            >>> fd = FreqDist(["a", "b", "b", "c", "c"])
            >>> sorted(fd.r_Nr(2))
            [('b', 2), ('c', 2)]
            >>> fd.r_Nr(3)
            []
        """
        return [(sample, count) for sample, count in self._counts.items() if count == r]

    def Nr(self, r: int) -> int:
        """Number of bins whose count equals ``r``."""
        return sum(1 for count in self._counts.values() if count == r)

    def freq_of_freqs(self) -> dict[int, int]:
        """Map each observed frequency ``r`` to ``Nr``, the number of bins with it.

        Examples:
            >>> FreqDist(["a", "b", "b", "c", "c"]).freq_of_freqs()
            {1: 1, 2: 2}
        """
        return dict(sorted(Counter(self._counts.values()).items()))

    def copy(self) -> "FreqDist":
        """Independent copy of the distribution."""
        clone = FreqDist()
        clone._counts = self._counts.copy()
        clone._total = self._total
        return clone

    def tabulate(self, n: int | None = None, cumulative: bool = False) -> pd.DataFrame:
        """Frequency table of the most common samples.

        Args:
            n: Number of rows to keep. If None, all samples are listed.
            cumulative: Whether to add a running total of the counts.

        Returns:
            DataFrame with columns ``sample`` and ``count`` (plus
            ``cumulative`` if requested), most frequent sample first.

        Examples:
            >>> fd = FreqDist(["apple", "banana", "apple", "apple"])
            >>> table = fd.tabulate(cumulative=True)
            >>> table["sample"].tolist()
            ['apple', 'banana']
            >>> table["cumulative"].tolist()
            [3, 4]
        """
        table = pd.DataFrame(self.most_common(n), columns=["sample", "count"])
        table["count"] = table["count"].astype(int)
        if cumulative:
            table["cumulative"] = table["count"].cumsum()
        return table

    def list_keys(self) -> list[Hashable]:
        """All recorded samples, in no particular order."""
        return list(self._counts)

    def list(self) -> list[tuple[Hashable, int]]:
        """All ``(sample, count)`` entries, in no particular order."""
        return list(self._counts.items())

