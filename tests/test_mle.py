"""Tests for the maximum likelihood estimator."""
import pytest

from lexprob import FreqDist, MLEProbDist


class TestMLEProbDist:
    def test_relative_frequencies(self, fruit_fd: FreqDist) -> None:
        dist = MLEProbDist(fruit_fd)
        assert dist.prob("apple") == pytest.approx(0.6)
        assert dist.prob("banana") == pytest.approx(0.2)
        assert dist.prob("cherry") == 0.0

    def test_sums_to_one(self, rng) -> None:
        fd = FreqDist(rng.integers(0, 100, size=1_000).tolist())
        dist = MLEProbDist(fd)
        assert dist.SUM_TO_ONE
        assert sum(dist.prob(s) for s in dist.samples()) == pytest.approx(1.0)

    def test_max_and_samples(self, fruit_fd: FreqDist) -> None:
        dist = MLEProbDist(fruit_fd)
        assert dist.max() == "apple"
        assert set(dist.samples()) == {"apple", "banana", "pineapple"}

    def test_source_not_mutated_and_not_tracked(self, fruit_fd: FreqDist) -> None:
        dist = MLEProbDist(fruit_fd)
        fruit_fd.add("cherry")
        assert fruit_fd.N() == 6
        assert dist.prob("cherry") == 0.0
        assert dist.prob("apple") == pytest.approx(0.6)

    def test_freqdist_returns_copy(self, fruit_fd: FreqDist) -> None:
        dist = MLEProbDist(fruit_fd)
        counts = dist.freqdist()
        assert counts == fruit_fd
        counts.add("cherry")
        assert dist.prob("cherry") == 0.0

    def test_empty_freqdist_rejected(self) -> None:
        with pytest.raises(ValueError):
            MLEProbDist(FreqDist())
