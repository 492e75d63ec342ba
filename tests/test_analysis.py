"""Tests for frequency analysis helpers."""
import numpy as np
import pandas as pd
import pytest

from lexprob import FreqDist, MLEProbDist, RandomProbDist, UniformProbDist, sample
from lexprob.analysis import FitResult, compute_sample_frequencies, entropy, goodness_of_fit


class TestComputeSampleFrequencies:
    def test_long_format(self, fruit_fd: FreqDist) -> None:
        result = compute_sample_frequencies({"fruit": fruit_fd, "letters": FreqDist("xy")})
        assert list(result.columns) == ["distribution", "sample", "count", "freq"]
        assert len(result) == 5
        apple = result[result["sample"] == "apple"].iloc[0]
        assert apple["distribution"] == "fruit"
        assert apple["count"] == 3
        assert apple["freq"] == pytest.approx(0.6)

    def test_empty_input(self) -> None:
        result = compute_sample_frequencies({})
        assert result.empty
        assert pd.api.types.is_integer_dtype(result["count"])

    def test_empty_freqdist_contributes_no_rows(self) -> None:
        result = compute_sample_frequencies({"empty": FreqDist(), "letters": FreqDist("aab")})
        assert set(result["distribution"]) == {"letters"}
        assert pd.api.types.is_integer_dtype(result["count"])
        assert result["count"].tolist() == [2, 1]


class TestEntropy:
    def test_uniform(self) -> None:
        assert entropy(UniformProbDist(range(8))) == pytest.approx(3.0)

    def test_degenerate(self) -> None:
        assert entropy(MLEProbDist(FreqDist("aaaa"))) == pytest.approx(0.0)

    def test_mle(self) -> None:
        dist = MLEProbDist(FreqDist("aabc"))
        expected = -(0.5 * np.log2(0.5) + 2 * 0.25 * np.log2(0.25))
        assert entropy(dist) == pytest.approx(expected)

    def test_empty(self) -> None:
        assert entropy(UniformProbDist([])) == 0.0


class TestGoodnessOfFit:
    def test_generated_draws_fit(self, rng: np.random.Generator) -> None:
        dist = RandomProbDist("abcde", rng=rng)
        draws = sample(dist, 20_000, rng=rng)
        result = goodness_of_fit(dist, draws)
        assert isinstance(result, FitResult)
        assert result.n_draws == 20_000
        assert result.pvalue > 0.001

    def test_skewed_draws_rejected(self) -> None:
        result = goodness_of_fit(UniformProbDist("ab"), ["a"] * 900 + ["b"] * 100)
        assert result.pvalue < 1e-6

    def test_low_expected_counts_warn(self) -> None:
        with pytest.warns(UserWarning):
            goodness_of_fit(UniformProbDist("abcd"), list("abcd"))

    def test_empty_draws(self) -> None:
        with pytest.raises(ValueError):
            goodness_of_fit(UniformProbDist("ab"), [])

    def test_draws_outside_support(self) -> None:
        with pytest.raises(ValueError):
            goodness_of_fit(UniformProbDist("ab"), ["a", "z"] * 10)

    def test_empty_distribution(self) -> None:
        with pytest.raises(ValueError):
            goodness_of_fit(UniformProbDist([]), ["a"])

    def test_single_sample_support_rejected(self) -> None:
        with pytest.raises(ValueError):
            goodness_of_fit(UniformProbDist("a"), ["a"] * 10)
