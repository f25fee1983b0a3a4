"""Tests for the TopKSelector."""

from __future__ import annotations

import numpy as np
import pytest

from logits_warper.candidates import CandidateSet
from logits_warper.exceptions import CandidateMismatchError, InvalidTopKError
from logits_warper.selection.selector import TopKSelector, validate_top_k


@pytest.fixture
def selector(backend_name: str) -> TopKSelector:
    """TopKSelector for each built-in backend."""
    return TopKSelector(backend_name)


class TestScenarios:
    """Fixed input/output scenarios."""

    def test_empty_input(self, selector: TopKSelector) -> None:
        """Empty input yields empty output for any k."""
        for k in (0, 1, 10):
            result = selector.select([], [], k)
            assert len(result) == 0
            assert result.to_lists() == ([], [])

    def test_k_exceeds_length(self, selector: TopKSelector) -> None:
        """k > n returns every entry sorted by descending score."""
        result = selector.select([5, 2, 9], [0.1, 0.9, 0.4], 10)
        assert result.to_lists() == ([2, 9, 5], [0.9, 0.4, 0.1])

    def test_exact_k(self, selector: TopKSelector) -> None:
        result = selector.select([0, 1, 2, 3], [1.0, 3.0, 2.0, 0.5], 2)
        assert result.to_lists() == ([1, 2], [3.0, 2.0])

    def test_tie_first_seen_wins(self, selector: TopKSelector) -> None:
        """Equal scores straddling the cut keep the earliest entry."""
        for _ in range(5):
            result = selector.select([10, 11], [2.0, 2.0], 1)
            assert result.to_lists() == ([10], [2.0])

    def test_index_preservation(self, selector: TopKSelector) -> None:
        """Original non-contiguous indices are carried, never positions."""
        result = selector.select([100, 200, 300], [0.2, 0.8, 0.5], 2)
        assert result.indices.tolist() == [200, 300]
        assert result.scores.tolist() == [0.8, 0.5]

    def test_k_zero(self, selector: TopKSelector) -> None:
        result = selector.select([1, 2, 3], [0.3, 0.2, 0.1], 0)
        assert len(result) == 0

    def test_ties_ordered_by_position_within_output(self, selector: TopKSelector) -> None:
        """Kept ties appear in input order."""
        result = selector.select([7, 3, 9, 1, 4], [1.0, 5.0, 1.0, 5.0, 1.0], 4)
        assert result.indices.tolist() == [3, 1, 7, 9]

    def test_tie_at_boundary_keeps_earliest(self, selector: TopKSelector) -> None:
        result = selector.select([0, 1, 2, 3, 4, 5], [3.0, 1.0, 2.0, 1.0, 1.0, 2.0], 4)
        assert result.indices.tolist() == [0, 2, 5, 1]

    def test_infinite_scores(self, selector: TopKSelector) -> None:
        """Masked (-inf) candidates rank last; +inf ranks first."""
        scores = [-np.inf, 1.0, np.inf, -np.inf, 0.0]
        result = selector.select([0, 1, 2, 3, 4], scores, 5)
        assert result.indices.tolist() == [2, 1, 4, 0, 3]

    def test_signed_zeros_are_ties(self, selector: TopKSelector) -> None:
        result = selector.select([0, 1], [-0.0, 0.0], 1)
        assert result.indices.tolist() == [0]


class TestLaws:
    """Properties that hold for every input, checked on random data."""

    @pytest.mark.parametrize("k", [1, 7, 50, 999, 1000, 5000])
    def test_laws_on_tied_input(
        self, selector: TopKSelector, sample_logits_tied: np.ndarray, k: int
    ) -> None:
        scores = sample_logits_tied
        indices = np.arange(scores.size, dtype=np.int64) * 3 + 11
        result = selector.select(indices, scores, k)

        # Length law.
        assert len(result.indices) == len(result.scores) == min(k, scores.size)

        # Subset law: each output pair exists unchanged in the input.
        lookup = dict(zip(indices.tolist(), scores.tolist(), strict=True))
        for idx, score in zip(*result.to_lists(), strict=True):
            assert lookup[idx] == score

        # Order law.
        assert np.all(np.diff(result.scores) <= 0)

        # Maximality law.
        excluded = np.setdiff1d(indices, result.indices)
        if excluded.size and len(result):
            excluded_scores = scores[(excluded - 11) // 3]
            assert excluded_scores.max() <= result.scores.min()

    def test_matches_reference_ordering(
        self, selector: TopKSelector, sample_logits_tied: np.ndarray
    ) -> None:
        """Output equals a stable full sort on (-score, position), truncated."""
        scores = sample_logits_tied
        indices = np.arange(scores.size)
        expected = sorted(range(scores.size), key=lambda i: (-scores[i], i))[:123]
        result = selector.select(indices, scores, 123)
        assert result.indices.tolist() == expected

    def test_determinism(self, selector: TopKSelector, sample_logits_large_vocab: np.ndarray) -> None:
        """Repeated calls produce bit-identical output."""
        indices = np.arange(sample_logits_large_vocab.size)
        first = selector.select(indices, sample_logits_large_vocab, 40)
        for _ in range(3):
            again = selector.select(indices, sample_logits_large_vocab, 40)
            assert np.array_equal(first.indices, again.indices)
            assert first.scores.tobytes() == again.scores.tobytes()

    def test_large_vocab_top_values(
        self, selector: TopKSelector, sample_logits_large_vocab: np.ndarray
    ) -> None:
        logits = sample_logits_large_vocab
        result = selector.select(np.arange(logits.size), logits, 10)
        expected = np.sort(logits)[::-1][:10]
        assert np.array_equal(result.scores, expected)
        assert np.array_equal(logits[result.indices], result.scores)


class TestInputHandling:
    """Input validation, conversion and non-mutation."""

    def test_inputs_not_mutated(self, selector: TopKSelector) -> None:
        indices = np.array([4, 3, 2, 1, 0])
        scores = np.array([0.5, 0.1, 0.9, 0.3, 0.7])
        indices_before, scores_before = indices.copy(), scores.copy()
        selector.select(indices, scores, 3)
        assert np.array_equal(indices, indices_before)
        assert np.array_equal(scores, scores_before)

    def test_output_does_not_alias_input(self, selector: TopKSelector) -> None:
        indices = np.array([0, 1, 2])
        scores = np.array([0.3, 0.2, 0.1])
        result = selector.select(indices, scores, 3)
        assert not np.shares_memory(result.indices, indices)
        assert not np.shares_memory(result.scores, scores)

    def test_length_mismatch_raises(self, selector: TopKSelector) -> None:
        with pytest.raises(CandidateMismatchError, match="mismatch"):
            selector.select([0, 1, 2], [0.1, 0.2], 1)

    def test_length_mismatch_is_value_error(self, selector: TopKSelector) -> None:
        with pytest.raises(ValueError):
            selector.select([0], [], 1)

    def test_two_dimensional_raises(self, selector: TopKSelector) -> None:
        with pytest.raises(CandidateMismatchError, match="1-D"):
            selector.select(np.zeros((2, 2), dtype=int), np.zeros((2, 2)), 1)

    def test_float_indices_raise(self, selector: TopKSelector) -> None:
        with pytest.raises(CandidateMismatchError, match="integers"):
            selector.select([0.0, 1.0], [0.1, 0.2], 1)

    def test_negative_k_raises(self, selector: TopKSelector) -> None:
        with pytest.raises(InvalidTopKError):
            selector.select([0, 1], [0.1, 0.2], -1)

    def test_integer_scores_promoted(self, selector: TopKSelector) -> None:
        result = selector.select([0, 1, 2], [1, 3, 2], 2)
        assert result.scores.dtype == np.float64
        assert result.to_lists() == ([1, 2], [3.0, 2.0])

    def test_float32_dtype_preserved(self, selector: TopKSelector) -> None:
        result = selector.select(
            np.array([0, 1], dtype=np.int32), np.array([0.5, 1.5], dtype=np.float32), 1
        )
        assert result.scores.dtype == np.float32
        assert result.indices.dtype == np.int32

    def test_numpy_integer_k(self, selector: TopKSelector) -> None:
        result = selector.select([0, 1, 2], [0.1, 0.3, 0.2], np.int64(2))
        assert result.indices.tolist() == [1, 2]

    def test_returns_candidate_set(self, selector: TopKSelector) -> None:
        result = selector.select([0], [1.0], 1)
        assert isinstance(result, CandidateSet)


class TestBackendResolution:
    """Tests for 'auto' backend resolution."""

    def test_auto_uses_sort_when_keeping_everything(self) -> None:
        assert TopKSelector().resolve_backend(n=10, k=10) == "sort"

    def test_auto_uses_partition_when_shrinking(self) -> None:
        assert TopKSelector().resolve_backend(n=10, k=3) == "partition"

    def test_explicit_backend_always_used(self) -> None:
        selector = TopKSelector("heap")
        assert selector.resolve_backend(n=10, k=10) == "heap"
        assert selector.backend_name == "heap"

    def test_unknown_backend_raises(self) -> None:
        with pytest.raises(KeyError, match="Unknown selection backend"):
            TopKSelector("bogus")


class TestValidateTopK:
    """Tests for validate_top_k."""

    @pytest.mark.parametrize("k", [0, 1, 50, np.int32(3)])
    def test_accepts_non_negative_integers(self, k: int) -> None:
        assert validate_top_k(k) == int(k)

    @pytest.mark.parametrize("k", [-1, 1.5, "3", None, True])
    def test_rejects_invalid(self, k: object) -> None:
        with pytest.raises(InvalidTopKError):
            validate_top_k(k)  # type: ignore[arg-type]
