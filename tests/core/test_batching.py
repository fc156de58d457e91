"""
Test suite for vector batching helpers.

System role: Verification of vector marshalling into FAISS layout
"""

import numpy as np
import pytest

from rag_backend.boundary.vdb.batching import (
    compose_full_text,
    flatten_vectors,
    iter_batches,
    vector_width,
)
from rag_backend.core.exceptions import DimensionMismatchError, VectorStoreError


class TestIterBatches:
    """Test suite for iter_batches."""

    def test_should_split_into_bounded_slices_in_order(self) -> None:
        # Act
        batches = list(iter_batches(list(range(5)), 2))

        # Assert
        assert batches == [[0, 1], [2, 3], [4]]

    def test_empty_input_should_yield_nothing(self) -> None:
        assert list(iter_batches([], 64)) == []

    def test_non_positive_batch_size_should_raise(self) -> None:
        with pytest.raises(ValueError):
            list(iter_batches([1, 2], 0))


class TestVectorWidth:
    """Test suite for vector_width."""

    def test_should_return_length(self) -> None:
        assert vector_width([0.1, 0.2, 0.3]) == 3
        assert vector_width(np.zeros(4)) == 4

    def test_should_return_none_for_non_vectors(self) -> None:
        assert vector_width(None) is None
        assert vector_width(1.5) is None
        assert vector_width("abc") is None


class TestFlattenVectors:
    """Test suite for flatten_vectors."""

    def test_should_produce_contiguous_float32_matrix(self) -> None:
        # Act
        matrix = flatten_vectors([[1, 2], [3, 4]], 2)

        # Assert
        assert matrix.dtype == np.float32
        assert matrix.shape == (2, 2)
        assert matrix.flags["C_CONTIGUOUS"]
        np.testing.assert_array_equal(matrix, np.array([[1, 2], [3, 4]], dtype=np.float32))

    def test_empty_chunk_should_produce_empty_matrix(self) -> None:
        assert flatten_vectors([], 3).shape == (0, 3)

    def test_should_accept_numpy_matrix(self) -> None:
        # Arrange
        vectors = np.array([[1.0, 0.0], [0.0, 1.0]], dtype=np.float64)

        # Act
        matrix = flatten_vectors(vectors, 2)

        # Assert
        assert matrix.dtype == np.float32
        np.testing.assert_array_equal(matrix, vectors.astype(np.float32))
        assert flatten_vectors(np.empty((0, 2)), 2).shape == (0, 2)

    def test_width_mismatch_should_raise(self) -> None:
        with pytest.raises(DimensionMismatchError) as exc_info:
            flatten_vectors([[1.0, 2.0], [1.0]], 2)
        assert exc_info.value.actual == 1

    def test_non_numeric_values_should_raise(self) -> None:
        with pytest.raises(VectorStoreError):
            flatten_vectors([["x", "y"]], 2)

    def test_infinite_values_should_raise(self) -> None:
        with pytest.raises(VectorStoreError):
            flatten_vectors([[float("inf"), 0.0]], 2)


class TestComposeFullText:
    """Test suite for compose_full_text."""

    def test_should_prefix_title(self) -> None:
        assert compose_full_text("Headline", "Body text") == "Headline. Body text"

    def test_should_return_text_without_title(self) -> None:
        assert compose_full_text(None, "Body text") == "Body text"
        assert compose_full_text("", "Body text") == "Body text"
