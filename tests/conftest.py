"""
Shared test fixtures and configuration for entire test suite.

Provides: Stub embedders, corpus instances, provider/store mocks
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import threading
from collections.abc import Mapping, Sequence
from unittest.mock import AsyncMock

import pytest

from rag_backend.core.corpus import Corpus


class StubEmbedder:
    """
    Deterministic embedder backed by a text -> vector mapping.

    Unknown texts map to `default` (or raise KeyError when no default is set).
    Every call is recorded so tests can assert what was embedded.
    """

    def __init__(
        self,
        mapping: Mapping[str, Sequence[float]] | None = None,
        default: Sequence[float] | None = None,
    ) -> None:
        self.mapping = dict(mapping or {})
        self.default = default
        self.calls: list[list[str]] = []
        self._lock = threading.Lock()

    def __call__(self, texts: list[str]) -> list[list[float]]:
        with self._lock:
            self.calls.append(list(texts))
        vectors = []
        for text in texts:
            if text in self.mapping:
                vectors.append(list(self.mapping[text]))
            elif self.default is not None:
                vectors.append(list(self.default))
            else:
                raise KeyError(text)
        return vectors


class FixedWidthEmbedder:
    """Embedder returning a constant vector of the given width for every text."""

    def __init__(self, width: int, value: float = 1.0) -> None:
        self.width = width
        self.value = value

    def __call__(self, texts: list[str]) -> list[list[float]]:
        return [[self.value] * self.width for _ in texts]


@pytest.fixture
def animal_embedder() -> StubEmbedder:
    """Provide the cat/dog/fish embedder used across corpus tests."""
    return StubEmbedder(
        {
            "cat": [1.0, 0.0],
            "dog": [0.0, 1.0],
            "fish": [0.0, 1.0],
            "kitten?": [0.9, 0.1],
            "puppy?": [0.0, 1.0],
        }
    )


@pytest.fixture
def corpus() -> Corpus:
    """Provide an empty corpus with a small append chunk size."""
    return Corpus(batch_size=2)


@pytest.fixture
def mock_generator() -> AsyncMock:
    """
    Provide mock answer generator.

    Returns:
        AsyncMock: Generator whose agenerate() returns a fixed answer
    """
    generator = AsyncMock()
    generator.agenerate = AsyncMock(return_value="Generated answer.")
    return generator


@pytest.fixture
def mock_history_store() -> AsyncMock:
    """
    Provide mock session history store.

    Returns:
        AsyncMock: Store with append/list_messages/clear/ping mocked
    """
    store = AsyncMock()
    store.append = AsyncMock(return_value=1)
    store.list_messages = AsyncMock(return_value=[])
    store.clear = AsyncMock(return_value=True)
    store.ping = AsyncMock(return_value=True)
    return store


@pytest.fixture
def make_stub_embedder():
    """Provide the StubEmbedder factory."""
    return StubEmbedder


@pytest.fixture
def make_fixed_embedder():
    """Provide the FixedWidthEmbedder factory."""
    return FixedWidthEmbedder
