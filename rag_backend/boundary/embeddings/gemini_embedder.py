"""
Gemini embedding provider.

Wraps GoogleGenerativeAIEmbeddings behind the plain `texts -> vectors`
callable the Corpus expects. Transient provider failures are retried with
exponential backoff; exhausted retries surface as EmbeddingProviderError.

Dependencies: langchain_google_genai, tenacity, rag_backend.core.exceptions
System role: Embedding generation adapter
"""

import logging
from collections.abc import Sequence
from typing import Protocol

from langchain_google_genai import GoogleGenerativeAIEmbeddings
from pydantic import SecretStr
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)
from tenacity.wait import wait_base

from rag_backend.core.exceptions import EmbeddingProviderError

logger = logging.getLogger(__name__)


class Embedder(Protocol):
    """Anything that maps a batch of texts to a batch of vectors."""

    def __call__(self, texts: list[str]) -> Sequence[Sequence[float]]: ...


class GeminiEmbedder:
    """
    Google Gemini embedder with bounded retries.

    Instances are callable and safe to share between request handlers.
    """

    provider_name = "gemini"

    def __init__(
        self,
        api_key: SecretStr | str | None = None,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int | None = None,
        max_attempts: int = 3,
        wait: wait_base | None = None,
    ) -> None:
        """
        Initialize Gemini embeddings client.

        Args:
            api_key: Google AI Studio key (falls back to GOOGLE_API_KEY env var)
            model: Google embedding model ID
            output_dimensionality: Requested vector width (model default if None)
            max_attempts: Attempts per batch before giving up
            wait: Tenacity wait strategy between attempts
        """
        if isinstance(api_key, str):
            api_key = SecretStr(api_key)
        client_kwargs = {"model": model}
        if api_key is not None:
            client_kwargs["google_api_key"] = api_key

        self._model = model
        self._output_dimensionality = output_dimensionality
        self._max_attempts = max_attempts
        self._wait = wait or wait_exponential_jitter(initial=0.5, max=8, jitter=0.5)
        self._embeddings = GoogleGenerativeAIEmbeddings(**client_kwargs)
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )

    def __call__(self, texts: list[str]) -> list[list[float]]:
        """
        Embed a batch of texts.

        Args:
            texts: Texts to embed

        Returns:
            list[list[float]]: One vector per input text, in input order

        Raises:
            EmbeddingProviderError: If the provider keeps failing
        """
        if not texts:
            return []

        retrying = Retrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=self._wait,
            retry=retry_if_exception_type(Exception),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:embed - Retry {retry_state.attempt_number}/{self._max_attempts} "
                f"after {type(retry_state.outcome.exception()).__name__}"
            ),
            reraise=True,
        )
        try:
            return retrying(self._embed_batch, list(texts))
        except Exception as e:
            logger.error(f"{__name__}:embed - Embedding error: {type(e).__name__}: {e}")
            raise EmbeddingProviderError(
                f"Embedding provider failed: {e}",
                provider=self.provider_name,
                details={"model": self._model, "batch_size": len(texts)},
            ) from e

    def _embed_batch(self, texts: list[str]) -> list[list[float]]:
        if self._output_dimensionality:
            return self._embeddings.embed_documents(
                texts, output_dimensionality=self._output_dimensionality
            )
        return self._embeddings.embed_documents(texts)
