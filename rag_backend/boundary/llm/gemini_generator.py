"""
Gemini text generation client.

Thin async wrapper over ChatGoogleGenerativeAI that returns plain text and
maps provider failures onto GenerationError.

Dependencies: langchain_google_genai, langchain_core, rag_backend.core.exceptions
System role: Answer generation adapter
"""

import logging
from typing import Any

from langchain_core.messages import HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from pydantic import SecretStr

from rag_backend.core.exceptions import GenerationError

logger = logging.getLogger(__name__)


def message_text(content: Any) -> str:
    """Flatten LangChain message content (str or list of parts) to text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    return str(content)


class GeminiGenerator:
    """Gemini chat model used to answer prompts."""

    def __init__(
        self,
        api_key: SecretStr | str | None = None,
        model: str = "gemini-2.0-flash",
        temperature: float = 0.2,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize the Gemini chat client.

        Args:
            api_key: Google AI Studio key (falls back to GOOGLE_API_KEY env var)
            model: Gemini model ID
            temperature: Sampling temperature
            timeout: Request timeout in seconds
        """
        if isinstance(api_key, str):
            api_key = SecretStr(api_key)
        client_kwargs: dict[str, Any] = {"model": model, "temperature": temperature}
        if api_key is not None:
            client_kwargs["google_api_key"] = api_key
        if timeout is not None:
            client_kwargs["timeout"] = timeout

        self._model = model
        self._llm = ChatGoogleGenerativeAI(**client_kwargs)
        logger.info(f"{__name__}:__init__ - LLM initialised: {model} (temperature={temperature})")

    async def agenerate(self, prompt: str) -> str:
        """
        Generate an answer for a prompt.

        Args:
            prompt: Fully built prompt

        Returns:
            str: Model answer text

        Raises:
            GenerationError: If the provider call fails
        """
        try:
            response = await self._llm.ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            logger.error(f"{__name__}:agenerate - {type(e).__name__}: {e}")
            raise GenerationError(
                f"Generation provider failed: {e}", details={"model": self._model}
            ) from e

        answer = message_text(getattr(response, "content", response))
        logger.info(f"{__name__}:agenerate - Response received ({len(answer)} chars)")
        return answer
