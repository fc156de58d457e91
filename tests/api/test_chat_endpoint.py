"""
Test suite for chat API endpoint.

Tests POST /chat with FastAPI TestClient and a mocked ChatService.

System role: Verification of chat HTTP API endpoint
"""

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from rag_backend.api.deps import get_chat_service
from rag_backend.api.routers.chat import router
from rag_backend.application.services import ChatService
from rag_backend.core.exceptions import GenerationError, HistoryStoreError, ValidationError
from rag_backend.models.chat import ChatResponse, Source


@pytest.fixture
def mock_chat_service() -> AsyncMock:
    """Provide mock ChatService."""
    return AsyncMock(spec=ChatService)


@pytest.fixture
def app(mock_chat_service: AsyncMock) -> FastAPI:
    """Create FastAPI test application with chat router."""
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_chat_service] = lambda: mock_chat_service
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app)


class TestChatEndpointSuccessful:
    """Test suite for successful chat requests."""

    def test_chat_should_return_answer_and_sources(self, client: TestClient, mock_chat_service: AsyncMock) -> None:
        # Arrange
        mock_chat_service.process_chat.return_value = ChatResponse(
            session_id="s1",
            query="What happened?",
            response="Leaders agreed on a plan.",
            sources=[Source(text="Leaders agreed.", title="Summit", distance=0.12)],
        )

        # Act
        response = client.post("/chat", json={"session_id": "s1", "query": "What happened?"})

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["sessionId"] == "s1"
        assert "session_id" not in body
        assert body["response"] == "Leaders agreed on a plan."
        assert body["sources"][0]["title"] == "Summit"
        mock_chat_service.process_chat.assert_awaited_once_with(session_id="s1", query="What happened?")

    def test_chat_should_accept_camel_case_session_id(self, client: TestClient, mock_chat_service: AsyncMock) -> None:
        # Arrange
        mock_chat_service.process_chat.return_value = ChatResponse(session_id="s1", query="q", response="a")

        # Act
        client.post("/chat", json={"sessionId": "s1", "query": "q"})

        # Assert
        mock_chat_service.process_chat.assert_awaited_once_with(session_id="s1", query="q")


class TestChatEndpointErrors:
    """Test suite for chat error mapping."""

    def test_missing_fields_should_return_400(self, client: TestClient, mock_chat_service: AsyncMock) -> None:
        # Arrange
        mock_chat_service.process_chat.side_effect = ValidationError("Missing session_id or query", field="query")

        # Act
        response = client.post("/chat", json={"session_id": "s1"})

        # Assert
        assert response.status_code == 400

    def test_generation_error_should_return_502(self, client: TestClient, mock_chat_service: AsyncMock) -> None:
        mock_chat_service.process_chat.side_effect = GenerationError("quota exceeded")
        response = client.post("/chat", json={"session_id": "s1", "query": "q"})
        assert response.status_code == 502

    def test_history_error_should_return_500(self, client: TestClient, mock_chat_service: AsyncMock) -> None:
        mock_chat_service.process_chat.side_effect = HistoryStoreError("Failed to save message")
        response = client.post("/chat", json={"session_id": "s1", "query": "q"})
        assert response.status_code == 500

    def test_unexpected_error_should_return_generic_500(self, client: TestClient, mock_chat_service: AsyncMock) -> None:
        # Arrange
        mock_chat_service.process_chat.side_effect = RuntimeError("internal detail")

        # Act
        response = client.post("/chat", json={"session_id": "s1", "query": "q"})

        # Assert
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to generate answer"
