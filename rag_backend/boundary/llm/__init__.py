"""
Text generation provider adapters.

Dependencies: langchain_google_genai
System role: Prompt-to-answer collaborator
"""

from rag_backend.boundary.llm.gemini_generator import GeminiGenerator

__all__ = ["GeminiGenerator"]
