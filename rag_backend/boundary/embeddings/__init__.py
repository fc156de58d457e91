"""
Embedding provider adapters.

Dependencies: langchain_google_genai, tenacity
System role: Text-to-vector collaborators for the Corpus
"""

from rag_backend.boundary.embeddings.gemini_embedder import Embedder, GeminiEmbedder

__all__ = ["Embedder", "GeminiEmbedder"]
