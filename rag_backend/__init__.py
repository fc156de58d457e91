"""
RAG chat backend.

Retrieval-augmented chat service: an in-memory document corpus with an
exact FAISS index, Gemini embeddings and generation, and Redis-backed
session history behind a FastAPI HTTP API.
"""

__version__ = "0.1.0"
