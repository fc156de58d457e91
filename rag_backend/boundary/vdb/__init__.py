"""
Vector database boundary layer.

Provides the in-memory FAISS index used by the Corpus.
- VectorIndex: exact squared-L2 index with chunked, all-or-nothing appends

Dependencies: faiss-cpu, numpy
System role: Vector storage and nearest neighbour search
"""

from rag_backend.boundary.vdb.vector_index import VectorIndex
from rag_backend.boundary.vdb.vector_schemas import SearchHit

__all__ = [
    "SearchHit",
    "VectorIndex",
]
