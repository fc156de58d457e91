"""
Vector index schemas.

Lightweight result types returned by the vector index.

Dependencies: None
System role: Type definitions for vector operations
"""

from typing import NamedTuple


class SearchHit(NamedTuple):
    """Single nearest-neighbour match: index position and squared L2 distance."""

    position: int
    distance: float
