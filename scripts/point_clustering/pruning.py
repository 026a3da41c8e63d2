"""
Longest-edge pruning.

Cutting the k-1 longest edges of a spanning tree leaves a forest of
exactly k trees, which approximates single-linkage clustering.
"""

import heapq
import logging
from typing import Sequence

from .types import Point, Edge
from .errors import InvalidClusterCountError

logger = logging.getLogger(__name__)


def edge_length(edge: Edge, points: Sequence[Point]) -> float:
    """Euclidean length of an edge."""
    return edge.length(points)


def select_longest(
    edges: Sequence[Edge],
    points: Sequence[Point],
    count: int,
) -> list[int]:
    """
    Select the positions of the `count` longest edges.

    Partial selection with a heap rather than a full sort. Among edges of
    equal length the earlier one ranks as longer.

    Args:
        edges: Edge list
        points: Point set the edge indices refer to
        count: Number of edges to select, 0 <= count <= len(edges)

    Returns:
        Positions into `edges`, longest first
    """
    if count <= 0:
        return []

    lengths = [edge_length(edge, points) for edge in edges]
    return heapq.nsmallest(count, range(len(edges)), key=lambda i: (-lengths[i], i))


def prune_to_k_clusters(
    edges: Sequence[Edge],
    points: Sequence[Point],
    k: int,
) -> list[Edge]:
    """
    Remove the k-1 longest edges so the remaining forest has k components.

    Surviving edges keep their relative order. The input is not modified.

    Args:
        edges: Spanning edges, typically from build_chain
        points: Point set, used only to measure edge lengths
        k: Desired number of clusters, 1 <= k <= len(edges) + 1

    Returns:
        The len(edges) - (k - 1) remaining edges

    Raises:
        InvalidClusterCountError: If k is not an integer in range
    """
    if isinstance(k, bool) or not isinstance(k, int):
        raise InvalidClusterCountError(k, len(edges))
    if k < 1 or k > len(edges) + 1:
        raise InvalidClusterCountError(k, len(edges))

    if k == 1:
        return list(edges)

    dropped = set(select_longest(edges, points, k - 1))
    remaining = [edge for i, edge in enumerate(edges) if i not in dropped]

    logger.debug(
        "Pruned %d of %d edges for %d clusters", len(dropped), len(edges), k
    )
    return remaining
