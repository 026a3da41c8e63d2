"""
End-to-end clustering: spanning edges, pruning, components.
"""

import logging
from typing import Callable, Sequence

from .types import Point, Edge, ClusterResult
from .errors import UnknownStrategyError
from .chain import build_chain, build_minimum_spanning_tree
from .pruning import prune_to_k_clusters
from .clustering import find_clusters

logger = logging.getLogger(__name__)

STRATEGIES: dict[str, Callable[[Sequence[Point]], list[Edge]]] = {
    "chain": build_chain,
    "mst": build_minimum_spanning_tree,
}


def cluster_points(
    points: Sequence[Point],
    k: int = 2,
    strategy: str = "chain",
) -> ClusterResult:
    """
    Split a point set into k clusters.

    Builds spanning edges with the named strategy, cuts the k-1 longest
    and collects the connected components that remain.

    Args:
        points: Point set with at least 2 points
        k: Number of clusters, 1 <= k <= len(edges) + 1 where edges are
            the len(points) - 1 spanning edges
        strategy: "chain" (nearest-neighbour chain) or "mst"

    Returns:
        ClusterResult with edges, clusters and statistics

    Raises:
        UnknownStrategyError: If strategy is not registered
        InsufficientPointsError: If fewer than 2 points are given
        InvalidClusterCountError: If k is out of range
    """
    try:
        build = STRATEGIES[strategy]
    except KeyError:
        raise UnknownStrategyError(strategy, sorted(STRATEGIES)) from None

    chain = build(points)
    edges = prune_to_k_clusters(chain, points, k)
    clusters = find_clusters(len(points), edges)

    logger.info(
        "Clustered %d points into %d clusters (%s strategy)",
        len(points),
        len(clusters),
        strategy,
    )
    return ClusterResult.create(points, strategy, chain, edges, clusters)
