"""
Spanning edge construction over a point set.

The default strategy grows a nearest-neighbour chain from the globally
closest pair of points. It is a greedy heuristic, not a minimum spanning
tree; `build_minimum_spanning_tree` is offered as a separately named
strategy and is never used in its place.
"""

import bisect
import logging
import math
from itertools import combinations
from typing import Sequence

from .types import Point, Edge
from .errors import InsufficientPointsError, NoCandidatePointError
from .clustering import UnionFind

logger = logging.getLogger(__name__)


def _require_points(points: Sequence[Point]) -> None:
    if len(points) < 2:
        raise InsufficientPointsError(len(points))


def closest_pair(points: Sequence[Point]) -> Edge:
    """
    Find the pair of distinct points with the smallest Euclidean distance.

    All ordered pairs are scanned with i, then j ascending; only a strictly
    smaller distance replaces the current best, so ties resolve to the
    first pair found.

    Args:
        points: Point set with at least 2 points

    Returns:
        Edge (i, j) joining the closest pair

    Raises:
        InsufficientPointsError: If fewer than 2 points are given
    """
    _require_points(points)

    best = (0, 1)
    min_distance = math.inf
    for i, first in enumerate(points):
        for j, second in enumerate(points):
            if i == j:
                continue
            distance = first.distance_to(second)
            if distance < min_distance:
                best = (i, j)
                min_distance = distance

    return Edge(*best)


def remove_from_isolated(isolated: list[int], index: int) -> None:
    """
    Remove an index from the ascending isolated list.

    Uses binary search; an index that is not present is ignored.
    """
    pos = bisect.bisect_left(isolated, index)
    if pos == len(isolated) or isolated[pos] != index:
        return
    del isolated[pos]


def find_closest_point(
    points: Sequence[Point],
    candidates: Sequence[int],
    origin: int,
) -> int:
    """
    Find the candidate index closest to the origin point.

    Candidates are scanned in the order given (ascending for the isolated
    list), and only a strictly smaller distance replaces the current best.

    Args:
        points: Full point set
        candidates: Indices to search, must not be empty
        origin: Index of the point to measure from (skipped if present)

    Returns:
        Index of the closest candidate

    Raises:
        NoCandidatePointError: If no candidate has a finite distance
    """
    closest = -1
    min_distance = math.inf
    for candidate in candidates:
        if candidate == origin:
            continue
        distance = points[origin].distance_to(points[candidate])
        if distance < min_distance:
            min_distance = distance
            closest = candidate

    if closest < 0:
        raise NoCandidatePointError(origin)
    return closest


def build_chain(points: Sequence[Point]) -> list[Edge]:
    """
    Build a connected chain of N-1 edges by nearest-neighbour extension.

    Starts from the globally closest pair, then repeatedly connects the
    tail of the last edge to its nearest point not yet in the chain.

    Coincident points are allowed. They produce zero-length edges and are
    reported as a warning; tie-breaking is unaffected.

    Args:
        points: Point set with at least 2 points

    Returns:
        Edges in construction order; each edge's `second` is the tail
        the next edge starts from

    Raises:
        InsufficientPointsError: If fewer than 2 points are given
    """
    _require_points(points)

    isolated = list(range(len(points)))
    first_edge = closest_pair(points)
    edges = [first_edge]
    remove_from_isolated(isolated, first_edge.first)
    remove_from_isolated(isolated, first_edge.second)
    logger.debug("Closest pair %s", first_edge.as_tuple())

    while isolated:
        tail = edges[-1].second
        closest = find_closest_point(points, isolated, tail)
        remove_from_isolated(isolated, closest)
        edges.append(Edge(tail, closest))

    coincident = sum(1 for edge in edges if edge.length(points) == 0.0)
    if coincident:
        logger.warning(
            "Degenerate distance: %d chain edge(s) join coincident points", coincident
        )

    logger.debug("Built chain of %d edges over %d points", len(edges), len(points))
    return edges


def build_minimum_spanning_tree(points: Sequence[Point]) -> list[Edge]:
    """
    Build a minimum spanning tree with Kruskal's algorithm.

    Candidate pairs are ordered by (length, i, j) so equal lengths resolve
    deterministically.

    Args:
        points: Point set with at least 2 points

    Returns:
        N-1 edges in the order Kruskal accepted them

    Raises:
        InsufficientPointsError: If fewer than 2 points are given
    """
    _require_points(points)

    candidates = sorted(
        (points[i].distance_to(points[j]), i, j)
        for i, j in combinations(range(len(points)), 2)
    )

    uf = UnionFind(len(points))
    edges: list[Edge] = []
    for _, i, j in candidates:
        if uf.union(i, j):
            edges.append(Edge(i, j))
            if len(edges) == len(points) - 1:
                break

    logger.debug("Built minimum spanning tree of %d edges", len(edges))
    return edges
