"""
Connected component detection using Union-Find.

Turns a (pruned) edge list into clusters of point indices.
"""

from typing import Iterable, Tuple
from collections import defaultdict

from .types import Edge


class UnionFind:
    """
    Disjoint sets of point indices, merged one edge at a time.

    Each set is a cluster. `find` uses path halving and `union` merges by
    rank, so a full pass over the edges stays close to linear.
    """

    def __init__(self, n: int):
        """
        Start with every point index 0..n-1 in a cluster of its own.

        Args:
            n: Number of points
        """
        self._parent = list(range(n))
        self._rank = [0] * n
        self._count = n

    def find(self, point: int) -> int:
        """
        Return the representative index of the cluster holding a point.

        Args:
            point: Point index

        Returns:
            Representative point index of its cluster
        """
        while self._parent[point] != point:
            self._parent[point] = self._parent[self._parent[point]]
            point = self._parent[point]
        return point

    def union(self, first: int, second: int) -> bool:
        """
        Merge the clusters of the two endpoints of an edge.

        Args:
            first: One endpoint index
            second: The other endpoint index

        Returns:
            True if two clusters were merged, False if the edge closes a cycle
        """
        root_a = self.find(first)
        root_b = self.find(second)

        if root_a == root_b:
            return False

        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1

        self._count -= 1
        return True

    @property
    def component_count(self) -> int:
        """Number of clusters."""
        return self._count

    def get_components(self) -> dict[int, list[int]]:
        """
        Group point indices by cluster.

        Returns:
            Dict mapping representative index -> ascending member indices
        """
        components: dict[int, list[int]] = defaultdict(list)
        for point in range(len(self._parent)):
            components[self.find(point)].append(point)
        return dict(components)


def union_edges(point_count: int, edges: Iterable[Edge]) -> UnionFind:
    """Build a UnionFind over point indices joined by the given edges."""
    uf = UnionFind(point_count)
    for edge in edges:
        uf.union(edge.first, edge.second)
    return uf


def find_clusters(point_count: int, edges: Iterable[Edge]) -> list[Tuple[int, ...]]:
    """
    Find connected components among points.

    Points touched by no edge form single-point clusters.

    Args:
        point_count: Number of points (indices 0..point_count-1)
        edges: Edges joining point indices

    Returns:
        Clusters as ascending index tuples, ordered by smallest member
    """
    components = union_edges(point_count, edges).get_components()
    return sorted((tuple(members) for members in components.values()), key=lambda c: c[0])


def label_points(point_count: int, edges: Iterable[Edge]) -> Tuple[int, ...]:
    """
    Assign a cluster label to every point.

    Labels follow the cluster order of find_clusters.
    """
    labels = [0] * point_count
    for label, members in enumerate(find_clusters(point_count, edges)):
        for index in members:
            labels[index] = label
    return tuple(labels)
