"""
Immutable data types for point chain clustering.

All types are frozen dataclasses to enforce immutability.
Pipeline stages return new instances rather than mutating.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple
import math


@dataclass(frozen=True)
class Point:
    """
    2D point loaded from a data source.

    A point's identity is its position in the input sequence; the
    coordinates themselves are never modified after loading.
    """
    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        """Compute Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def as_tuple(self) -> Tuple[float, float]:
        """Return coordinates as a tuple."""
        return (self.x, self.y)


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Unordered connection between two point indices.

    Two edges are equal when they join the same pair of points, whatever
    their orientation. The orientation is still kept: during chain
    building `second` is the tail the chain grows from.
    """
    first: int
    second: int

    def __post_init__(self) -> None:
        if self.first == self.second:
            raise ValueError(f"Edge endpoints must differ, got ({self.first}, {self.second})")

    @property
    def key(self) -> Tuple[int, int]:
        """Canonical (smaller, larger) index pair."""
        if self.first < self.second:
            return (self.first, self.second)
        return (self.second, self.first)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def length(self, points: Sequence[Point]) -> float:
        """Euclidean distance between the two endpoints."""
        return points[self.first].distance_to(points[self.second])

    def as_tuple(self) -> Tuple[int, int]:
        """Return indices in construction order."""
        return (self.first, self.second)


@dataclass(frozen=True)
class RenderStyle:
    """
    Drawing parameters for the SVG renderer.

    Points are mapped to the canvas with p * scale + (shift_x, shift_y).
    The defaults fit the first two Fisher Iris dimensions into a
    600x400 canvas.
    """
    scale: float = 150.0
    shift_x: float = -600.0
    shift_y: float = -290.0
    width: int = 600
    height: int = 400
    point_color: str = "#0000FF"
    point_size: float = 6.0
    line_color: str = "#FF0000"
    line_width: float = 2.0

    def to_point_attrs(self) -> dict:
        """SVG attributes for point markers."""
        return {"fill": self.point_color}

    def to_line_attrs(self) -> dict:
        """SVG attributes for edge lines."""
        return {
            "stroke-width": str(self.line_width),
            "stroke": self.line_color,
        }


@dataclass(frozen=True)
class ClusterStats:
    """Statistics about the clustering operation."""
    total_points: int
    chain_edges: int
    kept_edges: int
    removed_edges: int
    total_clusters: int
    max_cluster_size: int
    min_cluster_size: int
    longest_removed_length: float
    total_kept_length: float


@dataclass(frozen=True)
class ClusterResult:
    """
    Complete result of a clustering run.

    Holds the input points, the spanning edges, the edges that survived
    pruning, the edges that were cut, and the resulting clusters.
    """
    points: Tuple[Point, ...]
    strategy: str
    chain: Tuple[Edge, ...]
    edges: Tuple[Edge, ...]
    removed: Tuple[Edge, ...]
    clusters: Tuple[Tuple[int, ...], ...]
    labels: Tuple[int, ...]
    stats: ClusterStats

    @staticmethod
    def create(
        points: Sequence[Point],
        strategy: str,
        chain: list[Edge],
        edges: list[Edge],
        clusters: list[Tuple[int, ...]],
    ) -> "ClusterResult":
        """
        Factory method to create a ClusterResult with computed stats.

        Args:
            points: Input points
            strategy: Name of the spanning strategy that produced the chain
            chain: Spanning edges before pruning
            edges: Edges left after pruning
            clusters: Connected components, ordered by smallest member

        Returns:
            New ClusterResult with computed statistics
        """
        kept = set(edges)
        removed = [edge for edge in chain if edge not in kept]

        labels = [0] * len(points)
        for label, members in enumerate(clusters):
            for index in members:
                labels[index] = label

        sizes = [len(members) for members in clusters]
        removed_lengths = [edge.length(points) for edge in removed]

        stats = ClusterStats(
            total_points=len(points),
            chain_edges=len(chain),
            kept_edges=len(edges),
            removed_edges=len(removed),
            total_clusters=len(clusters),
            max_cluster_size=max(sizes) if sizes else 0,
            min_cluster_size=min(sizes) if sizes else 0,
            longest_removed_length=max(removed_lengths) if removed_lengths else 0.0,
            total_kept_length=sum(edge.length(points) for edge in edges),
        )

        return ClusterResult(
            points=tuple(points),
            strategy=strategy,
            chain=tuple(chain),
            edges=tuple(edges),
            removed=tuple(removed),
            clusters=tuple(clusters),
            labels=tuple(labels),
            stats=stats,
        )

    def cluster_edges(self, cluster_index: int) -> Tuple[Edge, ...]:
        """Edges whose endpoints belong to the given cluster."""
        return tuple(
            edge for edge in self.edges
            if self.labels[edge.first] == cluster_index
        )
