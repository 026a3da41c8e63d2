"""
Point Chain Clustering Module

Links 2D points into a nearest-neighbour chain and cuts its longest
edges to split the point cloud into k clusters.
"""

from .types import Point, Edge, ClusterResult, ClusterStats, RenderStyle
from .errors import (
    ClusteringError,
    InsufficientPointsError,
    InvalidClusterCountError,
    UnknownStrategyError,
    PointParseError,
    NoCandidatePointError,
)
from .parsing import parse_points, load_points
from .chain import build_chain, build_minimum_spanning_tree
from .pruning import prune_to_k_clusters
from .clustering import UnionFind, find_clusters, label_points
from .pipeline import cluster_points, STRATEGIES
from .output import write_cluster_svg, print_cluster_stats

__all__ = [
    "Point",
    "Edge",
    "ClusterResult",
    "ClusterStats",
    "RenderStyle",
    "ClusteringError",
    "InsufficientPointsError",
    "InvalidClusterCountError",
    "UnknownStrategyError",
    "PointParseError",
    "NoCandidatePointError",
    "parse_points",
    "load_points",
    "build_chain",
    "build_minimum_spanning_tree",
    "prune_to_k_clusters",
    "UnionFind",
    "find_clusters",
    "label_points",
    "cluster_points",
    "STRATEGIES",
    "write_cluster_svg",
    "print_cluster_stats",
]
