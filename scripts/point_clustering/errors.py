"""
Error types for point chain clustering.

Every failure is an input violation, so there is nothing to retry:
callers should report the error and skip rendering.
"""


class ClusteringError(ValueError):
    """Base class for clustering input errors."""


class InsufficientPointsError(ClusteringError):
    """Raised when a spanning structure is requested for fewer than 2 points."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"At least 2 points are required, got {count}")


class InvalidClusterCountError(ClusteringError):
    """Raised when k is outside [1, edge_count + 1]."""

    def __init__(self, k: object, edge_count: int):
        self.k = k
        self.edge_count = edge_count
        super().__init__(
            f"Cluster count must be an integer in [1, {edge_count + 1}], got {k!r}"
        )


class UnknownStrategyError(ClusteringError):
    """Raised when a spanning strategy name is not registered."""

    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(f"Unknown strategy {name!r} (expected one of: {', '.join(known)})")


class PointParseError(ClusteringError):
    """Raised when point records cannot be parsed."""

    def __init__(self, message: str, line_number: int):
        self.line_number = line_number
        super().__init__(f"Line {line_number}: {message}")


class NoCandidatePointError(ClusteringError):
    """Raised when no point can be measured from the chain tail, e.g. NaN coordinates."""

    def __init__(self, origin: int):
        self.origin = origin
        super().__init__(f"No candidate points to connect to point {origin}")
