"""
Point record parsing.

Reads whitespace separated pairs of real numbers, one point per pair,
such as the first two columns of the Fisher Iris data set.
"""

import math
from pathlib import Path
from typing import Optional, Tuple

from .types import Point
from .errors import PointParseError


def parse_value(token: str, line_number: int) -> float:
    """Parse a single coordinate token; nan and inf are rejected."""
    try:
        value = float(token)
    except ValueError:
        raise PointParseError(f"Invalid coordinate {token!r}", line_number) from None
    if not math.isfinite(value):
        raise PointParseError(f"Non-finite coordinate {token!r}", line_number)
    return value


def parse_points(text: str) -> list[Point]:
    """
    Parse point records from text.

    Values are consumed in pairs regardless of line breaks, so a point
    may span two lines. Blank lines and lines starting with '#' are
    skipped.

    Args:
        text: Record text

    Returns:
        Points in file order

    Raises:
        PointParseError: On an unparsable token or an unpaired final value
    """
    points: list[Point] = []
    pending: Optional[Tuple[float, int]] = None

    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        for token in stripped.split():
            value = parse_value(token, line_number)
            if pending is None:
                pending = (value, line_number)
            else:
                points.append(Point(pending[0], value))
                pending = None

    if pending is not None:
        raise PointParseError("Missing y coordinate for last point", pending[1])

    return points


def load_points(path: Path) -> list[Point]:
    """
    Load points from a text file.

    Args:
        path: Path to the record file

    Returns:
        Points in file order

    Raises:
        PointParseError: If the file is not valid UTF-8 or not valid records
    """
    data = Path(path).read_bytes()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        line_number = data.count(b"\n", 0, exc.start) + 1
        raise PointParseError("File is not valid UTF-8 text", line_number) from None
    return parse_points(text)
