"""
SVG output generation for clustered points.

Draws every point and the edges left after pruning, one group per
cluster, after mapping coordinates onto the canvas.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from .types import Point, Edge, ClusterResult, RenderStyle


SVG_NS = "http://www.w3.org/2000/svg"


def scale_and_shift(point: Point, style: RenderStyle) -> Point:
    """Map a data point onto canvas coordinates."""
    return Point(
        point.x * style.scale + style.shift_x,
        point.y * style.scale + style.shift_y,
    )


def create_svg_root(style: RenderStyle) -> ET.Element:
    """
    Create an SVG root element sized to the canvas.

    Args:
        style: Render style holding canvas width and height

    Returns:
        SVG root Element
    """
    ET.register_namespace("", SVG_NS)

    root = ET.Element("svg")
    root.set("xmlns", SVG_NS)
    root.set("width", str(style.width))
    root.set("height", str(style.height))
    root.set("viewBox", f"0 0 {style.width} {style.height}")

    return root


def create_point_element(point: Point, style: RenderStyle) -> ET.Element:
    """
    Create a circle marker for a point.

    Args:
        point: Point in data coordinates
        style: Render style

    Returns:
        Circle Element
    """
    canvas = scale_and_shift(point, style)
    elem = ET.Element("circle")
    elem.set("cx", f"{canvas.x:.3f}")
    elem.set("cy", f"{canvas.y:.3f}")
    elem.set("r", f"{style.point_size / 2:.3f}")
    for key, value in style.to_point_attrs().items():
        elem.set(key, value)

    return elem


def create_edge_element(
    edge: Edge,
    points: tuple[Point, ...],
    style: RenderStyle,
) -> ET.Element:
    """
    Create a line element for an edge.

    Args:
        edge: Edge to draw
        points: Point set the edge indices refer to
        style: Render style

    Returns:
        Line Element
    """
    start = scale_and_shift(points[edge.first], style)
    end = scale_and_shift(points[edge.second], style)

    elem = ET.Element("line")
    elem.set("x1", f"{start.x:.3f}")
    elem.set("y1", f"{start.y:.3f}")
    elem.set("x2", f"{end.x:.3f}")
    elem.set("y2", f"{end.y:.3f}")
    elem.set("stroke-linecap", "round")
    for key, value in style.to_line_attrs().items():
        elem.set(key, value)

    return elem


def build_cluster_svg(result: ClusterResult, style: RenderStyle) -> ET.Element:
    """
    Build the SVG tree for a clustering result.

    Points go into a single "points" group drawn first; each cluster's
    edges get their own group. Pruned edges are not drawn.

    Args:
        result: Clustering result
        style: Render style

    Returns:
        SVG root Element
    """
    root = create_svg_root(style)

    point_group = ET.SubElement(root, "g")
    point_group.set("id", "points")
    for index, point in enumerate(result.points):
        elem = create_point_element(point, style)
        elem.set("id", f"point-{index}")
        point_group.append(elem)

    for cluster_index, members in enumerate(result.clusters):
        group = ET.SubElement(root, "g")
        group.set("id", f"cluster-{cluster_index}")
        title = ET.SubElement(group, "title")
        title.text = f"cluster {cluster_index}: {len(members)} points"

        for edge in result.cluster_edges(cluster_index):
            elem = create_edge_element(edge, result.points, style)
            elem.set("id", f"edge-{edge.key[0]}-{edge.key[1]}")
            group.append(elem)

    return root


def write_cluster_svg(
    output_path: Path,
    result: ClusterResult,
    style: RenderStyle,
) -> None:
    """
    Write a clustering result to an SVG file.

    Args:
        output_path: Path to write the SVG file
        result: Clustering result
        style: Render style
    """
    tree = ET.ElementTree(build_cluster_svg(result, style))
    ET.indent(tree, space="  ")

    with open(output_path, "wb") as f:
        tree.write(f, encoding="UTF-8", xml_declaration=True)


def print_cluster_stats(result: ClusterResult, label: str = "") -> None:
    """
    Print statistics about a clustering result.

    Args:
        result: ClusterResult to report on
        label: Optional label for the output
    """
    stats = result.stats
    prefix = f"{label}: " if label else ""

    print(f"{prefix}Strategy: {result.strategy}")
    print(f"{prefix}Input points: {stats.total_points}")
    print(f"{prefix}Spanning edges: {stats.chain_edges}")
    print(f"{prefix}Removed edges: {stats.removed_edges}")
    print(f"{prefix}Kept edges: {stats.kept_edges}")
    print(f"{prefix}Clusters: {stats.total_clusters}")
    print(f"{prefix}Largest cluster: {stats.max_cluster_size}")
    print(f"{prefix}Smallest cluster: {stats.min_cluster_size}")
    print(f"{prefix}Longest removed edge: {stats.longest_removed_length:.4f}")
    print(f"{prefix}Total kept length: {stats.total_kept_length:.4f}")
