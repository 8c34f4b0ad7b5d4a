"""
Geometry Utilities

Spatial helpers for the placement engine, all in room percentage space:
- Anchor footprint to bounding box conversion
- Padded collision detection
- Room boundary checks
- Shapely-based overlap, coverage and floor outline calculations
"""

from typing import Iterable, List, Tuple

from shapely.geometry import Polygon, box
from shapely.ops import unary_union

from staging_planner.models.room import BoundingBox, Point, RoomShape, Size


# Rooms are normalised to a 100 x 100 percentage square
ROOM_EXTENT = 100.0

# Default gap (percent) that must separate two placements
DEFAULT_PADDING = 2.0

# Inner corner of an L-shaped floor, as a fraction of width/depth
L_SHAPE_NOTCH = 0.6


def bbox_to_polygon(bbox: BoundingBox) -> Polygon:
    """
    Convert a BoundingBox to a Shapely Polygon.

    Example:
        >>> poly = bbox_to_polygon(BoundingBox(min_x=10, max_x=30, min_y=5, max_y=15))
        >>> poly.bounds
        (10.0, 5.0, 30.0, 15.0)
    """
    return box(bbox.min_x, bbox.min_y, bbox.max_x, bbox.max_y)


def footprint_box(center: Point, size: Size) -> BoundingBox:
    """Bounding box of a footprint of ``size`` centered on ``center``."""
    half_width = size.width / 2
    half_height = size.height / 2
    return BoundingBox(
        min_x=center.x - half_width,
        max_x=center.x + half_width,
        min_y=center.y - half_height,
        max_y=center.y + half_height,
    )


def check_collision(
    box_a: BoundingBox,
    box_b: BoundingBox,
    padding: float = DEFAULT_PADDING
) -> bool:
    """
    Check if two boxes collide once a padding gap is required between them.

    Boxes collide unless one lies entirely left, right, above or below the
    other by more than ``padding``. Touching boxes always collide.

    Args:
        box_a: First bounding box
        box_b: Second bounding box
        padding: Required clearance in room percent (default 2)

    Returns:
        True if the boxes collide, False otherwise

    Example:
        >>> a = BoundingBox(min_x=0, max_x=10, min_y=0, max_y=10)
        >>> b = BoundingBox(min_x=11, max_x=20, min_y=0, max_y=10)
        >>> check_collision(a, b)
        True
        >>> check_collision(a, b, padding=0)
        False
    """
    return not (
        box_a.max_x + padding < box_b.min_x or
        box_a.min_x - padding > box_b.max_x or
        box_a.max_y + padding < box_b.min_y or
        box_a.min_y - padding > box_b.max_y
    )


def is_within_room(bbox: BoundingBox) -> bool:
    """
    Check if a box lies inside the [0, 100] room square.

    Returns:
        True if the box is fully within room bounds (edges included)
    """
    return (
        bbox.min_x >= 0 and
        bbox.min_y >= 0 and
        bbox.max_x <= ROOM_EXTENT and
        bbox.max_y <= ROOM_EXTENT
    )


def calculate_overlap_area(box_a: BoundingBox, box_b: BoundingBox) -> float:
    """
    Calculate the overlapping area between two boxes.

    Returns:
        Overlap area in square percent. Returns 0 if the boxes are apart.
    """
    intersection = bbox_to_polygon(box_a).intersection(bbox_to_polygon(box_b))
    return intersection.area


def calculate_coverage(boxes: Iterable[BoundingBox]) -> float:
    """
    Calculate what percentage of the room square is covered by the boxes.

    Overlapping boxes are counted once; parts outside the room are ignored.

    Returns:
        Percentage (0-100) of the room covered
    """
    room = box(0, 0, ROOM_EXTENT, ROOM_EXTENT)
    polygons = [bbox_to_polygon(b) for b in boxes]
    if not polygons:
        return 0.0

    covered = unary_union(polygons).intersection(room)
    return (covered.area / room.area) * 100


def floor_polygon(shape: str, width: float, depth: float) -> List[Tuple[float, float]]:
    """
    Build the floor outline for a room.

    Rectangular and square rooms give their four corners. L-shaped rooms
    give a six-point outline with the inner corner at 60% of width and
    depth. Anything else falls back to the rectangle.

    Args:
        shape: Room shape label (e.g. "rectangular", "L-shaped")
        width: Room width
        depth: Room depth

    Returns:
        Outline vertices in order, starting at the origin
    """
    if shape == RoomShape.L_SHAPED.value:
        notch_x = width * L_SHAPE_NOTCH
        notch_y = depth * L_SHAPE_NOTCH
        return [
            (0.0, 0.0),
            (width, 0.0),
            (width, notch_y),
            (notch_x, notch_y),
            (notch_x, depth),
            (0.0, depth),
        ]

    return [
        (0.0, 0.0),
        (width, 0.0),
        (width, depth),
        (0.0, depth),
    ]


def polygon_area(points: List[Tuple[float, float]]) -> float:
    """Area enclosed by an outline; degenerate outlines have zero area."""
    if len(points) < 3:
        return 0.0
    return Polygon(points).area
