"""
Layout Constraints

Checks an already-placed layout (e.g. a stored manifest) for overlapping
placements and footprints that leave the room.
"""

from typing import List, Sequence, Tuple

from staging_planner.core.geometry import (
    DEFAULT_PADDING,
    calculate_coverage,
    calculate_overlap_area,
    check_collision,
    is_within_room,
)
from staging_planner.models.room import LayoutAudit, PlacementResult


def find_collisions(
    placements: Sequence[PlacementResult],
    padding: float = DEFAULT_PADDING
) -> List[Tuple[str, str, float]]:
    """
    Find all pairs of colliding placements.

    Each unordered pair is checked once, in input order. Pairs that only
    violate the padding report an overlap area of 0.

    Returns:
        List of tuples: (anchor_a_id, anchor_b_id, overlap_area)
    """
    collisions = []
    for i, placement_a in enumerate(placements):
        for placement_b in placements[i + 1:]:
            if check_collision(placement_a.bounding_box, placement_b.bounding_box, padding):
                overlap = calculate_overlap_area(
                    placement_a.bounding_box, placement_b.bounding_box
                )
                collisions.append((placement_a.anchor_id, placement_b.anchor_id, overlap))
    return collisions


def audit_layout(
    placements: Sequence[PlacementResult],
    padding: float = DEFAULT_PADDING
) -> LayoutAudit:
    """Audit a layout for collisions, room bounds and floor coverage."""
    collisions = [
        f"{anchor_a} overlaps {anchor_b} ({area:.1f}% area)"
        for anchor_a, anchor_b, area in find_collisions(placements, padding)
    ]
    out_of_bounds = [
        p.furniture_id for p in placements if not is_within_room(p.bounding_box)
    ]

    return LayoutAudit(
        valid=not collisions,
        collisions=collisions,
        out_of_bounds=out_of_bounds,
        coverage=round(calculate_coverage(p.bounding_box for p in placements), 2),
    )
