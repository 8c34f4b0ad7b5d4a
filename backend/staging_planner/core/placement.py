"""
Placement Engine

Deterministic, greedy furniture placement over a set of room anchors:
- Fuzzy category matching between items and anchors
- Placement calculation (position, rotation, advisory scale, footprint)
- Best-anchor selection against everything already placed
- Manifest assembly for an ordered batch of items

No AI model is involved and nothing here performs I/O. Items are placed
first-come-first-served in input order; a decision is never revisited.
"""

import logging
import math
from typing import Any, List, Optional, Sequence

from staging_planner.core.anchors import VIRTUAL_ANCHOR_PREFIX
from staging_planner.core.geometry import (
    DEFAULT_PADDING,
    check_collision,
    footprint_box,
    is_within_room,
)
from staging_planner.models.room import (
    Anchor,
    FurnitureItem,
    PlacementManifest,
    PlacementRequest,
    PlacementResult,
    Point,
    Scale,
    Size,
)


logger = logging.getLogger(__name__)

ROOM_CENTER = Point(x=50, y=50)

# Real-world units -> room percent, assuming the fixed room-size convention
UNIT_TO_PERCENT = 10

# Footprint given to a virtual anchor built from a raw target position
VIRTUAL_ANCHOR_SIZE = 15.0

ROTATION_STEP = 45


def is_category_match(item: FurnitureItem, anchor: Anchor) -> bool:
    """
    Check if an anchor accepts an item.

    Case-insensitive; any allowed category matches when it is contained
    in the item's category, contains the item's category, or appears in
    the item's name.
    """
    category = item.category.lower()
    name = item.name.lower()
    for allowed in anchor.allowed_categories:
        allowed = allowed.lower()
        if allowed in category or category in allowed or allowed in name:
            return True
    return False


def _names_category(item: FurnitureItem, anchor: Anchor) -> bool:
    """True when one of the anchor's categories appears in the item name."""
    name = item.name.lower()
    return any(cat.lower() in name for cat in anchor.allowed_categories)


def _fit_ratio(available: float, real_size: float) -> float:
    """Ratio of anchor footprint to converted item size (unbounded for 0)."""
    converted = real_size * UNIT_TO_PERCENT
    if converted == 0:
        return math.inf
    return available / converted


def calculate_placement(
    item: FurnitureItem,
    anchor: Anchor,
    custom_rotation: Optional[float] = None
) -> PlacementResult:
    """
    Place an item on an anchor.

    The footprint always comes from the anchor; the item's real-world
    dimensions only shrink the advisory ``scale`` (never above 1).

    Args:
        item: Furniture to place
        anchor: Target slot
        custom_rotation: Overrides the anchor's default rotation

    Returns:
        A PlacementResult marked valid
    """
    position = anchor.position.model_copy()
    rotation = custom_rotation if custom_rotation is not None else anchor.rotation

    scale = Scale(x=1.0, y=1.0)
    if item.dimensions is not None:
        width_ratio = _fit_ratio(anchor.bounding_box.width, item.dimensions.width)
        height_ratio = _fit_ratio(anchor.bounding_box.height, item.dimensions.depth)
        fit = min(width_ratio, height_ratio, 1.0)
        scale = Scale(x=fit, y=fit)

    return PlacementResult(
        furniture_id=item.id,
        anchor_id=anchor.id,
        position=position,
        rotation=rotation,
        scale=scale,
        bounding_box=footprint_box(position, anchor.bounding_box),
        valid=True,
    )


def find_best_anchor(
    item: FurnitureItem,
    anchors: Sequence[Anchor],
    placed_items: Sequence[PlacementResult],
    padding: float = DEFAULT_PADDING
) -> Optional[Anchor]:
    """
    Find the best free anchor for an item.

    Candidates must be unreserved, accept the item's category and not
    collide with anything already placed. Among them, an anchor whose
    category literally appears in the item name wins; otherwise the first
    candidate in input order.

    Returns:
        The chosen anchor, or None when nothing fits
    """
    candidates = []
    for anchor in anchors:
        if anchor.occupied:
            continue
        if not is_category_match(item, anchor):
            continue

        trial = calculate_placement(item, anchor)
        if any(check_collision(trial.bounding_box, placed.bounding_box, padding)
               for placed in placed_items):
            continue

        candidates.append(anchor)

    if not candidates:
        return None

    for anchor in candidates:
        if _names_category(item, anchor):
            return anchor
    return candidates[0]


def calculate_facing_rotation(position: Point, room_center: Point = ROOM_CENTER) -> int:
    """
    Rotation (degrees) that turns furniture at ``position`` toward the room center.

    The bearing is rounded half-up to the nearest 45 degrees.

    Example:
        >>> calculate_facing_rotation(Point(x=10, y=10))
        45
        >>> calculate_facing_rotation(Point(x=90, y=50))
        180
    """
    dx = room_center.x - position.x
    dy = room_center.y - position.y
    angle = math.degrees(math.atan2(dy, dx))
    return int(math.floor(angle / ROTATION_STEP + 0.5)) * ROTATION_STEP


def _virtual_anchor(item: FurnitureItem, position: Point) -> Anchor:
    return Anchor(
        id=f"{VIRTUAL_ANCHOR_PREFIX}{item.id}",
        name="Custom Position",
        position=position,
        rotation=0.0,
        bounding_box=Size(width=VIRTUAL_ANCHOR_SIZE, height=VIRTUAL_ANCHOR_SIZE),
        allowed_categories=[item.category],
        occupied=False,
    )


def _find_request(
    item: FurnitureItem,
    requests: Sequence[PlacementRequest]
) -> Optional[PlacementRequest]:
    for request in requests:
        if request.furniture_item.id == item.id:
            return request
    return None


def generate_manifest(
    furniture_items: Sequence[FurnitureItem],
    anchors: Sequence[Anchor],
    existing_placements: Optional[Sequence[PlacementResult]] = None,
    placement_requests: Optional[Sequence[PlacementRequest]] = None,
    room_dimensions: Any = None,
    padding: float = DEFAULT_PADDING
) -> PlacementManifest:
    """
    Place a batch of furniture items and collect the outcome.

    Each item is resolved by, in order of precedence: an explicit target
    anchor, an explicit target position (virtual 15x15 anchor), or
    automatic anchor selection facing the room center. Later items see
    every earlier placement. Unresolved items become warnings; colliding
    items are kept but flagged invalid; out-of-room footprints only warn.

    Args:
        furniture_items: Items to place, in priority order
        anchors: Candidate slots (never modified)
        existing_placements: Space already taken before this batch
        placement_requests: Optional per-item overrides
        room_dimensions: Accepted for callers, not used by the solver
        padding: Clearance required between placements

    Returns:
        PlacementManifest for the batch
    """
    requests = placement_requests or []
    placed_items: List[PlacementResult] = list(existing_placements or [])
    manifest = PlacementManifest()

    for item in furniture_items:
        request = _find_request(item, requests)
        placement: Optional[PlacementResult] = None

        if request is not None and request.target_anchor_id:
            target = next((a for a in anchors if a.id == request.target_anchor_id), None)
            if target is not None:
                placement = calculate_placement(item, target)
            else:
                manifest.warnings.append(
                    f"Anchor {request.target_anchor_id} not found for {item.name}"
                )
        elif request is not None and request.target_position is not None:
            placement = calculate_placement(item, _virtual_anchor(item, request.target_position))
        else:
            best = find_best_anchor(item, anchors, placed_items, padding)
            if best is not None:
                rotation = calculate_facing_rotation(best.position)
                placement = calculate_placement(item, best, rotation)
            else:
                manifest.warnings.append(
                    f"No suitable anchor found for {item.name} ({item.category})"
                )

        if placement is None:
            logger.debug("Skipped %s: no placement resolved", item.id)
            continue

        colliding = next(
            (placed for placed in placed_items
             if check_collision(placement.bounding_box, placed.bounding_box, padding)),
            None
        )
        if colliding is not None:
            manifest.collisions.append(
                f"{item.name} collides with item at anchor {colliding.anchor_id}"
            )
            placement.valid = False
            placement.reason = "Collision detected"
            manifest.valid = False

        if not is_within_room(placement.bounding_box):
            manifest.warnings.append(f"{item.name} may extend outside room boundaries")

        manifest.items.append(placement)
        placed_items.append(placement)

    manifest.total_items = len(manifest.items)
    manifest.valid = not manifest.collisions
    return manifest
