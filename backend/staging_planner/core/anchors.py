"""
Anchor Utilities

Building and maintaining the anchor catalog that the placement engine
consumes. Every function returns new objects; callers' anchors are never
modified in place.
"""

from typing import List, Sequence

from staging_planner.models.room import (
    Anchor,
    AnchorUpdate,
    FurnitureZone,
    PlacementManifest,
    Point,
    Size,
)


VIRTUAL_ANCHOR_PREFIX = "virtual_"


def anchor_from_zone(zone: FurnitureZone) -> Anchor:
    """
    Convert a furniture zone into an anchor at the zone's center.

    Example:
        >>> zone = FurnitureZone(name="sofa_wall", label="Sofa Wall",
        ...                      x_start=10, x_end=50, y_start=70, y_end=90,
        ...                      suggested_items=["sofa"])
        >>> anchor_from_zone(zone).position
        Point(x=30.0, y=80.0)
    """
    return Anchor(
        id=f"anchor_{zone.name}",
        name=zone.label,
        position=Point(
            x=(zone.x_start + zone.x_end) / 2,
            y=(zone.y_start + zone.y_end) / 2,
        ),
        rotation=0.0,
        bounding_box=Size(
            width=zone.x_end - zone.x_start,
            height=zone.y_end - zone.y_start,
        ),
        allowed_categories=list(zone.suggested_items),
        occupied=False,
    )


def anchors_from_zones(zones: Sequence[FurnitureZone]) -> List[Anchor]:
    """Convert zones to anchors, preserving order."""
    return [anchor_from_zone(zone) for zone in zones]


def apply_anchor_updates(
    anchors: Sequence[Anchor],
    updates: Sequence[AnchorUpdate]
) -> List[Anchor]:
    """
    Apply occupancy updates to a list of anchors.

    The first update naming an anchor wins. An empty ``occupied_by`` is
    stored as None. Anchors without an update are returned as-is.
    """
    updated = []
    for anchor in anchors:
        update = next((u for u in updates if u.anchor_id == anchor.id), None)
        if update is None:
            updated.append(anchor)
            continue

        updated.append(anchor.model_copy(update={
            "occupied": update.occupied,
            "occupied_by": update.occupied_by or None,
        }))
    return updated


def occupancy_from_manifest(manifest: PlacementManifest) -> List[AnchorUpdate]:
    """
    Occupancy updates that record a manifest's valid placements.

    Virtual anchors (raw target positions) have no catalog entry and are
    skipped, as are placements flagged invalid.
    """
    return [
        AnchorUpdate(
            anchor_id=placement.anchor_id,
            occupied=True,
            occupied_by=placement.furniture_id,
        )
        for placement in manifest.items
        if placement.valid and not placement.anchor_id.startswith(VIRTUAL_ANCHOR_PREFIX)
    ]
