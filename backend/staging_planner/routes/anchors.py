"""
Anchor Routes

POST /anchors/from-zones - Build anchors from analysed furniture zones.
POST /anchors/occupancy - Apply occupancy updates to an anchor list.
"""

import logging

from fastapi import APIRouter, HTTPException

from staging_planner.core.anchors import (
    anchors_from_zones,
    apply_anchor_updates,
    occupancy_from_manifest,
)
from staging_planner.models.api import (
    AnchorOccupancyRequest,
    AnchorsFromZonesRequest,
    AnchorsResponse,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/anchors", tags=["Anchors"])


@router.post("/from-zones", response_model=AnchorsResponse, response_model_exclude_none=True)
async def build_anchors(request: AnchorsFromZonesRequest) -> AnchorsResponse:
    """Turn each furniture zone into an unoccupied anchor at its center."""
    try:
        anchors = anchors_from_zones(request.furniture_zones)
        logger.info("Built %d anchors from zones", len(anchors))
        return AnchorsResponse(anchors=anchors)

    except Exception as e:
        logger.exception("Anchor generation failed")
        raise HTTPException(status_code=500, detail=f"Anchor generation failed: {str(e)}")


@router.post("/occupancy", response_model=AnchorsResponse, response_model_exclude_none=True)
async def update_occupancy(request: AnchorOccupancyRequest) -> AnchorsResponse:
    """
    Mark anchors as occupied or free.

    Typically fed with the updates derived from a placement manifest so the
    next batch sees those slots as reserved. Explicit updates take
    precedence over the ones derived from a manifest.
    """
    try:
        updates = list(request.anchor_updates)
        if request.manifest is not None:
            updates.extend(occupancy_from_manifest(request.manifest))

        anchors = apply_anchor_updates(request.anchors, updates)
        return AnchorsResponse(anchors=anchors)

    except Exception as e:
        logger.exception("Anchor occupancy update failed")
        raise HTTPException(status_code=500, detail=f"Occupancy update failed: {str(e)}")
