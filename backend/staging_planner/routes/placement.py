"""
Placement Route

POST /furniture-placement - Place furniture on room anchors using pure geometry.
POST /furniture-placement/validate - Audit an existing layout.
"""

import logging

from fastapi import APIRouter, HTTPException

from staging_planner.config import get_settings
from staging_planner.core.constraints import audit_layout
from staging_planner.core.placement import generate_manifest
from staging_planner.models.api import (
    PlaceFurnitureRequest,
    PlaceFurnitureResponse,
    ValidateLayoutRequest,
    ValidateLayoutResponse,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/furniture-placement", tags=["Placement"])


@router.post("", response_model=PlaceFurnitureResponse, response_model_exclude_none=True)
async def place_furniture(request: PlaceFurnitureRequest) -> PlaceFurnitureResponse:
    """
    Place a batch of furniture items on room anchors.

    This endpoint:
    1. Resolves each item, in order, to an explicit anchor, an explicit
       position or the best free anchor for its category
    2. Checks every placement against earlier ones for collisions
    3. Returns the manifest with per-item validity, collisions and warnings

    Items that cannot be placed are reported as warnings, never as errors.
    """
    settings = get_settings()
    try:
        logger.info(
            "Processing furniture placement: items=%d anchors=%d existing=%d",
            len(request.furniture_items),
            len(request.anchors),
            len(request.existing_placements),
        )

        manifest = generate_manifest(
            furniture_items=request.furniture_items,
            anchors=request.anchors,
            existing_placements=request.existing_placements,
            placement_requests=request.placement_requests,
            room_dimensions=request.room_dimensions,
            padding=settings.collision_padding,
        )

        logger.info(
            "Placement manifest generated: total=%d valid=%s collisions=%d warnings=%d",
            manifest.total_items,
            manifest.valid,
            len(manifest.collisions),
            len(manifest.warnings),
        )

        return PlaceFurnitureResponse(manifest=manifest, success=True)

    except Exception as e:
        logger.exception("furniture-placement failed")
        raise HTTPException(status_code=500, detail=str(e) or "Unknown error")


@router.post("/validate", response_model=ValidateLayoutResponse)
async def validate_layout(request: ValidateLayoutRequest) -> ValidateLayoutResponse:
    """
    Audit an existing set of placements.

    Reports every colliding pair, every footprint outside the room and
    how much of the floor the layout covers.
    """
    settings = get_settings()
    try:
        audit = audit_layout(request.placements, padding=settings.collision_padding)
        return ValidateLayoutResponse(audit=audit, success=True)

    except Exception as e:
        logger.exception("Layout validation failed")
        raise HTTPException(status_code=500, detail=f"Validation failed: {str(e)}")
