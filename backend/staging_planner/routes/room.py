"""
Room Route

POST /room/floor-polygon - Floor outline for a room shape.
"""

from fastapi import APIRouter

from staging_planner.core.geometry import floor_polygon, polygon_area
from staging_planner.models.api import FloorPolygonRequest, FloorPolygonResponse
from staging_planner.models.room import Point


router = APIRouter(prefix="/room", tags=["Room"])


@router.post("/floor-polygon", response_model=FloorPolygonResponse)
async def get_floor_polygon(request: FloorPolygonRequest) -> FloorPolygonResponse:
    """
    Build the floor outline for a room.

    Unknown shapes fall back to a plain rectangle.
    """
    points = floor_polygon(request.room_shape, request.width, request.depth)
    return FloorPolygonResponse(
        floor_polygon=[Point(x=x, y=y) for x, y in points],
        area=polygon_area(points),
    )
