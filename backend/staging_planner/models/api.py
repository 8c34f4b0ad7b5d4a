"""
API Request/Response Schemas

Pydantic models for API endpoints. Keys are camelCase on the wire.
"""

from typing import Any, List, Optional

from pydantic import Field, field_validator

from staging_planner.models.room import (
    Anchor,
    AnchorUpdate,
    CamelModel,
    FurnitureItem,
    FurnitureZone,
    LayoutAudit,
    PlacementManifest,
    PlacementRequest,
    PlacementResult,
    Point,
)


# ============ Placement Endpoint ============

class PlaceFurnitureRequest(CamelModel):
    """Request body for /furniture-placement."""
    furniture_items: List[FurnitureItem] = Field(default_factory=list, description="Items to place, in order")
    anchors: List[Anchor] = Field(default_factory=list, description="Candidate slots")
    existing_placements: List[PlacementResult] = Field(default_factory=list, description="Space already taken")
    placement_requests: List[PlacementRequest] = Field(default_factory=list, description="Per-item overrides")
    room_dimensions: Optional[Any] = Field(default=None, description="Reserved, not used for placement")

    @field_validator(
        "furniture_items", "anchors", "existing_placements", "placement_requests",
        mode="before",
    )
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        """JSON null is treated the same as an omitted list."""
        return [] if value is None else value


class PlaceFurnitureResponse(CamelModel):
    """Response from /furniture-placement."""
    manifest: PlacementManifest
    success: bool = True


class ValidateLayoutRequest(CamelModel):
    """Request body for /furniture-placement/validate."""
    placements: List[PlacementResult] = Field(default_factory=list)


class ValidateLayoutResponse(CamelModel):
    """Response from /furniture-placement/validate."""
    audit: LayoutAudit
    success: bool = True


# ============ Anchor Endpoints ============

class AnchorsFromZonesRequest(CamelModel):
    """Request body for /anchors/from-zones."""
    furniture_zones: List[FurnitureZone] = Field(default_factory=list)


class AnchorOccupancyRequest(CamelModel):
    """Request body for /anchors/occupancy."""
    anchors: List[Anchor] = Field(default_factory=list)
    anchor_updates: List[AnchorUpdate] = Field(default_factory=list)
    manifest: Optional[PlacementManifest] = Field(default=None, description="Mark its valid placements as occupied")


class AnchorsResponse(CamelModel):
    """Response carrying a list of anchors."""
    anchors: List[Anchor]
    success: bool = True


# ============ Room Endpoint ============

class FloorPolygonRequest(CamelModel):
    """Request body for /room/floor-polygon."""
    room_shape: str = Field(default="rectangular", description="rectangular, square or L-shaped")
    width: float = Field(..., gt=0, description="Room width")
    depth: float = Field(..., gt=0, description="Room depth")


class FloorPolygonResponse(CamelModel):
    """Response from /room/floor-polygon."""
    floor_polygon: List[Point]
    area: float
    success: bool = True


# ============ Health Check ============

class HealthResponse(CamelModel):
    """Response from /health endpoint."""
    status: str = "ok"
    version: str
    message: str = "Staging Planner API is running"


# ============ Error Response ============

class ErrorResponse(CamelModel):
    """Standard error response."""
    error: str
