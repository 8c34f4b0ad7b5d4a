"""
Room, Anchor and Placement Data Models

These Pydantic models define the core data structures shared by the
placement engine and the API layer. All coordinates live in the room's
percentage space (0-100 on both axes); furniture dimensions are real-world
units and only ever feed the advisory scale factor.

Wire format is camelCase (``boundingBox``, ``allowedCategories``...), while
Python attributes stay snake_case. Either spelling is accepted on input.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RoomShape(str, Enum):
    """Floor outlines understood by the floor polygon builder."""
    RECTANGULAR = "rectangular"
    SQUARE = "square"
    L_SHAPED = "L-shaped"


class Point(CamelModel):
    """A position in room percentage coordinates."""
    x: float
    y: float


class Size(CamelModel):
    """Width/height of an anchor footprint, in room percent."""
    width: float
    height: float


class Dimensions(CamelModel):
    """Real-world furniture size (e.g. inches)."""
    width: float
    height: float
    depth: float


class Scale(CamelModel):
    """Advisory uniform scale, never above 1."""
    x: float = 1.0
    y: float = 1.0


class BoundingBox(CamelModel):
    """Axis-aligned box given by its extents."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float


class FurnitureItem(CamelModel):
    """
    A piece of furniture waiting to be placed.

    Attributes:
        id: Unique item ID
        name: Display name (e.g. "Velvet Sofa"), also used for category matching
        category: Free-text classification (e.g. "Seating")
        image_url: Optional product image
        dimensions: Optional real-world size, only used for scaling
    """
    id: str = Field(..., description="Unique furniture ID")
    name: str = Field(..., description="Display name")
    category: str = Field(..., description="Furniture category")
    image_url: Optional[str] = None
    dimensions: Optional[Dimensions] = None


class Anchor(CamelModel):
    """
    A fixed slot in the room that can hold one piece of furniture.

    ``occupied`` is a reservation made by the caller before a solve pass.
    The engine reads it but never flips it.
    """
    id: str = Field(..., description="Unique anchor ID")
    name: str = Field(..., description="Human-readable slot name")
    position: Point = Field(..., description="Center of the slot")
    rotation: float = Field(default=0.0, description="Default rotation in degrees")
    bounding_box: Size = Field(..., description="Footprint in room percent")
    allowed_categories: List[str] = Field(default_factory=list)
    occupied: bool = Field(default=False, description="Reserved before this pass")
    occupied_by: Optional[str] = None


class PlacementRequest(CamelModel):
    """Explicit caller override for where a furniture item should go."""
    furniture_item: FurnitureItem
    target_anchor_id: Optional[str] = None
    target_position: Optional[Point] = None


class PlacementResult(CamelModel):
    """Where one furniture item ended up."""
    furniture_id: str
    anchor_id: str
    position: Point
    rotation: float = 0.0
    scale: Scale = Field(default_factory=Scale)
    bounding_box: BoundingBox
    valid: bool = True
    reason: Optional[str] = None


class PlacementManifest(CamelModel):
    """Aggregate outcome of one placement batch."""
    items: List[PlacementResult] = Field(default_factory=list)
    collisions: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    valid: bool = True
    total_items: int = 0


class FurnitureZone(CamelModel):
    """A rectangular region of the floor plan suited to certain furniture."""
    name: str
    label: str
    x_start: float
    x_end: float
    y_start: float
    y_end: float
    suggested_items: List[str] = Field(default_factory=list)


class AnchorUpdate(CamelModel):
    """Occupancy change for a single anchor."""
    anchor_id: str
    occupied: bool
    occupied_by: Optional[str] = None


class LayoutAudit(CamelModel):
    """Result of checking an existing set of placements."""
    valid: bool = True
    collisions: List[str] = Field(default_factory=list)
    out_of_bounds: List[str] = Field(default_factory=list)
    coverage: float = Field(default=0.0, ge=0, le=100, description="Percent of room covered")
