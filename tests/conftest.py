"""
Shared test fixtures for the placement engine and API tests.
"""
import pytest
from fastapi.testclient import TestClient

from staging_planner.main import app
from staging_planner.models.room import (
    Anchor,
    BoundingBox,
    FurnitureItem,
    PlacementResult,
    Point,
    Size,
)


def make_anchor(anchor_id, x, y, categories, width=20.0, height=20.0, rotation=0.0,
                occupied=False):
    """Anchor centered at (x, y) accepting ``categories``."""
    return Anchor(
        id=anchor_id,
        name=anchor_id.replace("_", " ").title(),
        position=Point(x=x, y=y),
        rotation=rotation,
        bounding_box=Size(width=width, height=height),
        allowed_categories=list(categories),
        occupied=occupied,
    )


def make_placement(furniture_id, anchor_id, min_x, max_x, min_y, max_y, valid=True):
    """Placement with the given footprint."""
    return PlacementResult(
        furniture_id=furniture_id,
        anchor_id=anchor_id,
        position=Point(x=(min_x + max_x) / 2, y=(min_y + max_y) / 2),
        bounding_box=BoundingBox(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y),
        valid=valid,
    )


@pytest.fixture
def sofa():
    """A sofa without real-world dimensions."""
    return FurnitureItem(id="sofa_1", name="Sofa", category="Seating")


@pytest.fixture
def lamp():
    """A floor lamp whose category matches no seating anchor."""
    return FurnitureItem(id="lamp_1", name="Lamp", category="Lighting")


@pytest.fixture
def sofa_wall():
    """Seating anchor near the south-west corner, away from the room center."""
    return make_anchor("sofa_wall", 20, 80, ["Seating"], width=30, height=15)


@pytest.fixture
def decor_grid():
    """Nine well-separated decor anchors on a 3x3 grid."""
    anchors = []
    for row, y in enumerate((15, 50, 85)):
        for col, x in enumerate((15, 50, 85)):
            anchors.append(make_anchor(f"decor_{row}_{col}", x, y, ["decor"]))
    return anchors


@pytest.fixture
def client():
    """HTTP client for the FastAPI app."""
    return TestClient(app)
