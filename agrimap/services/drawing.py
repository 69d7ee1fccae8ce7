"""
Custom field drawing on the map
"""

from ..geometry import polygon_area
from ..models import DrawingInProgress, DrawnRegion, LatLng, SelectionState

MIN_DRAWING_POINTS = 3

def start_drawing(state: SelectionState) -> SelectionState:
    return state.model_copy(update={"drawing_mode": True, "current_drawing": None})

def toggle_drawing(state: SelectionState) -> SelectionState:
    return state.model_copy(update={"drawing_mode": not state.drawing_mode, "current_drawing": None})

def add_drawing_point(state: SelectionState, lat: float, lng: float) -> SelectionState:
    """Append a vertex, opening a new drawing on the first point"""

    point = LatLng(lat=lat, lng=lng)
    current = state.current_drawing
    if current is None:
        number = len(state.drawn_regions) + 1
        current = DrawingInProgress(id=number, name=f"Custom Field {number}", points=[point])
    else:
        current = current.model_copy(update={"points": [*current.points, point]})
    return state.model_copy(update={"current_drawing": current})

def finish_drawing(state: SelectionState) -> SelectionState:
    """
    Close the current drawing into a DrawnRegion and leave drawing mode.
    Drawings with fewer than three points are left untouched.
    """

    current = state.current_drawing
    if current is None or len(current.points) < MIN_DRAWING_POINTS:
        return state

    completed = DrawnRegion(
        id=current.id,
        name=current.name,
        points=list(current.points),
        area_km2=polygon_area(current.points)
    )
    return state.model_copy(update={
        "drawn_regions": [*state.drawn_regions, completed],
        "current_drawing": None,
        "drawing_mode": False
    })

def clear_drawings(state: SelectionState) -> SelectionState:
    return state.model_copy(update={"drawn_regions": [], "current_drawing": None})
