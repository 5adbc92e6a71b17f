"""Validators - Input validation before running an analysis.

Validators return Optional[Message]:
- None if valid
- A Message object if invalid (caller displays it)

Design Principles:
- No exceptions for expected validation failures
- Messages know their own display level
- Caller controls when/how to display the message
"""

from los_analyzer.model.geo_point import GeoPoint
from los_analyzer.model.message import (
    CoincidentPointsMessage,
    PointsNotSelectedMessage,
    ToastMessage,
)


def validate_points_selected(
    point_a: GeoPoint | None,
    point_b: GeoPoint | None,
) -> ToastMessage | None:
    """Validate that both endpoints are placed.

    Returns:
        None if valid, PointsNotSelectedMessage if either is missing.
    """
    if point_a is None or point_b is None:
        return PointsNotSelectedMessage()
    return None


def validate_distinct_points(
    point_a: GeoPoint,
    point_b: GeoPoint,
) -> ToastMessage | None:
    """Validate that the endpoints are not the same location.

    A zero-length path has no defined line of sight or path loss.

    Returns:
        None if valid, CoincidentPointsMessage if the points coincide.
    """
    if point_a.distance_to(point_b) == 0:
        return CoincidentPointsMessage()
    return None
