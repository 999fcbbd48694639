"""
Route path utilities for drawing a planned route.

This module provides functions for generating the waypoints of a route and
for locating a vehicle travelling along them.
"""

import math
from typing import Dict, List, Tuple, Union

from logistics_dashboard.core.models import Location, RouteType, TransportMode
from logistics_dashboard.utils.geolocation import calculate_distance

Point = Tuple[float, float]

# Display colour of each route type
ROUTE_STYLES: Dict[str, str] = {
    "air": "#FF4B4B",
    "air-land": "#FF4B4B",
    "sea-land": "#4B9FFF",
    "land": "#10B981",
}

# Maximum latitude offset of the air arc, in degrees
MAX_ARC_HEIGHT = 5.0


def get_route_style(route_type: Union[TransportMode, RouteType, str]) -> str:
    """Return the display colour for a mode or route type, land by default."""
    key = getattr(route_type, "value", route_type)
    return ROUTE_STYLES.get(key, ROUTE_STYLES["land"])


def generate_route_points(
    start: Location,
    end: Location,
    mode: TransportMode = TransportMode.LAND,
    num_points: int = 20,
) -> List[Point]:
    """
    Generate intermediate points between two locations.

    Land and sea-land routes are straight lines. Air routes follow a quadratic
    Bezier arc whose control point is the midpoint raised by up to 5 degrees
    of latitude, depending on the distance.

    Args:
        start: Route origin
        end: Route destination
        mode: Transport mode of the route
        num_points: Number of segments; num_points + 1 points are returned

    Returns:
        List of (latitude, longitude) tuples from start to end inclusive
    """
    num_points = max(1, num_points)
    points: List[Point] = []

    if mode == TransportMode.AIR:
        distance = calculate_distance(start, end)
        arc_height = min(distance / 30, MAX_ARC_HEIGHT)
        control_lat = (start.latitude + end.latitude) / 2 + arc_height
        control_lng = (start.longitude + end.longitude) / 2

        for i in range(num_points + 1):
            t = i / num_points
            lat = (
                start.latitude * (1 - t) ** 2
                + control_lat * 2 * t * (1 - t)
                + end.latitude * t**2
            )
            lng = (
                start.longitude * (1 - t) ** 2
                + control_lng * 2 * t * (1 - t)
                + end.longitude * t**2
            )
            points.append((lat, lng))
    else:
        for i in range(num_points + 1):
            t = i / num_points
            lat = start.latitude + (end.latitude - start.latitude) * t
            lng = start.longitude + (end.longitude - start.longitude) * t
            points.append((lat, lng))

    return points


def calculate_heading(from_point: Point, to_point: Point) -> float:
    """
    Calculate the heading between two points in degrees.

    0 points north, 90 east; the angle is measured on the flat map.
    """
    dx = to_point[1] - from_point[1]
    dy = to_point[0] - from_point[0]
    return math.degrees(math.atan2(dx, dy))


def position_along_route(points: List[Point], progress: float) -> Tuple[Point, float]:
    """
    Locate a vehicle along a route.

    Args:
        points: Route waypoints as returned by generate_route_points
        progress: Fraction of the route travelled, clamped to [0, 1]

    Returns:
        Tuple of ((latitude, longitude), heading in degrees)
    """
    if not points:
        raise ValueError("A route needs at least one point")
    if len(points) == 1:
        return points[0], 0.0

    progress = min(max(progress, 0.0), 1.0)
    segments = len(points) - 1
    index = min(int(math.floor(progress * segments)), segments - 1)
    current, following = points[index], points[index + 1]
    heading = calculate_heading(current, following)

    if progress >= 1.0:
        return points[-1], heading

    fraction = progress * segments - index
    lat = current[0] + (following[0] - current[0]) * fraction
    lng = current[1] + (following[1] - current[1]) * fraction
    return (lat, lng), heading
