"""
Route planner for the logistics dashboard.

This module ties the geocoder and the route estimator together: it resolves a
source and a destination address, estimates the route between them and keeps
the list of available routes shown by the routes page.
"""

import logging
import random
from datetime import datetime, timedelta
from typing import Any, List, Optional

from logistics_dashboard.core.dashboard import sample_routes
from logistics_dashboard.core.models import (
    GeocodingResult,
    LocationInfo,
    RoutePlan,
    RouteRecord,
    RouteStatus,
    RouteType,
    TransportMode,
    VehicleInfo,
)
from logistics_dashboard.utils.geocoding import Geocoder
from logistics_dashboard.utils.transport.estimator import (
    estimate_route,
    normalize_weight,
)

logger = logging.getLogger(__name__)

GEOCODING_ERROR_MESSAGE = (
    "Could not find coordinates for the entered locations. "
    "Please check the addresses and try again."
)

DEFAULT_CARGO_CATEGORY = "General Cargo"

# Hours used for the ETA when a route rounds to zero hours
FALLBACK_ETA_HOURS = 5

ROUTE_NAMES = {
    TransportMode.AIR: "Air",
    TransportMode.SEA_LAND: "Sea + Land",
    TransportMode.LAND: "Land",
}

ROUTE_TYPES = {
    TransportMode.AIR: RouteType.AIR_LAND,
    TransportMode.SEA_LAND: RouteType.SEA_LAND,
    TransportMode.LAND: RouteType.LAND,
}

# (vehicle kind, speed label) per mode
VEHICLES = {
    TransportMode.AIR: ("plane", "800 km/h"),
    TransportMode.SEA_LAND: ("ship", "30 km/h"),
    TransportMode.LAND: ("truck", "60 km/h"),
}


class RoutePlanningError(Exception):
    """Raised when a route cannot be planned between two addresses."""


class RoutePlanner:
    """
    Plans routes between addresses and keeps the list of available routes.
    """

    def __init__(
        self,
        geocoder: Optional[Geocoder] = None,
        routes: Optional[List[RouteRecord]] = None,
    ):
        """Initialize the planner with a geocoder and the starting route list."""
        self.geocoder = geocoder or Geocoder()
        self.routes = routes if routes is not None else sample_routes()

    def plan_route(
        self,
        source: str,
        destination: str,
        weight: Any = None,
        category: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> RoutePlan:
        """
        Plan a route between two addresses.

        The source is geocoded first, then the destination. On success a new
        record is added to the top of the route list.

        Args:
            source: Free-text source address
            destination: Free-text destination address
            weight: Cargo weight in kg; blank or invalid values mean 100 kg
            category: Cargo category
            now: Time stamped on the new record; defaults to the current time

        Returns:
            The planned route

        Raises:
            RoutePlanningError: If either address could not be geocoded
        """
        logger.info(f"Planning route from '{source}' to '{destination}'")

        source_result = self.geocoder.geocode(source)
        destination_result = self.geocoder.geocode(destination)
        if source_result is None or destination_result is None:
            logger.warning("Route planning failed: geocoding returned no result")
            raise RoutePlanningError(GEOCODING_ERROR_MESSAGE)

        weight_kg = normalize_weight(weight)
        estimate = estimate_route(
            source_result.location, destination_result.location, weight_kg
        )

        now = now or datetime.now()
        route_number = len(self.routes) + 1
        record = RouteRecord(
            id=route_number,
            name=f"{ROUTE_NAMES[estimate.mode]} Route {route_number}",
            time=f"Today, {now.hour}:{now.minute:02d}",
            value=f"+${estimate.cost_usd}",
            type=ROUTE_TYPES[estimate.mode],
            status=RouteStatus.ACTIVE,
        )
        self.routes.insert(0, record)

        logger.info(
            f"Planned {record.name}: {estimate.distance_km:.1f} km, "
            f"${estimate.cost_usd}, {estimate.duration_hours} h"
        )
        return RoutePlan(
            source=source_result,
            destination=destination_result,
            weight_kg=weight_kg,
            category=category or None,
            estimate=estimate,
            record=record,
        )


def _format_weight(weight_kg: float) -> str:
    if weight_kg.is_integer():
        return str(int(weight_kg))
    return repr(weight_kg)


def describe_vehicle(plan: RoutePlan, now: Optional[datetime] = None) -> VehicleInfo:
    """
    Describe the vehicle carrying the cargo of a planned route.

    Args:
        plan: The planned route
        now: Departure time for the ETA; defaults to the current time

    Returns:
        Vehicle details with kind, speed, ETA and cargo
    """
    kind, speed = VEHICLES[plan.estimate.mode]
    hours = plan.estimate.duration_hours or FALLBACK_ETA_HOURS
    now = now or datetime.now()

    return VehicleInfo(
        kind=kind,
        vehicle_id=f"{kind.upper()}-{random.randint(0, 999)}",
        speed=speed,
        eta=now + timedelta(hours=hours),
        origin=plan.source.display_name,
        destination=plan.destination.display_name,
        cargo=f"{_format_weight(plan.weight_kg)} kg of {plan.category or DEFAULT_CARGO_CATEGORY}",
    )


def describe_location(result: GeocodingResult, role: str) -> LocationInfo:
    """Describe a route marker; the name is the first part of the display name."""
    return LocationInfo(
        name=result.display_name.split(",")[0].strip(),
        role=role,
        latitude=result.latitude,
        longitude=result.longitude,
        address=result.display_name,
    )
