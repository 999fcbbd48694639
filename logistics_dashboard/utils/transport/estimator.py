"""
Route estimator for the logistics dashboard.

This module classifies a route into a transport mode by its great-circle
distance and estimates the cost and transit duration of moving cargo along it.
All functions are pure: the same inputs always give the same outputs.
"""

import logging
import math
from enum import Enum
from typing import Any, Dict, Optional, Union

from logistics_dashboard.core.models import Location, RouteEstimate, TransportMode
from logistics_dashboard.utils.geolocation import calculate_distance

logger = logging.getLogger(__name__)

# Distance thresholds (km) above which a route moves to the next mode
SEA_LAND_THRESHOLD_KM = 1000.0
AIR_THRESHOLD_KM = 5000.0

# Base rates in USD per km for 100 kg of cargo
BASE_RATES: Dict[str, float] = {
    "land": 1.5,
    "sea-land": 2.2,
    "air": 3.8,
    "air-land": 3.8,
}

# Average speeds in km/h
SPEEDS: Dict[str, float] = {
    "land": 60.0,
    "sea-land": 30.0,
    "air": 800.0,
    "air-land": 800.0,
}

DEFAULT_WEIGHT_KG = 100.0

# Upper bound on cargo weight; heavier weights are capped to it
MAX_WEIGHT_KG = 1e12


def _round_half_up(value: float) -> int:
    whole = math.floor(value)
    return int(whole) + (1 if value - whole >= 0.5 else 0)


def _mode_key(mode: Union[TransportMode, str, None]) -> str:
    """Normalize a mode or route type label to a rate/speed table key."""
    if mode is None:
        return "land"
    key = mode.value if isinstance(mode, Enum) else str(mode).strip().lower()
    if key not in BASE_RATES:
        logger.debug(f"Unknown transport mode '{mode}', using land rates")
        return "land"
    return key


def normalize_weight(weight_kg: Any) -> float:
    """
    Parse a cargo weight, falling back to 100 kg.

    Blank, non-numeric, non-finite, zero and negative weights all fall back
    to the default weight. Weights above MAX_WEIGHT_KG are capped.
    """
    try:
        weight = float(weight_kg)
    except (TypeError, ValueError):
        return DEFAULT_WEIGHT_KG
    if not math.isfinite(weight) or weight <= 0:
        return DEFAULT_WEIGHT_KG
    return min(weight, MAX_WEIGHT_KG)


def classify_mode(distance_km: float) -> TransportMode:
    """
    Classify a route by its distance.

    Args:
        distance_km: Great-circle distance in kilometers

    Returns:
        AIR above 5000 km, SEA_LAND above 1000 km, LAND otherwise
    """
    if distance_km > AIR_THRESHOLD_KM:
        return TransportMode.AIR
    elif distance_km > SEA_LAND_THRESHOLD_KM:
        return TransportMode.SEA_LAND
    return TransportMode.LAND


def estimate_cost(
    distance_km: float,
    mode: Union[TransportMode, str, None] = None,
    weight_kg: Any = None,
) -> int:
    """
    Estimate the cost of a route in US dollars.

    Args:
        distance_km: Route distance in kilometers
        mode: Transport mode; unknown modes use the land rate
        weight_kg: Cargo weight; defaults to 100 kg

    Returns:
        Cost rounded to the nearest dollar
    """
    base_rate = BASE_RATES[_mode_key(mode)]
    weight = normalize_weight(weight_kg)
    return _round_half_up(distance_km * base_rate * (weight / 100))


def estimate_duration(
    distance_km: float, mode: Union[TransportMode, str, None] = None
) -> int:
    """
    Estimate the transit duration of a route.

    Args:
        distance_km: Route distance in kilometers
        mode: Transport mode; unknown modes use the land speed

    Returns:
        Duration rounded to the nearest hour
    """
    speed = SPEEDS[_mode_key(mode)]
    return _round_half_up(distance_km / speed)


def estimate_route(
    origin: Location,
    destination: Location,
    weight_kg: Any = None,
    mode: Optional[TransportMode] = None,
) -> RouteEstimate:
    """
    Build a complete estimate for the route between two locations.

    The mode is classified from the distance unless one is given.
    """
    distance = calculate_distance(origin, destination)
    if mode is None:
        mode = classify_mode(distance)

    estimate = RouteEstimate(
        distance_km=distance,
        cost_usd=estimate_cost(distance, mode, weight_kg),
        duration_hours=estimate_duration(distance, mode),
        mode=mode,
    )
    logger.debug(
        f"Estimated {estimate.mode.value} route: {estimate.distance_km:.1f} km, "
        f"${estimate.cost_usd}, {estimate.duration_hours} h"
    )
    return estimate
