import math

from logistics_dashboard.core.models import Location

# Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0


def calculate_distance(coord1: Location, coord2: Location) -> float:
    """
    Calculate the distance between two geographical coordinates using the Haversine formula.

    Args:
        coord1: The first Location object (latitude, longitude in degrees).
        coord2: The second Location object (latitude, longitude in degrees).

    Returns:
        The distance between the two coordinates in kilometers.
    """
    lat1_rad = math.radians(coord1.latitude)
    lat2_rad = math.radians(coord2.latitude)

    dlat = math.radians(coord2.latitude - coord1.latitude)
    dlon = math.radians(coord2.longitude - coord1.longitude)

    # Haversine formula
    a = math.sin(dlat / 2)**2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2)**2
    # Rounding can push antipodal points just above 1
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    distance_km = EARTH_RADIUS_KM * c
    return distance_km
