"""
Geocoding for the route planner.

This module resolves free-text addresses to coordinates through the public
Nominatim (OpenStreetMap) service.
"""

import logging
import time
from typing import Optional

from geopy.exc import GeocoderTimedOut, GeocoderUnavailable, GeopyError
from geopy.geocoders import Nominatim

from logistics_dashboard.core.models import GeocodingResult

# Set up logging
logger = logging.getLogger(__name__)


class Geocoder:
    """
    Resolves addresses to coordinates, one request at a time.

    A fixed delay is observed before every request to stay under the public
    service's rate limit.
    """

    def __init__(
        self,
        user_agent: str = "logistics_dashboard_app",
        delay_seconds: float = 1.0,
        timeout: float = 5.0,
    ):
        """Initialize the geocoder."""
        self.geolocator = Nominatim(user_agent=user_agent)
        self.delay_seconds = delay_seconds
        self.timeout = timeout

    def geocode(self, address: str) -> Optional[GeocodingResult]:
        """
        Geocode an address to get its best match.

        Args:
            address: The address to geocode

        Returns:
            The best match, or None if nothing was found or the lookup failed
        """
        if not address or not address.strip():
            logger.warning("Geocoding skipped: empty address")
            return None

        if self.delay_seconds > 0:
            time.sleep(self.delay_seconds)

        try:
            location = self.geolocator.geocode(address, timeout=self.timeout)
        except (GeocoderTimedOut, GeocoderUnavailable) as e:
            logger.warning(f"Geocoding failed: {str(e)}")
            return None
        except GeopyError as e:
            logger.warning(f"Geocoding error for '{address}': {str(e)}")
            return None

        if not location:
            logger.info(f"No coordinates found for '{address}'")
            return None

        result = GeocodingResult(
            latitude=location.latitude,
            longitude=location.longitude,
            display_name=location.address or address,
        )
        logger.debug(
            f"Geocoded '{address}' to ({result.latitude:.4f}, {result.longitude:.4f})"
        )
        return result
