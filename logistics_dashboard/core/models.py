"""
Defines the Pydantic data models used throughout the application.

These models give a clear structure to the coordinates returned by the
geocoder, the route estimates derived from them, the route records shown in
the route list, and the mock shipment, weather and insight data displayed by
the dashboard.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """Represents a geographical location with latitude and longitude."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(
        ..., description="Latitude in decimal degrees.", ge=-90.0, le=90.0
    )
    longitude: float = Field(
        ..., description="Longitude in decimal degrees.", ge=-180.0, le=180.0
    )


class TransportMode(str, Enum):
    """Enumeration of transport modes a route can be classified into."""

    LAND = "land"
    SEA_LAND = "sea-land"
    AIR = "air"


class RouteType(str, Enum):
    """Display label of a route record (air routes are shown as air-land)."""

    LAND = "land"
    AIR_LAND = "air-land"
    SEA_LAND = "sea-land"


class RouteStatus(str, Enum):
    """Lifecycle label shown next to a route record."""

    ACTIVE = "active"
    COMPLETED = "completed"
    SCHEDULED = "scheduled"


class ShipmentStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class GeocodingResult(BaseModel):
    """Best match returned by the geocoding service for a free-text address."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)
    display_name: str = Field(
        default="", description="Full display name of the matched place."
    )

    @property
    def location(self) -> Location:
        return Location(latitude=self.latitude, longitude=self.longitude)


class RouteEstimate(BaseModel):
    """Distance, cost and duration estimate for a single route."""

    model_config = ConfigDict(frozen=True)

    distance_km: float = Field(..., description="Great-circle distance.", ge=0)
    cost_usd: int = Field(..., description="Estimated cost in US dollars.", ge=0)
    duration_hours: int = Field(
        ..., description="Estimated transit duration in hours.", ge=0
    )
    mode: TransportMode = Field(..., description="Transport mode used.")


class RouteRecord(BaseModel):
    """A single row of the available routes list."""

    id: int = Field(..., ge=1)
    name: str
    time: str = Field(..., description="Human readable creation time.")
    value: str = Field(..., description="Signed dollar value, e.g. '+$50'.")
    type: RouteType
    status: RouteStatus = RouteStatus.ACTIVE


class RoutePlan(BaseModel):
    """Result of planning a route between two geocoded addresses."""

    source: GeocodingResult
    destination: GeocodingResult
    weight_kg: float = Field(
        ..., description="Effective cargo weight (100 kg when not given).", gt=0
    )
    category: Optional[str] = Field(default=None, description="Cargo category.")
    estimate: RouteEstimate
    record: RouteRecord


class VehicleInfo(BaseModel):
    """Details shown for the vehicle travelling along a planned route."""

    kind: str = Field(..., description="truck, ship or plane.")
    vehicle_id: str
    status: str = "In Transit"
    speed: str
    eta: datetime
    origin: str
    destination: str
    cargo: str


class LocationInfo(BaseModel):
    """Details shown for the source or destination marker of a route."""

    name: str
    role: str = Field(..., description="'source' or 'destination'.")
    latitude: float
    longitude: float
    address: str


class Shipment(BaseModel):
    id: str
    customer_name: str
    company: str
    phone_number: str
    email: str
    country: str
    status: ShipmentStatus


class WeatherReport(BaseModel):
    day: str
    condition: str
    temperature_c: int


class RouteInsight(BaseModel):
    """Percentage scores shown on the insights page."""

    feasibility: int = Field(..., ge=0, le=100)
    legal: int = Field(..., ge=0, le=100)
    cost: int = Field(..., ge=0, le=100)
    weather: int = Field(..., ge=0, le=100)


class MonthlyValue(BaseModel):
    month: str
    value: int


class StatCard(BaseModel):
    title: str
    value: str
    change: str


class ModeShare(BaseModel):
    label: str
    percentage: int = Field(..., ge=0, le=100)


class DashboardSummary(BaseModel):
    """Everything rendered on the main dashboard page."""

    stats: List[StatCard] = Field(default_factory=list)
    mode_distribution: List[ModeShare] = Field(default_factory=list)
    shipment_trend: List[MonthlyValue] = Field(default_factory=list)
