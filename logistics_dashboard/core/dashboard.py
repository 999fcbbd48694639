"""
Sample data shown on the dashboard, shipments, weather and insights pages.

All figures are fixed demo values; nothing here is loaded from or written to
any store.
"""

import logging
from typing import List

from logistics_dashboard.core.models import (
    DashboardSummary,
    ModeShare,
    MonthlyValue,
    RouteInsight,
    RouteRecord,
    RouteStatus,
    RouteType,
    Shipment,
    ShipmentStatus,
    StatCard,
    WeatherReport,
)

logger = logging.getLogger(__name__)

SORT_ORDERS = ("newest", "oldest")

STAT_CARDS = [
    StatCard(title="Total Shipments", value="2,547", change="+12.5%"),
    StatCard(title="Active Routes", value="156", change="+8.2%"),
    StatCard(title="Total Customers", value="1,245", change="+15.3%"),
]

MODE_DISTRIBUTION = [
    ModeShare(label="Land", percentage=45),
    ModeShare(label="Air", percentage=30),
    ModeShare(label="Sea", percentage=25),
]

SHIPMENT_TREND = [
    MonthlyValue(month=month, value=value)
    for month, value in [
        ("Jan", 400),
        ("Feb", 300),
        ("Mar", 600),
        ("Apr", 800),
        ("May", 500),
        ("Jun", 700),
        ("Jul", 900),
        ("Aug", 800),
        ("Sep", 1000),
        ("Oct", 900),
        ("Nov", 700),
        ("Dec", 800),
    ]
]

SHIPMENTS = [
    Shipment(
        id="1",
        customer_name="Jane Cooper",
        company="Microsoft",
        phone_number="(225) 555-0118",
        email="jane@microsoft.com",
        country="United States",
        status=ShipmentStatus.ACTIVE,
    ),
    Shipment(
        id="2",
        customer_name="Floyd Miles",
        company="Yahoo",
        phone_number="(205) 555-0100",
        email="floyd@yahoo.com",
        country="Kiribati",
        status=ShipmentStatus.INACTIVE,
    ),
    Shipment(
        id="3",
        customer_name="Ronald Richards",
        company="Adobe",
        phone_number="(302) 555-0107",
        email="ronald@adobe.com",
        country="Israel",
        status=ShipmentStatus.INACTIVE,
    ),
    Shipment(
        id="4",
        customer_name="Marvin McKinney",
        company="Tesla",
        phone_number="(252) 555-0126",
        email="marvin@tesla.com",
        country="Iran",
        status=ShipmentStatus.ACTIVE,
    ),
    Shipment(
        id="5",
        customer_name="Jerome Bell",
        company="Google",
        phone_number="(629) 555-0129",
        email="jerome@google.com",
        country="Réunion",
        status=ShipmentStatus.ACTIVE,
    ),
]

WEATHER_FORECAST = [
    WeatherReport(day="Monday", condition="Cloudy", temperature_c=18),
    WeatherReport(day="Tuesday", condition="Rain", temperature_c=15),
    WeatherReport(day="Wednesday", condition="Snow", temperature_c=12),
    WeatherReport(day="Thursday", condition="Partly Cloudy", temperature_c=20),
    WeatherReport(day="Friday", condition="Sunny", temperature_c=22),
]

ROUTE_INSIGHT = RouteInsight(feasibility=85, legal=95, cost=70, weather=60)

PERFORMANCE_TREND = [
    MonthlyValue(month=month, value=value)
    for month, value in [
        ("Jan", 65),
        ("Feb", 75),
        ("Mar", 85),
        ("Apr", 70),
        ("May", 90),
        ("Jun", 95),
    ]
]


def sample_routes() -> List[RouteRecord]:
    """Return a fresh copy of the routes the route list starts with."""
    return [
        RouteRecord(
            id=1,
            name="Land Route 1",
            time="Today, 15:36",
            value="+$50",
            type=RouteType.LAND,
            status=RouteStatus.ACTIVE,
        ),
        RouteRecord(
            id=2,
            name="Air and Land Route 2",
            time="Today, 08:49",
            value="-$27",
            type=RouteType.AIR_LAND,
            status=RouteStatus.ACTIVE,
        ),
        RouteRecord(
            id=3,
            name="Sea + Land Route 3",
            time="Yesterday, 14:36",
            value="+$157",
            type=RouteType.SEA_LAND,
            status=RouteStatus.COMPLETED,
        ),
    ]


def get_dashboard_summary() -> DashboardSummary:
    return DashboardSummary(
        stats=list(STAT_CARDS),
        mode_distribution=list(MODE_DISTRIBUTION),
        shipment_trend=list(SHIPMENT_TREND),
    )


def search_shipments(term: str = "", sort: str = "newest") -> List[Shipment]:
    """
    Filter shipments by customer name, company or country.

    Args:
        term: Case-insensitive substring to look for; empty matches everything
        sort: "newest" (highest id first) or "oldest"

    Returns:
        Matching shipments in the requested order
    """
    if sort not in SORT_ORDERS:
        raise ValueError(f"Unknown sort order '{sort}', expected one of {SORT_ORDERS}")

    needle = (term or "").lower()
    matches = [
        shipment
        for shipment in SHIPMENTS
        if needle in shipment.customer_name.lower()
        or needle in shipment.company.lower()
        or needle in shipment.country.lower()
    ]
    matches.sort(key=lambda shipment: int(shipment.id), reverse=(sort == "newest"))

    logger.debug(f"Shipment search '{term}' matched {len(matches)} of {len(SHIPMENTS)}")
    return matches
