from typing import List, Optional

import typer
from pydantic import ValidationError
from rich import (
    print as rprint,
)  # Use rprint to avoid conflict with built-in print if needed
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from logistics_dashboard.config import Settings, initialize_config
from logistics_dashboard.core.dashboard import (
    PERFORMANCE_TREND,
    ROUTE_INSIGHT,
    SORT_ORDERS,
    WEATHER_FORECAST,
    get_dashboard_summary,
    sample_routes,
    search_shipments,
)
from logistics_dashboard.core.models import Location, RouteRecord, TransportMode
from logistics_dashboard.core.planner import (
    RoutePlanner,
    RoutePlanningError,
    describe_location,
    describe_vehicle,
)
from logistics_dashboard.utils.geocoding import Geocoder
from logistics_dashboard.utils.transport.estimator import estimate_route
from logistics_dashboard.utils.transport.route_path import (
    generate_route_points,
    get_route_style,
    position_along_route,
)

app = typer.Typer(help="Logistics Dashboard CLI Tool")

MODE_LABELS = {
    TransportMode.AIR: "Air Route",
    TransportMode.SEA_LAND: "Sea & Land Route",
    TransportMode.LAND: "Land Route",
}


def _bar(value: int, scale: int) -> str:
    return "█" * max(1, round(value / scale))


def _routes_table(routes: List[RouteRecord]) -> Table:
    table = Table(title="Available Routes", show_header=True, header_style="bold blue")
    table.add_column("Route", style="cyan")
    table.add_column("Time")
    table.add_column("Value", justify="right")
    table.add_column("Type")
    table.add_column("Status")

    for route in routes:
        table.add_row(
            route.name,
            route.time,
            route.value,
            f"[{get_route_style(route.type)}]{route.type.value}[/]",
            route.status.value,
        )
    return table


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (defaults to LOG_LEVEL or INFO)."
    ),
):
    """
    Logistics dashboard: sample shipment data and a route planner.
    """
    try:
        ctx.obj = initialize_config(log_level)
    except ValidationError as e:
        rprint(f"[bold red]:x: Invalid configuration: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1)


@app.command(name="dashboard")
def show_dashboard():
    """
    Shows the headline statistics, transport mode split and shipment trend.
    """
    console = Console()
    summary = get_dashboard_summary()

    stats = Table(title="Overview", show_header=True, header_style="bold blue")
    stats.add_column("Metric", style="cyan")
    stats.add_column("Value", style="magenta", justify="right")
    stats.add_column("Change", style="green", justify="right")
    for card in summary.stats:
        stats.add_row(card.title, card.value, card.change)
    console.print(stats)

    modes = Table(title="Transport Modes", show_header=True, header_style="bold blue")
    modes.add_column("Mode", style="cyan")
    modes.add_column("Share", justify="right")
    for share in summary.mode_distribution:
        modes.add_row(share.label, f"{share.percentage}%")
    console.print(modes)

    trend = Table(title="Shipment Trends", show_header=True, header_style="bold blue")
    trend.add_column("Month", style="cyan")
    trend.add_column("Shipments", justify="right")
    trend.add_column("")
    for point in summary.shipment_trend:
        trend.add_row(point.month, str(point.value), _bar(point.value, 100))
    console.print(trend)


@app.command(name="shipments")
def list_shipments(
    search: str = typer.Option("", "--search", "-s", help="Filter by customer, company or country."),
    sort: str = typer.Option("newest", "--sort", help="Sort order: newest or oldest."),
):
    """
    Lists all shipments, optionally filtered and sorted.
    """
    if sort not in SORT_ORDERS:
        rprint(f"[bold red]:x: Invalid sort order '{escape(sort)}'. Use one of: {', '.join(SORT_ORDERS)}[/bold red]")
        raise typer.Exit(code=1)

    console = Console()
    shipments = search_shipments(search, sort)

    table = Table(title="All Shipments", show_header=True, header_style="bold blue")
    table.add_column("Customer", style="cyan")
    table.add_column("Company")
    table.add_column("Phone")
    table.add_column("Email")
    table.add_column("Country")
    table.add_column("Status")
    for shipment in shipments:
        status_style = "green" if shipment.status.value == "active" else "red"
        table.add_row(
            shipment.customer_name,
            shipment.company,
            shipment.phone_number,
            shipment.email,
            shipment.country,
            f"[{status_style}]{shipment.status.value}[/{status_style}]",
        )
    console.print(table)
    rprint(f"Showing {len(shipments)} shipment(s)")


@app.command(name="weather")
def show_weather():
    """
    Shows the five day weather forecast along the routes.
    """
    console = Console()
    table = Table(title="Weather Forecast", show_header=True, header_style="bold blue")
    table.add_column("Day", style="cyan")
    table.add_column("Condition")
    table.add_column("Temperature", justify="right")
    for report in WEATHER_FORECAST:
        table.add_row(report.day, report.condition, f"{report.temperature_c}°C")
    console.print(table)


@app.command(name="insights")
def show_insights():
    """
    Shows route insight scores and monthly performance.
    """
    console = Console()

    scores = Table(title="Route Insights", show_header=True, header_style="bold blue")
    scores.add_column("Factor", style="cyan")
    scores.add_column("Score", justify="right")
    for factor, value in ROUTE_INSIGHT.model_dump().items():
        scores.add_row(factor.capitalize(), f"{value}%")
    console.print(scores)

    performance = Table(title="Performance", show_header=True, header_style="bold blue")
    performance.add_column("Month", style="cyan")
    performance.add_column("Performance", justify="right")
    performance.add_column("")
    for point in PERFORMANCE_TREND:
        performance.add_row(point.month, f"{point.value}%", _bar(point.value, 10))
    console.print(performance)


@app.command(name="routes")
def list_routes():
    """
    Lists the sample routes.
    """
    Console().print(_routes_table(sample_routes()))


@app.command(name="estimate")
def estimate(
    from_lat: float = typer.Option(..., "--from-lat", help="Latitude of the origin."),
    from_lon: float = typer.Option(..., "--from-lon", help="Longitude of the origin."),
    to_lat: float = typer.Option(..., "--to-lat", help="Latitude of the destination."),
    to_lon: float = typer.Option(..., "--to-lon", help="Longitude of the destination."),
    weight: Optional[float] = typer.Option(None, "--weight", "-w", help="Cargo weight in kg (default 100)."),
    mode: Optional[str] = typer.Option(
        None, "--mode", "-m", help="Transport mode (land, sea-land, air); classified by distance if omitted."
    ),
):
    """
    Estimates distance, cost and duration between two coordinates.
    """
    try:
        origin = Location(latitude=from_lat, longitude=from_lon)
        destination = Location(latitude=to_lat, longitude=to_lon)
    except ValueError as e:
        rprint(f"[bold red]:x: Invalid coordinates: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1)

    transport_mode = None
    if mode:
        try:
            transport_mode = TransportMode(mode.strip().lower())
        except ValueError:
            rprint(
                f"[bold red]:x: Invalid transport mode '{escape(mode)}'. Use one of: "
                f"{', '.join(m.value for m in TransportMode)}[/bold red]"
            )
            raise typer.Exit(code=1)

    route_estimate = estimate_route(origin, destination, weight, transport_mode)

    table = Table(title="Route Estimate", show_header=True, header_style="bold blue")
    table.add_column("Field", style="cyan", width=12)
    table.add_column("Value", style="magenta")
    table.add_row("Mode", MODE_LABELS[route_estimate.mode])
    table.add_row("Distance", f"{route_estimate.distance_km:.1f} km")
    table.add_row("Cost", f"${route_estimate.cost_usd}")
    table.add_row("Duration", f"{route_estimate.duration_hours} hours")
    Console().print(table)


@app.command(name="plan")
def plan(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Source address."),
    destination: str = typer.Argument(..., help="Destination address."),
    weight: Optional[float] = typer.Option(None, "--weight", "-w", help="Cargo weight in kg (default 100)."),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Cargo category."),
    waypoints: int = typer.Option(0, "--waypoints", help="Print the route with this many segments."),
):
    """
    Geocodes two addresses and plans a route between them.
    """
    settings: Settings = ctx.obj
    console = Console()

    geocoder = Geocoder(
        user_agent=settings.nominatim_user_agent,
        delay_seconds=settings.geocode_delay_seconds,
        timeout=settings.geocode_timeout_seconds,
    )
    planner = RoutePlanner(geocoder=geocoder)

    rprint(f"[bold cyan]Planning route from {escape(source)} to {escape(destination)}...[/bold cyan]")
    try:
        route_plan = planner.plan_route(source, destination, weight, category)
    except RoutePlanningError as e:
        rprint(f"[bold red]:x: {e}[/bold red]")
        raise typer.Exit(code=1)

    route_estimate = route_plan.estimate
    colour = get_route_style(route_estimate.mode)
    origin = describe_location(route_plan.source, "source")
    target = describe_location(route_plan.destination, "destination")

    console.print(
        Panel(
            f"[bold]{escape(origin.name)}[/bold] → [bold]{escape(target.name)}[/bold]\n"
            f"Distance: {route_estimate.distance_km:.1f} km\n"
            f"Estimated Cost: ${route_estimate.cost_usd}\n"
            f"ETA: {route_estimate.duration_hours} hours",
            title=MODE_LABELS[route_estimate.mode],
            border_style=colour,
        )
    )

    points = generate_route_points(
        route_plan.source.location,
        route_plan.destination.location,
        route_estimate.mode,
        num_points=max(waypoints, 1),
    )
    (mid_lat, mid_lon), heading = position_along_route(points, 0.5)
    vehicle = describe_vehicle(route_plan)

    vehicle_table = Table(title="Vehicle", show_header=False)
    vehicle_table.add_column("Field", style="cyan", width=12)
    vehicle_table.add_column("Value", style="magenta")
    vehicle_table.add_row("ID", vehicle.vehicle_id)
    vehicle_table.add_row("Status", vehicle.status)
    vehicle_table.add_row("Speed", vehicle.speed)
    vehicle_table.add_row("ETA", vehicle.eta.strftime("%H:%M:%S"))
    vehicle_table.add_row("Cargo", escape(vehicle.cargo))
    vehicle_table.add_row("Halfway", f"{mid_lat:.4f}, {mid_lon:.4f} heading {heading:.0f}°")
    console.print(vehicle_table)

    if waypoints > 0:
        path = Table(title="Waypoints", show_header=True, header_style="bold blue")
        path.add_column("#", style="dim")
        path.add_column("Latitude", justify="right")
        path.add_column("Longitude", justify="right")
        for index, (lat, lon) in enumerate(points):
            path.add_row(str(index), f"{lat:.4f}", f"{lon:.4f}")
        console.print(path)

    console.print(_routes_table(planner.routes))


if __name__ == "__main__":
    app()
