"""
Transport utilities for the logistics dashboard.

This package contains utilities for estimating route cost and duration and
for generating the waypoints of a planned route.
"""

from logistics_dashboard.utils.transport.estimator import (
    classify_mode,
    estimate_cost,
    estimate_duration,
    estimate_route,
)
from logistics_dashboard.utils.transport.route_path import (
    generate_route_points,
    position_along_route,
)
