#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Tests for Route Estimator Module

This module tests the route estimator functionality which classifies routes
by distance and estimates their cost and duration.
"""

import unittest

from logistics_dashboard.core.models import Location, RouteEstimate, TransportMode
from logistics_dashboard.utils.geolocation import calculate_distance
from logistics_dashboard.utils.transport.estimator import (
    MAX_WEIGHT_KG,
    classify_mode,
    estimate_cost,
    estimate_duration,
    estimate_route,
    normalize_weight,
)


class TestClassifyMode(unittest.TestCase):
    """Test cases for distance based mode classification"""

    def test_short_routes_are_land(self):
        self.assertEqual(classify_mode(0), TransportMode.LAND)
        self.assertEqual(classify_mode(999), TransportMode.LAND)

    def test_boundaries_belong_to_lower_bucket(self):
        self.assertEqual(classify_mode(1000), TransportMode.LAND)
        self.assertEqual(classify_mode(5000), TransportMode.SEA_LAND)

    def test_just_above_boundaries(self):
        self.assertEqual(classify_mode(1000.01), TransportMode.SEA_LAND)
        self.assertEqual(classify_mode(5000.01), TransportMode.AIR)

    def test_long_routes_are_air(self):
        self.assertEqual(classify_mode(12000), TransportMode.AIR)


class TestEstimateCost(unittest.TestCase):
    """Test cases for cost estimation"""

    def test_air_rate(self):
        self.assertEqual(estimate_cost(1000, "air", 100), 3800)
        self.assertEqual(estimate_cost(1000, TransportMode.AIR, 100), 3800)

    def test_land_and_sea_land_rates(self):
        self.assertEqual(estimate_cost(1000, TransportMode.LAND, 100), 1500)
        self.assertEqual(estimate_cost(1000, TransportMode.SEA_LAND, 100), 2200)

    def test_air_land_label_uses_air_rate(self):
        self.assertEqual(estimate_cost(1000, "air-land", 100), 3800)

    def test_unknown_mode_falls_back_to_land(self):
        for distance in (0, 12.5, 999, 4321.7):
            self.assertEqual(
                estimate_cost(distance, "unknown-mode", 100),
                estimate_cost(distance, "land", 100),
            )
        self.assertEqual(estimate_cost(1000, None, 100), 1500)

    def test_cost_scales_with_weight(self):
        self.assertEqual(estimate_cost(1000, "land", 200), 3000)
        self.assertEqual(estimate_cost(1000, "land", 50), 750)
        self.assertEqual(estimate_cost(1000, "land", "250"), 3750)

    def test_missing_or_invalid_weight_defaults_to_100kg(self):
        expected = estimate_cost(1000, "land", 100)
        for weight in (None, "", "heavy", float("nan"), 0, -20):
            self.assertEqual(estimate_cost(1000, "land", weight), expected)
        self.assertEqual(estimate_cost(1000, "land"), expected)

    def test_rounds_half_up(self):
        # 5 km * 1.5 = 7.5
        self.assertEqual(estimate_cost(5, "land", 100), 8)
        # 3 km * 1.5 = 4.5, which banker's rounding would take down to 4
        self.assertEqual(estimate_cost(3, "land", 100), 5)

    def test_zero_distance(self):
        self.assertEqual(estimate_cost(0, "air", 500), 0)

    def test_huge_weight_is_capped(self):
        cost = estimate_cost(20000, "air", 1e308)
        self.assertIsInstance(cost, int)
        self.assertEqual(cost, estimate_cost(20000, "air", MAX_WEIGHT_KG))


class TestEstimateDuration(unittest.TestCase):
    """Test cases for duration estimation"""

    def test_land_duration(self):
        self.assertEqual(estimate_duration(600, "land"), 10)

    def test_sea_land_and_air_durations(self):
        self.assertEqual(estimate_duration(300, TransportMode.SEA_LAND), 10)
        self.assertEqual(estimate_duration(1600, TransportMode.AIR), 2)
        self.assertEqual(estimate_duration(1600, "air-land"), 2)

    def test_unknown_mode_uses_land_speed(self):
        self.assertEqual(estimate_duration(600, "hovercraft"), 10)
        self.assertEqual(estimate_duration(600), 10)

    def test_rounds_half_up(self):
        # 150 / 60 = 2.5
        self.assertEqual(estimate_duration(150, "land"), 3)

    def test_just_below_half_rounds_down(self):
        # 29.999999999999996 / 60 is the largest float below 0.5
        self.assertEqual(estimate_duration(29.999999999999996, "land"), 0)
        self.assertEqual(estimate_duration(30, "land"), 1)

    def test_short_routes_round_to_zero(self):
        self.assertEqual(estimate_duration(20, "land"), 0)


class TestNormalizeWeight(unittest.TestCase):

    def test_valid_weights(self):
        self.assertEqual(normalize_weight(250), 250.0)
        self.assertEqual(normalize_weight("12.5"), 12.5)

    def test_fallbacks(self):
        for weight in (None, "", "abc", float("inf"), 0, -1):
            self.assertEqual(normalize_weight(weight), 100.0)

    def test_heavy_weights_are_capped(self):
        self.assertEqual(normalize_weight(1e308), MAX_WEIGHT_KG)
        self.assertEqual(normalize_weight(MAX_WEIGHT_KG), MAX_WEIGHT_KG)


class TestEstimateRoute(unittest.TestCase):
    """Test cases for the combined route estimate"""

    def setUp(self):
        self.new_york = Location(latitude=40.7128, longitude=-74.0060)
        self.los_angeles = Location(latitude=34.0522, longitude=-118.2437)
        self.london = Location(latitude=51.5074, longitude=-0.1278)
        self.paris = Location(latitude=48.8566, longitude=2.3522)

    def test_classifies_mode_from_distance(self):
        result = estimate_route(self.new_york, self.los_angeles)
        distance = calculate_distance(self.new_york, self.los_angeles)

        self.assertIsInstance(result, RouteEstimate)
        self.assertEqual(result.mode, TransportMode.SEA_LAND)
        self.assertAlmostEqual(result.distance_km, distance)
        self.assertEqual(result.cost_usd, estimate_cost(distance, TransportMode.SEA_LAND, 100))
        self.assertEqual(result.duration_hours, estimate_duration(distance, TransportMode.SEA_LAND))

    def test_transatlantic_route_is_air(self):
        result = estimate_route(self.new_york, self.london, weight_kg=200)
        self.assertEqual(result.mode, TransportMode.AIR)
        self.assertEqual(
            result.cost_usd, estimate_cost(result.distance_km, TransportMode.AIR, 200)
        )

    def test_short_route_is_land(self):
        result = estimate_route(self.paris, self.london)
        self.assertEqual(result.mode, TransportMode.LAND)
        self.assertEqual(result.duration_hours, 6)  # ~343.5 km at 60 km/h

    def test_explicit_mode_overrides_classification(self):
        result = estimate_route(self.paris, self.london, mode=TransportMode.AIR)
        self.assertEqual(result.mode, TransportMode.AIR)
        self.assertEqual(result.duration_hours, 0)

    def test_identical_points(self):
        result = estimate_route(self.paris, self.paris, weight_kg=1000)
        self.assertEqual(result.distance_km, 0.0)
        self.assertEqual(result.cost_usd, 0)
        self.assertEqual(result.duration_hours, 0)
        self.assertEqual(result.mode, TransportMode.LAND)

    def test_repeated_calls_are_identical(self):
        first = estimate_route(self.new_york, self.los_angeles, weight_kg=150)
        second = estimate_route(self.new_york, self.los_angeles, weight_kg=150)
        self.assertEqual(first, second)
        self.assertEqual(classify_mode(4321.0), classify_mode(4321.0))
        self.assertEqual(estimate_cost(4321.0, "air", 70), estimate_cost(4321.0, "air", 70))
        self.assertEqual(estimate_duration(4321.0, "air"), estimate_duration(4321.0, "air"))


if __name__ == "__main__":
    unittest.main()
