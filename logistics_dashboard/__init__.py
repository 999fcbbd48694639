"""
Logistics dashboard: mock shipment data and a geocoding route planner.
"""

__version__ = "0.1.0"
