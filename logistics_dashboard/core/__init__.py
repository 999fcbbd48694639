"""
Core models, sample data and route planning for the logistics dashboard.
"""
