"""
KitchenOPS package

This package models the kitchen side of a restaurant: stations that hold
dishes and ingredient stock, and a station manager that keeps them in an
ordered collection and routes preparation and replenishment requests.
It separates the domain objects, the station manager, static data tables
and configuration into distinct subpackages.
"""

__all__ = ["core", "domain", "data", "config"]
