"""
Core services for KitchenOPS: the station manager and the helpers that
seed it from preset tables.
"""

from .station_manager import StationManager

__all__ = ["StationManager"]
