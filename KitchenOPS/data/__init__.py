"""Static data tables for KitchenOPS (station presets)."""
