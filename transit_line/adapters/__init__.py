"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the transit line core to its collaborators:
- Station and line storage (in-memory)
- Network seeding (CSV files)
"""
