"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the transit line core and the
collaborators it relies on, so storage can be swapped without touching
the domain.
"""

from .repository import LineRepositoryPort, StationRepositoryPort

__all__ = [
    "StationRepositoryPort",
    "LineRepositoryPort",
]
