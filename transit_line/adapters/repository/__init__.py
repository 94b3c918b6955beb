"""Repository adapters - Implementations of the repository ports.

Available implementations:
- InMemoryStationRepository: Thread-safe dictionary of stations
- InMemoryLineRepository: Thread-safe dictionary of lines
- CSVNetworkLoader: Seeds repositories from CSV files
"""

from .csv_loader import CSVNetworkLoader
from .memory_repository import InMemoryLineRepository, InMemoryStationRepository

__all__ = ["CSVNetworkLoader", "InMemoryLineRepository", "InMemoryStationRepository"]
