"""Road map adapters - Implementations of the RoadMapRepositoryPort.

Available implementations:
- CSVRoadMapRepository: Loads locations, roads and trips from CSV files
"""

from .csv_repository import CSVRoadMapRepository

__all__ = ["CSVRoadMapRepository"]
