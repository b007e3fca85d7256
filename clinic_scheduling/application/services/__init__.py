# Services package (re-export for stable imports)
from .availability_index import AvailabilityIndex
from .scheduling_service import SchedulingManager

__all__ = [
    "AvailabilityIndex",
    "SchedulingManager",
]
