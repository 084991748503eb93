from .activity import (
    ActivityCreate,
    ActivityRead,
    ActivityStatisticsRead,
    ActivityUpdate,
    HealthRead,
    MessageResponse,
)

__all__ = [
    "ActivityCreate",
    "ActivityRead",
    "ActivityStatisticsRead",
    "ActivityUpdate",
    "HealthRead",
    "MessageResponse",
]
