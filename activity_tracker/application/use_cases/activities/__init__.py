"""Use cases for managing activities."""

from .cancel_activity import cancel_activity
from .complete_activity import complete_activity
from .create_activity import create_activity
from .delete_activity import delete_activity
from .get_activity import get_activity
from .get_statistics import get_statistics
from .list_activities import list_activities
from .list_mentors import list_mentors
from .list_recent_activities import list_recent_activities
from .list_upcoming_activities import list_upcoming_activities
from .sync_activities import sync_activities
from .update_activity import update_activity

__all__ = [
    "cancel_activity",
    "complete_activity",
    "create_activity",
    "delete_activity",
    "get_activity",
    "get_statistics",
    "list_activities",
    "list_mentors",
    "list_recent_activities",
    "list_upcoming_activities",
    "sync_activities",
    "update_activity",
]
