"""Python client for the Taskboard API with a persisted login session."""

from taskboard.client.api import SessionAuth, TaskboardApiError, TaskboardClient
from taskboard.client.session import SessionState, SessionStore

__all__ = [
    "SessionAuth",
    "SessionState",
    "SessionStore",
    "TaskboardApiError",
    "TaskboardClient",
]
