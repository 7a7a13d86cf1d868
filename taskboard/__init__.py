"""
Taskboard - To-Do List Client

Fetch, create, toggle and delete tasks held by a remote task store.
"""

__version__ = "1.0.0"

from .errors import TaskStoreError, FetchError, CreateError, UpdateError, DeleteError
from .task_client import TaskStoreClient

__all__ = [
    "TaskStoreClient",
    "TaskStoreError",
    "FetchError",
    "CreateError",
    "UpdateError",
    "DeleteError",
]
