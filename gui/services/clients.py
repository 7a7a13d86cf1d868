"""Client factories for the GUI layer."""

from __future__ import annotations

from typing import Optional

from taskboard.config import Settings, get_settings
from taskboard.task_client import TaskStoreClient


def get_task_client(settings: Optional[Settings] = None) -> TaskStoreClient:
    """Return a task store client configured from settings."""

    settings = settings or get_settings()
    return TaskStoreClient(base_url=settings.api_url, timeout=settings.request_timeout)
