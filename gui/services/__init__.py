from .clients import get_task_client  # noqa: F401
