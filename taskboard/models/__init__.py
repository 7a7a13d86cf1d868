"""Data schemas and validation."""
from .schemas import Task, ToggleResult

__all__ = [
    "Task",
    "ToggleResult",
]
