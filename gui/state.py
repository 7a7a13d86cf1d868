"""Application state container.

Owned by one TaskListController per list view; never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from taskboard.models.schemas import Task


@dataclass(frozen=True)
class Idle:
    """No delete pending; the confirmation dialog is closed."""


@dataclass(frozen=True)
class PendingConfirm:
    """A delete of ``task_id`` awaits confirmation; the dialog is open."""

    task_id: str


DeleteFlow = Union[Idle, PendingConfirm]
IDLE = Idle()


@dataclass
class AppState:
    """Holds the local task list and ephemeral UI state."""

    tasks: List[Task] = field(default_factory=list)
    draft: str = ""
    delete_flow: DeleteFlow = IDLE

    # Status bar
    status_message: str = "Ready"
    is_busy: bool = False
    last_error: Optional[str] = None
    last_latency_ms: Optional[float] = None

    @property
    def pending_delete_id(self) -> Optional[str]:
        flow = self.delete_flow
        return flow.task_id if isinstance(flow, PendingConfirm) else None

    @property
    def confirm_open(self) -> bool:
        return isinstance(self.delete_flow, PendingConfirm)

    def find(self, task_id: str) -> Optional[Task]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def counts(self) -> tuple:
        """Return (open, done) task counts."""
        done = sum(1 for t in self.tasks if t.completed)
        return len(self.tasks) - done, done
