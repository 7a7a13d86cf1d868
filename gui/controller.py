"""Task list controller.

Owns the local task list, the draft buffer and the delete flow, and keeps
them in step with the remote task store. Every action issues at most one
store call and mutates state only after that call succeeds; on failure
state is left exactly as it was.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Set

from gui.state import IDLE, AppState, PendingConfirm
from gui.utils.async_tasks import Runner, run_async
from taskboard.errors import TaskStoreError
from taskboard.models.schemas import Task
from taskboard.task_client import TaskStoreClient
from taskboard.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ActionResult:
    """Outcome of one controller action.

    ``applied`` is False when nothing reached local state: a no-op, a
    failure, or a response that arrived too late to be used.
    """

    ok: bool
    value: Any = None
    error: Optional[TaskStoreError] = None
    applied: bool = True

    @classmethod
    def success(cls, value: Any = None) -> "ActionResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: TaskStoreError) -> "ActionResult":
        return cls(ok=False, error=error, applied=False)

    @classmethod
    def noop(cls) -> "ActionResult":
        return cls(ok=False, applied=False)

    def discarded(self) -> "ActionResult":
        return replace(self, applied=False)


def sort_tasks(tasks: Iterable[Task]) -> List[Task]:
    """Open tasks first, then completed; order within each group is kept."""
    return sorted(tasks, key=lambda t: t.completed)


class SortedTasks:
    """Lazy, restartable display order over a task list.

    Each iteration walks the underlying list again, so in-place toggles
    show up, and yields the same order as ``sort_tasks``.
    """

    def __init__(self, tasks: List[Task]):
        self._tasks = tasks

    def __iter__(self) -> Iterator[Task]:
        for task in self._tasks:
            if not task.completed:
                yield task
        for task in self._tasks:
            if task.completed:
                yield task

    def __len__(self) -> int:
        return len(self._tasks)

    def ids(self) -> List[str]:
        return [task.id for task in self]


class TaskListController:
    """Drive the four store operations and the two-step delete flow."""

    def __init__(
        self,
        client: TaskStoreClient,
        state: Optional[AppState] = None,
        runner: Optional[Runner] = None,
        on_change: Optional[Callable[[AppState], None]] = None,
    ):
        self.client = client
        self.state = state if state is not None else AppState()
        self.runner: Runner = runner or run_async
        self.on_change = on_change
        self._alive = True
        self._in_flight = 0
        self._toggle_seq: Dict[str, int] = {}
        self._toggle_applied: Dict[str, int] = {}
        self._deleting: Set[str] = set()

    # ------------------- Lifecycle ----------------------------
    @property
    def alive(self) -> bool:
        return self._alive

    def close(self) -> None:
        """Stop applying responses; anything still in flight is dropped."""
        self._alive = False

    def _notify(self) -> None:
        if self.on_change is not None and self._alive:
            self.on_change(self.state)

    def _dispatch(
        self,
        label: str,
        call: Callable[[], Any],
        apply: Callable[[Any], ActionResult],
        on_failure: Optional[Callable[[TaskStoreError], None]] = None,
    ) -> Any:
        """Run ``call`` through the runner, then ``apply`` its value.

        Every call ends in ``done`` so in-flight bookkeeping is always
        released. Unexpected errors are logged with a traceback and reported
        as a failed result wrapping the original exception.
        """

        def work():
            started = time.perf_counter()
            try:
                value = call()
            except TaskStoreError as exc:
                outcome = ActionResult.failure(exc)
            except Exception as exc:
                logger.exception("Unexpected error %s", label)
                outcome = ActionResult.failure(
                    TaskStoreError(f"unexpected error {label}: {exc}", cause=exc)
                )
            else:
                outcome = ActionResult.success(value)
            return outcome, (time.perf_counter() - started) * 1000

        def done(packed):
            outcome, latency = packed
            self._in_flight -= 1
            if not self._alive:
                logger.debug("Discarding %s response after teardown", label)
                return outcome.discarded()

            state = self.state
            state.is_busy = self._in_flight > 0
            state.last_latency_ms = latency
            if outcome.ok:
                result = apply(outcome.value)
                if result.applied:
                    state.last_error = None
            else:
                logger.error("Error %s: %s", label, outcome.error)
                state.last_error = str(outcome.error)
                state.status_message = f"Error {label}"
                if on_failure is not None:
                    on_failure(outcome.error)
                result = outcome
            self._notify()
            return result

        self._in_flight += 1
        self.state.is_busy = True
        self.state.status_message = label.capitalize() + "..."
        self._notify()
        return self.runner(work, done)

    # ------------------- Operations ----------------------------
    def load_all(self) -> Any:
        """Replace the local list with the store's full list."""

        def apply(tasks: List[Task]) -> ActionResult:
            unique: List[Task] = []
            seen: Set[str] = set()
            for task in tasks:
                if task.id in seen:
                    logger.warning("Task store returned duplicate id %s; keeping first", task.id)
                    continue
                seen.add(task.id)
                unique.append(task)
            self.state.tasks = unique
            self.state.status_message = f"Loaded {len(unique)} tasks"
            return ActionResult.success(unique)

        return self._dispatch("fetching tasks", self.client.list_tasks, apply)

    def set_draft(self, text: str) -> None:
        self.state.draft = text

    def add_task(self, description: Optional[str] = None) -> Any:
        """Create a task from ``description`` (or the draft when omitted).

        Empty and whitespace-only text is ignored without a request.
        """
        text = self.state.draft if description is None else description
        text = (text or "").strip()
        if not text:
            return ActionResult.noop()

        def apply(task: Task) -> ActionResult:
            if self.state.find(task.id) is not None:
                logger.warning("Created task %s is already listed", task.id)
            else:
                self.state.tasks.append(task)
            self.state.draft = ""
            self.state.status_message = "Task added"
            return ActionResult.success(task)

        return self._dispatch("adding task", lambda: self.client.create_task(text), apply)

    def toggle_task(self, task_id: str) -> Any:
        """Flip completion on the store, then mirror the confirmed value."""
        seq = self._toggle_seq.get(task_id, 0) + 1
        self._toggle_seq[task_id] = seq

        def apply(completed: bool) -> ActionResult:
            # Only a newer *applied* response makes this one stale
            if seq < self._toggle_applied.get(task_id, 0):
                logger.debug("Dropping stale toggle response for %s", task_id)
                return ActionResult.success(completed).discarded()
            task = self.state.find(task_id)
            if task is None:
                return ActionResult.success(completed).discarded()
            self._toggle_applied[task_id] = seq
            task.completed = completed
            self.state.status_message = "Task completed" if completed else "Task reopened"
            return ActionResult.success(completed)

        return self._dispatch("updating task", lambda: self.client.toggle_task(task_id), apply)

    def request_delete(self, task_id: str) -> None:
        self.state.delete_flow = PendingConfirm(task_id)
        self.state.last_error = None
        self._notify()

    def cancel_delete(self) -> None:
        self.state.delete_flow = IDLE
        self._notify()

    def confirm_delete(self) -> Any:
        """Delete the pending task.

        On failure the flow stays pending so the dialog can retry or cancel.
        """
        flow = self.state.delete_flow
        if not isinstance(flow, PendingConfirm):
            return ActionResult.noop()
        task_id = flow.task_id
        if task_id in self._deleting:
            return ActionResult.noop()
        self._deleting.add(task_id)

        def apply(_: Any) -> ActionResult:
            self._deleting.discard(task_id)
            self.state.tasks = [t for t in self.state.tasks if t.id != task_id]
            self._toggle_seq.pop(task_id, None)
            self._toggle_applied.pop(task_id, None)
            if self.state.delete_flow == PendingConfirm(task_id):
                self.state.delete_flow = IDLE
            self.state.status_message = "Task deleted"
            return ActionResult.success(task_id)

        def on_failure(_: TaskStoreError) -> None:
            self._deleting.discard(task_id)

        return self._dispatch(
            "deleting task", lambda: self.client.delete_task(task_id), apply, on_failure
        )

    def sorted_tasks(self) -> SortedTasks:
        return SortedTasks(self.state.tasks)
