"""Test doubles for the task store client and the async runner."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from taskboard.errors import CreateError, DeleteError, FetchError, UpdateError
from taskboard.models.schemas import Task


class FakeTaskStore:
    """
    In-memory stand-in for TaskStoreClient.

    - Records every call for assertions
    - Fails any operation named in ``fail`` ("list", "create", "toggle", "delete")
    - Hands out fresh Task objects so local state never aliases store rows
    """

    def __init__(self, tasks: Optional[List[dict]] = None) -> None:
        self.rows: Dict[str, dict] = {}
        for row in tasks or []:
            self.rows[str(row["id"])] = dict(row)
        self.calls: List[Tuple[Any, ...]] = []
        self.fail: Set[str] = set()
        self.last_latency_ms: Optional[float] = 999.0
        self._next_id = len(self.rows) + 1

    def ids(self) -> List[str]:
        return list(self.rows)

    def list_tasks(self) -> List[Task]:
        self.calls.append(("list",))
        if "list" in self.fail:
            raise FetchError("list request failed: connection refused")
        return [Task.model_validate(row) for row in self.rows.values()]

    def create_task(self, description: str) -> Task:
        self.calls.append(("create", description))
        if "create" in self.fail:
            raise CreateError("create rejected by task store", status_code=500)
        task_id = str(self._next_id)
        self._next_id += 1
        self.rows[task_id] = {"id": task_id, "task": description, "completed": False}
        return Task.model_validate(self.rows[task_id])

    def toggle_task(self, task_id: str) -> bool:
        self.calls.append(("toggle", task_id))
        if "toggle" in self.fail:
            raise UpdateError("toggle request failed: timed out")
        if task_id not in self.rows:
            raise UpdateError("toggle rejected by task store", status_code=404)
        row = self.rows[task_id]
        row["completed"] = not row["completed"]
        return row["completed"]

    def delete_task(self, task_id: str) -> None:
        self.calls.append(("delete", task_id))
        if "delete" in self.fail:
            raise DeleteError("delete rejected by task store", status_code=500)
        if task_id not in self.rows:
            raise DeleteError("delete rejected by task store", status_code=404)
        del self.rows[task_id]


class DeferredRunner:
    """
    Runner that holds work until the test says so.

    ``work(i)`` performs the network half of job ``i``; ``deliver(i)`` hands
    its result to the controller. Splitting the two lets tests reorder
    responses relative to requests.
    """

    def __init__(self) -> None:
        self.jobs: List[dict] = []

    def __call__(self, fn: Callable[[], Any], callback: Callable[[Any], Any]) -> None:
        self.jobs.append({"fn": fn, "callback": callback, "done": False})
        return None

    def work(self, index: int) -> None:
        job = self.jobs[index]
        job["result"] = job["fn"]()
        job["done"] = True

    def deliver(self, index: int) -> Any:
        job = self.jobs[index]
        if not job["done"]:
            self.work(index)
        return job["callback"](job["result"])

    def run_all(self) -> List[Any]:
        return [self.deliver(i) for i in range(len(self.jobs))]
