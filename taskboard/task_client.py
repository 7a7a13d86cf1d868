"""
Task Store Client - Talk to the remote to-do API.

Four operations map onto four REST calls. Each performs exactly one round
trip, never retries, and either returns validated data or raises the
operation's TaskStoreError subclass.
"""
import time
from typing import Any, List, Optional, Type
from urllib.parse import quote

import requests
from pydantic import ValidationError

from .config import get_settings
from .errors import CreateError, DeleteError, FetchError, TaskStoreError, UpdateError
from .models.schemas import Task, ToggleResult
from .utils.logger import get_logger

logger = get_logger(__name__)


class TaskStoreClient:
    """
    Client for the remote task store.

    Provides methods to:
    - List tasks
    - Create a task
    - Toggle a task's completion
    - Delete a task
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the task store client.

        Args:
            base_url: Store base URL (defaults to TASKBOARD_API_URL)
            timeout: Seconds per request; None waits indefinitely
            session: Optional requests.Session to reuse connections
        """
        settings = get_settings()
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.session = session
        self.last_latency_ms: Optional[float] = None

    def _get_headers(self) -> dict:
        return {"Accept": "application/json"}

    def _request(
        self,
        method: str,
        endpoint: str,
        error_cls: Type[TaskStoreError],
        **kwargs,
    ) -> requests.Response:
        """
        Make a single API request.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API path below the base URL
            error_cls: Error type raised on any failure
            **kwargs: Additional arguments for requests

        Returns:
            The successful response
        """
        url = f"{self.base_url}{endpoint}"
        send = self.session.request if self.session is not None else requests.request

        started = time.perf_counter()
        try:
            response = send(method, url, headers=self._get_headers(), timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise error_cls(f"{error_cls.operation} request failed: {exc}", cause=exc) from exc
        finally:
            self.last_latency_ms = (time.perf_counter() - started) * 1000

        logger.debug(
            "%s %s -> %s (%.0fms)", method, endpoint, response.status_code, self.last_latency_ms
        )

        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise error_cls(
                f"{error_cls.operation} rejected by task store",
                cause=exc,
                status_code=response.status_code,
            ) from exc
        return response

    @staticmethod
    def _json(response: requests.Response, error_cls: Type[TaskStoreError]) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise error_cls(
                f"{error_cls.operation} returned invalid JSON",
                cause=exc,
                status_code=response.status_code,
            ) from exc

    @staticmethod
    def _task_path(task_id: str) -> str:
        return quote(str(task_id), safe="")

    def list_tasks(self) -> List[Task]:
        """
        List every task in the store.

        Returns:
            Tasks in store order (possibly empty)

        Raises:
            FetchError: transport failure, or a payload that is not an array of tasks
        """
        response = self._request("GET", "/todos", FetchError)
        data = self._json(response, FetchError)
        if not isinstance(data, list):
            logger.error("Task list response is not an array: %r", data)
            raise FetchError(
                "list returned a non-array payload", status_code=response.status_code
            )
        try:
            return [Task.model_validate(item) for item in data]
        except ValidationError as exc:
            raise FetchError(
                f"list returned an invalid task: {exc}",
                cause=exc,
                status_code=response.status_code,
            ) from exc

    def create_task(self, description: str) -> Task:
        """
        Create a task.

        Args:
            description: Non-empty task text

        Returns:
            The task as stored, with its generated id
        """
        if not description:
            raise CreateError("create needs a non-empty description")
        response = self._request("POST", "/todos/add", CreateError, json={"task": description})
        data = self._json(response, CreateError)
        try:
            return Task.model_validate(data)
        except ValidationError as exc:
            raise CreateError(
                f"create returned an invalid task: {exc}",
                cause=exc,
                status_code=response.status_code,
            ) from exc

    def toggle_task(self, task_id: str) -> bool:
        """
        Flip a task's completion on the store.

        Args:
            task_id: Store-assigned task id

        Returns:
            The task's new completed value
        """
        response = self._request("PUT", f"/todos/toggle/{self._task_path(task_id)}", UpdateError)
        data = self._json(response, UpdateError)
        try:
            return ToggleResult.model_validate(data).completed
        except ValidationError as exc:
            raise UpdateError(
                f"toggle returned an invalid payload: {exc}",
                cause=exc,
                status_code=response.status_code,
            ) from exc

    def delete_task(self, task_id: str) -> None:
        """
        Remove a task from the store. Any response body is ignored.

        Args:
            task_id: Store-assigned task id
        """
        self._request("DELETE", f"/todos/{self._task_path(task_id)}", DeleteError)
        return None
