"""
Infrastructure: HTTP Todo Repository

Concrete implementation of ITodoRepository against a REST-style JSON API
using the requests library.
"""

import uuid
from typing import Any, List, Optional

import requests

from record_sync.domain.exceptions import RequestError, SerializationError
from record_sync.domain.todo.entities import Todo
from record_sync.logging_utils import StructuredLogger
from record_sync.models import ComponentType, MessageDirection


class HttpTodoRepository:
    """
    Todo repository backed by an HTTP API.

    Endpoints:
    - GET  {base_url}/todos       -> JSON array of todos
    - GET  {base_url}/todos/{id}  -> single todo
    - POST {base_url}/todos       -> create, success is any 2xx status
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 30,
    ):
        """
        Initialize HTTP todo repository.

        Args:
            base_url: API root, e.g. "https://jsonplaceholder.typicode.com"
            session: Shared HTTP session (a new one is created if omitted)
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.logger = StructuredLogger(ComponentType.TODO_SYNC)

    def find_all(self) -> List[Todo]:
        """
        Fetch every todo.

        Any malformed element fails the whole call; no partial list is
        returned.
        """
        payload = self._get_json(f"{self.base_url}/todos", "todo_find_all")
        if not isinstance(payload, list):
            raise SerializationError(
                f"expected a JSON array of todos, got {type(payload).__name__}"
            )
        return [self._to_todo(item) for item in payload]

    def find_by_id(self, todo_id: int) -> Todo:
        payload = self._get_json(f"{self.base_url}/todos/{todo_id}", "todo_find_by_id")
        return self._to_todo(payload)

    def create(self, todo: Todo) -> None:
        """
        POST the todo. The response body is discarded.

        Raises:
            RequestError: "http error" for any status outside [200, 300)
        """
        url = f"{self.base_url}/todos"
        trace_id = str(uuid.uuid4())
        body = todo.to_dict()

        self.logger.log_message(
            trace_id=trace_id,
            direction=MessageDirection.REQUEST,
            operation="todo_create",
            payload=body,
            target={"url": url, "method": "POST"},
        )

        try:
            with self.session.post(url, json=body, timeout=self.timeout) as response:
                status_code = response.status_code
        except requests.exceptions.RequestException as e:
            self.logger.logger.error(f"Todo create request failed: {e}")
            raise RequestError(str(e)) from e

        self.logger.log_message(
            trace_id=trace_id,
            direction=MessageDirection.RESPONSE,
            operation="todo_create",
            payload={},
            target={"url": url, "status_code": status_code},
        )

        if 200 <= status_code < 300:
            return
        raise RequestError("http error", status_code=status_code)

    def _get_json(self, url: str, operation: str) -> Any:
        """Issue a GET and decode the JSON body."""
        trace_id = str(uuid.uuid4())
        self.logger.log_message(
            trace_id=trace_id,
            direction=MessageDirection.REQUEST,
            operation=operation,
            payload={},
            target={"url": url, "method": "GET"},
        )

        try:
            with self.session.get(url, timeout=self.timeout) as response:
                status_code = response.status_code
                if not 200 <= status_code < 300:
                    self.logger.logger.error(f"GET {url} returned {status_code}")
                    raise RequestError(
                        f"GET {url} returned {status_code}", status_code=status_code
                    )
                payload = response.json()
        except ValueError as e:
            # requests' JSONDecodeError is both a ValueError and a RequestException
            raise SerializationError(f"invalid JSON from {url}: {e}") from e
        except requests.exceptions.RequestException as e:
            self.logger.logger.error(f"Todo request failed: {e}")
            raise RequestError(str(e)) from e

        self.logger.log_message(
            trace_id=trace_id,
            direction=MessageDirection.RESPONSE,
            operation=operation,
            payload=payload,
            target={"url": url, "status_code": status_code},
        )
        return payload

    @staticmethod
    def _to_todo(item: Any) -> Todo:
        if not isinstance(item, dict):
            raise SerializationError(
                f"expected a JSON object for a todo, got {type(item).__name__}"
            )
        return Todo.from_dict(item)
