"""
Todo sync entry point.

Fetches every todo from the configured API and logs it. Any failure is
fatal and exits with status 1.
"""

import sys
import uuid

from record_sync.domain.exceptions import RecordSyncError
from record_sync.infrastructure.todo.factory import TodoSyncFactory
from record_sync.logging_utils import StructuredLogger
from record_sync.models import ComponentType, EventType


def main() -> int:
    logger = StructuredLogger(ComponentType.TODO_SYNC)
    use_cases = TodoSyncFactory.create_from_env()

    try:
        todos = use_cases.find_all.execute()
    except RecordSyncError as e:
        logger.log_event(
            trace_id=str(uuid.uuid4()),
            event_type=EventType.RUN_FAILED,
            payload={"error": str(e), "type": type(e).__name__},
        )
        raise SystemExit(1) from e

    for todo in todos:
        logger.logger.info(repr(todo))
    return 0


if __name__ == "__main__":
    sys.exit(main())
