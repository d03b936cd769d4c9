"""
User export entry point.

Reads every user from the database and uploads each one to object
storage. Stops at the first failure and exits with status 1.
"""

import sys
import uuid

from record_sync.domain.exceptions import RecordSyncError
from record_sync.infrastructure.user.factory import UserExportFactory
from record_sync.logging_utils import StructuredLogger
from record_sync.models import ComponentType, EventType


def main() -> int:
    logger = StructuredLogger(ComponentType.USER_EXPORT)
    use_cases = UserExportFactory.create_from_env()

    try:
        users = use_cases.find_all.execute()
        for user in users:
            use_cases.upload.execute(user)
    except RecordSyncError as e:
        logger.log_event(
            trace_id=str(uuid.uuid4()),
            event_type=EventType.RUN_FAILED,
            payload={"error": str(e), "type": type(e).__name__},
        )
        raise SystemExit(1) from e

    logger.logger.info(f"Exported {len(users)} user(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
