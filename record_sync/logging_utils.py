import logging
import json
import os
import hashlib
import time
from typing import Any, Dict, Optional, Tuple
from pythonjsonlogger import jsonlogger
from .models import LogEntry, MessageEntry, ComponentType, EventType, MessageDirection

# Payload logging for outbound calls (todo bodies, user rows, uploaded objects)
ENABLE_FULL_PAYLOAD_LOGGING = os.getenv("ENABLE_FULL_PAYLOAD_LOGGING", "true").lower() == "true"
MAX_PAYLOAD_SIZE_BYTES = int(os.getenv("MAX_PAYLOAD_SIZE_BYTES", "100000"))


class RecordSyncJSONFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(RecordSyncJSONFormatter, self).add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            log_record['timestamp'] = time.time()
        log_record['level'] = (log_record.get('level') or record.levelname).upper()


def get_logger(name: str):
    logger = logging.getLogger(name)
    # Loggers are process-wide; only attach the handler once
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            RecordSyncJSONFormatter('%(timestamp)s %(level)s %(name)s %(message)s')
        )
        logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger


def _canonical_json(payload: Any) -> str:
    return json.dumps(payload, sort_keys=True, default=str)


class StructuredLogger:
    """
    JSON logger for one application component.

    Two kinds of lines are written:
    - events (LogEntry): use-case milestones such as RECORDS_FETCHED
    - messages (MessageEntry): each request/response of an adapter call
    """

    def __init__(self, component: ComponentType):
        self.logger = get_logger(component.value)
        self.component = component

    @staticmethod
    def hash_payload(payload: Any) -> str:
        """Short, key-order independent fingerprint of a payload."""
        return hashlib.sha256(_canonical_json(payload).encode()).hexdigest()[:16]

    def log_event(self,
                  trace_id: str,
                  event_type: EventType,
                  payload: Any,
                  metrics: Dict[str, Any] = None):

        entry = LogEntry(
            trace_id=trace_id,
            component=self.component,
            event_type=event_type,
            payload_hash=self.hash_payload(payload),
            metrics=metrics or {},
            message=str(payload)[:200]
        )
        level = logging.ERROR if event_type == EventType.RUN_FAILED else logging.INFO
        self.logger.log(level, entry.model_dump_json())

    def log_message(self,
                    trace_id: str,
                    direction: MessageDirection,
                    operation: str,
                    payload: Any,
                    target: Optional[Dict[str, Any]] = None):
        """
        Log one side of an outbound call.

        Args:
            trace_id: Correlation ID shared by the request and its response
            direction: MessageDirection.REQUEST or MessageDirection.RESPONSE
            operation: Adapter operation, e.g. "todo_create", "user_find_all"
            payload: Todo body, row summary or uploaded user
            target: Where the call went: {"url": ...}, {"table": ...}, {"bucket": ..., "key": ...}
        """
        logged_payload, size, truncated = self._bounded_payload(payload)

        entry = MessageEntry(
            trace_id=trace_id,
            component=self.component,
            direction=direction,
            operation=operation,
            target=target or {},
            payload_hash=self.hash_payload(payload),
            content_size_bytes=size,
            truncated=truncated,
            payload=logged_payload if ENABLE_FULL_PAYLOAD_LOGGING else None,
        )
        self.logger.info(entry.model_dump_json())

    @staticmethod
    def _bounded_payload(payload: Any) -> Tuple[Any, int, bool]:
        """Return the payload to log, its encoded size, and whether it was cut."""
        encoded = json.dumps(payload, default=str)
        size = len(encoded.encode('utf-8'))
        if size <= MAX_PAYLOAD_SIZE_BYTES:
            return payload, size, False
        return encoded[:MAX_PAYLOAD_SIZE_BYTES], size, True
