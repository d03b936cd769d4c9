"""
Infrastructure: Logger Adapter

Adapter for StructuredLogger to implement the ILogger interface used by
the use cases.
"""

from typing import Dict, Any, Optional
from record_sync.logging_utils import StructuredLogger
from record_sync.models import EventType


class LoggerAdapter:
    """
    Adapter that wraps StructuredLogger to implement ILogger protocol.
    """

    def __init__(self, logger: StructuredLogger):
        self.logger = logger

    def log_event(
        self,
        trace_id: str,
        event_type: str,
        data: Any,
        metrics: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log an event with metrics.

        Args:
            trace_id: Correlation ID
            event_type: Name of an EventType member, e.g. "RECORD_UPLOADED"
            data: Event data
            metrics: Metrics to track

        Raises:
            KeyError: if event_type is not an EventType member name
        """
        self.logger.log_event(
            trace_id=trace_id,
            event_type=EventType[event_type],
            payload=data,
            metrics=metrics or {},
        )
