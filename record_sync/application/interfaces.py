"""
Logging interface shared by the use cases.
"""

from typing import Any, Dict, Optional, Protocol


class ILogger(Protocol):
    """Interface for logging operations."""

    def log_event(
        self,
        trace_id: str,
        event_type: str,
        data: Any,
        metrics: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log an event with metrics."""
        ...
