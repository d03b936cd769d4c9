from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
from enum import Enum
import time


class ComponentType(str, Enum):
    TODO_SYNC = "TodoSync"
    USER_EXPORT = "UserExport"


class EventType(str, Enum):
    RECORDS_FETCHED = "Records_Fetched"
    RECORD_CREATED = "Record_Created"
    RECORD_UPLOADED = "Record_Uploaded"
    RUN_FAILED = "Run_Failed"


class MessageDirection(str, Enum):
    """Which side of an outbound call a message log line describes."""
    REQUEST = "request"
    RESPONSE = "response"


class LogEntry(BaseModel):
    trace_id: str
    timestamp: float = Field(default_factory=time.time)
    component: ComponentType
    event_type: EventType
    payload_hash: Optional[str] = None
    metrics: Dict[str, Any] = Field(default_factory=dict)
    message: Optional[str] = None


class MessageEntry(BaseModel):
    """One outbound call to the todo API, the user table or the object store."""
    trace_id: str
    timestamp: float = Field(default_factory=time.time)
    component: ComponentType
    direction: MessageDirection
    operation: str  # e.g. "todo_find_all", "user_upload"
    target: Dict[str, Any] = Field(default_factory=dict)  # url / table / bucket+key
    payload_hash: str
    content_size_bytes: int
    truncated: bool = False
    payload: Optional[Any] = None  # omitted when full payload logging is off
