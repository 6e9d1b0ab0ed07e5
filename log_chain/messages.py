from enum import Enum
from dataclasses import dataclass


class LogType(Enum):
    WARNING = "warning"
    ERROR = "error"
    FATAL_ERROR = "fatal_error"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class LogMessage:
    category: LogType
    text: str
