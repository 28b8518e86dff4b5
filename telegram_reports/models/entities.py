from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import traceback
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ReportLevel(str, Enum):
    INFORMATION = "INFORMATION"
    WARNING = "WARNING"
    DEBUG = "DEBUG"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
    CRITICAL_ERROR = "CRITICAL_ERROR"


@dataclass(frozen=True)
class ExceptionReport:
    message: str
    code: int
    file: str
    line: int
    trace: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ExceptionReport":
        """Snapshot a caught exception: message, numeric code, raising frame and trace text."""
        code = _exception_code(exc)
        tb = exc.__traceback__
        if tb is None:
            return cls(message=str(exc), code=code, file="unknown", line=0, trace=repr(exc))

        # Innermost frame is where the exception was raised.
        frame = traceback.extract_tb(tb)[-1]
        trace = "".join(traceback.format_exception(type(exc), exc, tb)).rstrip("\n")
        return cls(
            message=str(exc),
            code=code,
            file=frame.filename,
            line=frame.lineno or 0,
            trace=trace,
        )


def _exception_code(exc: BaseException) -> int:
    for attr in ("errno", "code", "returncode"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return 0


class Message(BaseModel):
    """Bot API message object returned for an accepted sendMessage call."""

    model_config = ConfigDict(extra="allow")

    message_id: int
    date: int
    chat: dict[str, Any]
    text: Optional[str] = None
