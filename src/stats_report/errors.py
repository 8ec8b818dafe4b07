"""Error handling for stats report."""
import logging
from typing import Any, Dict, Optional

from mcp.types import ErrorData, INVALID_PARAMS, INTERNAL_ERROR


def log_error(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    logger: Optional[Any] = None
) -> None:
    """Log an error with context."""
    logger = logger or logging.getLogger(__name__)

    error_info = {
        "error_type": error.__class__.__name__,
        "error_message": str(error)
    }
    if context:
        error_info["context"] = context
    if isinstance(error, StatsReportError):
        error_info["code"] = error.code
        error_info["details"] = error.details

    logger.error("Stats report error occurred", extra={"data": error_info})


class StatsReportError(Exception):
    """Base error class for stats report."""
    def __init__(
        self,
        message: str,
        code: int = INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_error_data(self) -> ErrorData:
        """Convert to ErrorData format."""
        return ErrorData(
            code=self.code,
            message=str(self),
            data=self.details
        )


class SourceUnavailable(StatsReportError):
    """The backing resource of a number source cannot be read."""
    def __init__(self, key: str, reason: Optional[str] = None):
        message = f"File not found: {key}" if reason is None else f"{reason}: {key}"
        super().__init__(
            message,
            code=INVALID_PARAMS,
            details={"key": key}
        )
        self.key = key


class UnsupportedStatistic(StatsReportError):
    """Unknown statistic requested."""
    def __init__(self, name: str):
        super().__init__(
            f"Unsupported statistic: {name}",
            code=INVALID_PARAMS,
            details={"statistic": name}
        )
