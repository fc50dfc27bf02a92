"""Error handling and exception definitions for swfchart."""

from pydantic import ValidationError as PydanticValidationError

from .enums import ErrorCode
from .models import ErrorDetail, ErrorResponse


class SwfChartError(Exception):
    """Base exception for all swfchart errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        details: list[ErrorDetail] | None = None,
        hint: str | None = None,
    ):
        """Initialize swfchart error.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            details: Optional detailed error information
            hint: Optional correction hint for the caller
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or []
        self.hint = hint

    def to_error_response(self) -> ErrorResponse:
        """Convert exception to ErrorResponse model.

        Returns:
            ErrorResponse model instance
        """
        return ErrorResponse(
            code=self.code.value,
            message=self.message,
            details=self.details if self.details else None,
            hint=self.hint,
        )


class ChartSettingsError(SwfChartError):
    """Raised when settings for a chart node fail validation."""

    def __init__(
        self,
        message: str,
        node: str | None = None,
        details: list[ErrorDetail] | None = None,
    ):
        """Initialize settings error."""
        hint = "Attribute values must be strings, numbers, booleans or None"
        if node:
            hint = f"Check the settings passed for <{node}>. " + hint

        super().__init__(
            message=message,
            code=ErrorCode.E400_INVALID_SETTINGS,
            details=details,
            hint=hint,
        )
        self.node = node

    @classmethod
    def from_validation_error(cls, error: PydanticValidationError, node: str | None = None) -> "ChartSettingsError":
        """Build a settings error with one detail per pydantic error."""
        details = [
            ErrorDetail(
                field=".".join(str(part) for part in item["loc"]) or None,
                reason=item["msg"],
                suggestion="Pass a scalar value or leave the attribute unset",
            )
            for item in error.errors()
        ]
        return cls(
            message=f"Invalid settings for {node or 'chart node'}: {error.error_count()} error(s)",
            node=node,
            details=details,
        )


class ChartDataError(SwfChartError):
    """Raised when caller data cannot be represented in the document."""

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        available_columns: list[str] | None = None,
    ):
        """Initialize chart data error."""
        if not hint and available_columns:
            hint = f"Available columns: {', '.join(available_columns[:10])}"
            if len(available_columns) > 10:  # noqa: PLR2004
                hint += f" (and {len(available_columns) - 10} more)"

        super().__init__(
            message=message,
            code=ErrorCode.E422_UNPROCESSABLE,
            hint=hint,
        )


class SerializationError(SwfChartError):
    """Raised when the document tree cannot be rendered."""

    def __init__(self, message: str = "Failed to serialize chart document"):
        """Initialize serialization error."""
        super().__init__(
            message=message,
            code=ErrorCode.E500_SERIALIZATION,
            hint="This is an unexpected error. The document may contain values lxml cannot encode.",
        )
