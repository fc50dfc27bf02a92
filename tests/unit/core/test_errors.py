"""Unit tests for error handling."""

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from swfchart.core.enums import ErrorCode
from swfchart.core.errors import ChartDataError, ChartSettingsError, SerializationError, SwfChartError
from swfchart.core.models import ErrorDetail


class TestSwfChartError:
    """Test base SwfChartError class."""

    def test_basic_error(self) -> None:
        """Test basic error creation."""
        error = SwfChartError(message="Test error", code=ErrorCode.E422_UNPROCESSABLE)
        assert str(error) == "Test error"
        assert error.code == ErrorCode.E422_UNPROCESSABLE
        assert error.details == []
        assert error.hint is None

    def test_to_error_response(self) -> None:
        """Test conversion to ErrorResponse."""
        error = SwfChartError(
            message="Test error",
            code=ErrorCode.E400_INVALID_SETTINGS,
            details=[ErrorDetail(field="x", reason="bad")],
            hint="Fix your input",
        )
        response = error.to_error_response()
        assert response.code == "E400_INVALID_SETTINGS"
        assert response.message == "Test error"
        assert response.hint == "Fix your input"
        assert response.details[0].field == "x"

    def test_empty_details_omitted(self) -> None:
        """Test that no details serialize as None."""
        response = SwfChartError(message="m", code=ErrorCode.E500_SERIALIZATION).to_error_response()
        assert response.details is None


class TestChartSettingsError:
    """Test ChartSettingsError class."""

    def test_hint_names_node(self) -> None:
        """Test hint with node name."""
        error = ChartSettingsError(message="Invalid", node="legend")
        assert error.code == ErrorCode.E400_INVALID_SETTINGS
        assert error.hint.startswith("Check the settings passed for <legend>.")

    def test_hint_without_node(self) -> None:
        """Test hint without node name."""
        error = ChartSettingsError(message="Invalid")
        assert error.hint == "Attribute values must be strings, numbers, booleans or None"

    def test_from_validation_error(self) -> None:
        """Test one detail per pydantic error."""

        class Sample(BaseModel):
            x: int
            y: int

        try:
            Sample.model_validate({"x": "a", "y": "b"})
        except PydanticValidationError as e:
            error = ChartSettingsError.from_validation_error(e, node="sample")
        else:
            raise AssertionError

        assert [detail.field for detail in error.details] == ["x", "y"]
        assert "2 error(s)" in error.message
        assert error.node == "sample"


class TestChartDataError:
    """Test ChartDataError class."""

    def test_with_many_columns(self) -> None:
        """Test hint with many available columns."""
        columns = [f"col_{i}" for i in range(20)]
        error = ChartDataError(message="Missing", available_columns=columns)
        assert error.code == ErrorCode.E422_UNPROCESSABLE
        assert "col_9" in error.hint
        assert "col_10" not in error.hint
        assert "(and 10 more)" in error.hint

    def test_custom_hint(self) -> None:
        """Test that an explicit hint wins."""
        error = ChartDataError(message="Bad", hint="Use valid names", available_columns=["a"])
        assert error.hint == "Use valid names"


def test_serialization_error_defaults() -> None:
    """Test SerializationError defaults."""
    error = SerializationError()
    assert error.code == ErrorCode.E500_SERIALIZATION
    assert error.message == "Failed to serialize chart document"
