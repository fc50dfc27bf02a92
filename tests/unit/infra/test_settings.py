"""Unit tests for environment-driven settings."""

import os
from unittest.mock import patch

from swfchart.core.builder import ChartBuilder
from swfchart.infra.settings import ChartSettings


class TestChartSettings:
    """Tests for ChartSettings."""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self) -> None:
        """Test defaults without environment."""
        settings = ChartSettings(_env_file=None)
        assert settings.license is None
        assert settings.pretty_print is False

    @patch.dict(os.environ, {"SWFCHART_LICENSE": "ENVKEY", "SWFCHART_PRETTY_PRINT": "true"}, clear=True)
    def test_from_environment(self) -> None:
        """Test values read from the environment."""
        settings = ChartSettings(_env_file=None)
        assert settings.license == "ENVKEY"
        assert settings.pretty_print is True

    @patch.dict(os.environ, {"SWFCHART_LICENSE": "ENVKEY"}, clear=True)
    def test_builder_reads_environment(self) -> None:
        """Test that a builder without settings uses the environment."""
        assert "<license>ENVKEY</license>" in ChartBuilder().to_xml()

    @patch.dict(os.environ, {"SWFCHART_PRETTY_PRINT": "1"}, clear=True)
    def test_builder_pretty_print(self) -> None:
        """Test that pretty printing follows the settings."""
        builder = ChartBuilder()
        builder.add_row(["a"])
        assert "\n  <chart_data>" in builder.to_xml()
