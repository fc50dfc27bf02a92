"""Builder for XML/SWF Charts configuration documents."""

from swfchart.core.builder import ChartBuilder
from swfchart.core.enums import ValueType
from swfchart.core.values import classify

__version__ = "0.1.0"

__all__ = ["ChartBuilder", "ValueType", "__version__", "classify"]
