"""Enumerations for swfchart core types."""

from enum import Enum


class ValueType(str, Enum):
    """Type tag of a scalar; also the element name of its leaf."""

    NULL = "null"
    COLOR = "color"
    NUMBER = "number"
    STRING = "string"


class ErrorCode(str, Enum):
    """Application error codes for structured error responses."""

    E400_INVALID_SETTINGS = "E400_INVALID_SETTINGS"
    E422_UNPROCESSABLE = "E422_UNPROCESSABLE"
    E500_SERIALIZATION = "E500_SERIALIZATION"


class ChartNode(str, Enum):
    """Element names of the XML/SWF Charts schema."""

    CHART = "chart"
    LICENSE = "license"
    CHART_DATA = "chart_data"
    ROW = "row"
    CHART_TYPE = "chart_type"
    CHART_BORDER = "chart_border"
    CHART_GRID_H = "chart_grid_h"
    CHART_GRID_V = "chart_grid_v"
    CHART_GUIDE = "chart_guide"
    CHART_LABEL = "chart_label"
    CHART_NOTE = "chart_note"
    CHART_PREF = "chart_pref"
    CHART_RECT = "chart_rect"
    CHART_TRANSITION = "chart_transition"
    SERIES = "series"
    SERIES_COLOR = "series_color"
    SERIES_EXPLODE = "series_explode"
    AXIS_CATEGORY = "axis_category"
    AXIS_CATEGORY_LABEL = "axis_category_label"
    AXIS_TICKS = "axis_ticks"
    AXIS_VALUE = "axis_value"
    AXIS_VALUE_LABEL = "axis_value_label"
    DRAW = "draw"
    FILTER = "filter"
    CONTEXT_MENU = "context_menu"
    EMBED = "embed"
    FONT = "font"
    LEGEND = "legend"
    LINK = "link"
    AREA = "area"
    LINK_DATA = "link_data"
    SCROLL = "scroll"
    TOOLTIP = "tooltip"
    UPDATE = "update"
