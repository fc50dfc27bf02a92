"""Pydantic models for chart node settings and error payloads.

Each settings model lists the attribute names the XML/SWF Charts viewer
recognizes for one element. Every field is optional; unset and falsy values
never reach the document. Keys not declared here are accepted and passed
through unchanged, in the order they were given.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

AttrValue = str | int | float | bool | None


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    reason: str | None = Field(default=None, description="Detailed reason for the error")
    suggestion: str | None = Field(default=None, description="Suggested correction")


class ErrorResponse(BaseModel):
    """Serializable form of an swfchart error."""

    code: str = Field(..., description="Error code (e.g., E400_INVALID_SETTINGS)")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] | None = Field(default=None, description="Detailed error information")
    hint: str | None = Field(default=None, description="Correction hint for the caller")


class NodeSettings(BaseModel):
    """Base model for an attribute-only chart element."""

    model_config = ConfigDict(extra="allow")

    # Undeclared attributes are validated like declared ones
    __pydantic_extra__: dict[str, AttrValue]

    def attributes(self) -> dict[str, Any]:
        """Return attribute name to value, declared fields first, skipping unset values."""
        return self.model_dump(exclude_none=True)


class TextStyle(BaseModel):
    """Font attributes shared by text-bearing elements."""

    font: AttrValue = None
    bold: AttrValue = None
    size: AttrValue = None
    color: AttrValue = None
    alpha: AttrValue = None


class FilterRefs(BaseModel):
    """Ids of filters (see ``filter``) applied to an element."""

    shadow: AttrValue = None
    bevel: AttrValue = None
    glow: AttrValue = None
    blur: AttrValue = None


class NumberFormat(BaseModel):
    """Number formatting attributes for labels and axes."""

    prefix: AttrValue = None
    suffix: AttrValue = None
    decimals: AttrValue = None
    decimal_char: AttrValue = None
    separator: AttrValue = None


class ChartBorder(NodeSettings):
    """<chart_border>: the chart's border."""

    top_thickness: AttrValue = None
    bottom_thickness: AttrValue = None
    left_thickness: AttrValue = None
    right_thickness: AttrValue = None
    color: AttrValue = None


class ChartGrid(NodeSettings):
    """<chart_grid_h> and <chart_grid_v>: horizontal or vertical grid lines."""

    thickness: AttrValue = None
    color: AttrValue = None
    alpha: AttrValue = None
    type: AttrValue = None


class ChartGuide(NodeSettings, TextStyle, FilterRefs):
    """<chart_guide>: guide lines connecting the cursor with the axes."""

    horizontal: AttrValue = None
    vertical: AttrValue = None
    thickness: AttrValue = None
    type: AttrValue = None
    snap_h: AttrValue = None
    snap_v: AttrValue = None
    connect: AttrValue = None
    radius: AttrValue = None
    fill_color: AttrValue = None
    fill_alpha: AttrValue = None
    line_color: AttrValue = None
    line_alpha: AttrValue = None
    line_thickness: AttrValue = None
    text_h_alpha: AttrValue = None
    text_v_alpha: AttrValue = None
    prefix_h: AttrValue = None
    prefix_v: AttrValue = None
    suffix_h: AttrValue = None
    suffix_v: AttrValue = None
    decimals_h: AttrValue = None
    decimals_v: AttrValue = None
    decimal_char: AttrValue = None
    separator: AttrValue = None
    text_color: AttrValue = None
    background_color: AttrValue = None


class ChartLabel(NodeSettings, NumberFormat, TextStyle, FilterRefs):
    """<chart_label>: labels drawn over the graphs."""

    position: AttrValue = None
    hide_zero: AttrValue = None
    as_percentage: AttrValue = None
    background_color: AttrValue = None


class ChartNote(NodeSettings, TextStyle, FilterRefs):
    """<chart_note>: look of comments attached to data or category points."""

    type: AttrValue = None
    x: AttrValue = None
    y: AttrValue = None
    offset_x: AttrValue = None
    offset_y: AttrValue = None
    background_color: AttrValue = None
    background_alpha: AttrValue = None


class ChartPref(NodeSettings):
    """<chart_pref>: chart-type specific preferences."""

    line_thickness: AttrValue = None
    point_shape: AttrValue = None
    point_size: AttrValue = None
    fill_shape: AttrValue = None
    type: AttrValue = None
    trend_thickness: AttrValue = None
    trend_alpha: AttrValue = None
    rotation_x: AttrValue = None
    rotation_y: AttrValue = None
    grid: AttrValue = None
    select: AttrValue = None
    drag: AttrValue = None
    min_x: AttrValue = None
    max_x: AttrValue = None
    min_y: AttrValue = None
    max_y: AttrValue = None


class ChartRect(NodeSettings, FilterRefs):
    """<chart_rect>: position, size and background of the plot area."""

    x: AttrValue = None
    y: AttrValue = None
    width: AttrValue = None
    height: AttrValue = None
    positive_color: AttrValue = None
    positive_alpha: AttrValue = None
    negative_color: AttrValue = None
    negative_alpha: AttrValue = None
    corner_tl: AttrValue = None
    corner_tr: AttrValue = None
    corner_br: AttrValue = None
    corner_bl: AttrValue = None


class ChartTransition(NodeSettings):
    """<chart_transition>: animation played when the chart appears."""

    type: AttrValue = None
    delay: AttrValue = None
    duration: AttrValue = None
    order: AttrValue = None


class Series(NodeSettings):
    """<series>: spacing of bars and columns."""

    bar_gap: AttrValue = None
    set_gap: AttrValue = None
    transfer: AttrValue = None


class AxisCategory(NodeSettings, NumberFormat, TextStyle, FilterRefs):
    """<axis_category>: category-axis labels."""

    skip: AttrValue = None
    orientation: AttrValue = None
    margin: AttrValue = None
    min: AttrValue = None
    max: AttrValue = None
    steps: AttrValue = None


class AxisTicks(NodeSettings):
    """<axis_ticks>: tick marks on both axes."""

    value_ticks: AttrValue = None
    category_ticks: AttrValue = None
    position: AttrValue = None
    major_thickness: AttrValue = None
    major_color: AttrValue = None
    minor_thickness: AttrValue = None
    minor_color: AttrValue = None
    minor_count: AttrValue = None


class AxisValue(NodeSettings, NumberFormat, TextStyle, FilterRefs):
    """<axis_value>: value-axis labels and range."""

    min: AttrValue = None
    max: AttrValue = None
    steps: AttrValue = None
    show_min: AttrValue = None
    orientation: AttrValue = None
    background_color: AttrValue = None


class ContextMenu(NodeSettings):
    """<context_menu>: entries of the right-click menu."""

    about: AttrValue = None
    print: AttrValue = None
    full_screen: AttrValue = None
    save_as_bmp: AttrValue = None
    save_as_jpeg: AttrValue = None
    save_as_png: AttrValue = None


class Legend(NodeSettings, TextStyle, FilterRefs):
    """<legend>: the area identifying series colors."""

    layout: AttrValue = None
    x: AttrValue = None
    y: AttrValue = None
    width: AttrValue = None
    height: AttrValue = None
    margin: AttrValue = None
    bullet: AttrValue = None
    toggle: AttrValue = None
    fill_color: AttrValue = None
    fill_alpha: AttrValue = None
    line_color: AttrValue = None
    line_alpha: AttrValue = None
    line_thickness: AttrValue = None


class LinkData(NodeSettings):
    """<link_data>: script that handles clicks on chart elements."""

    url: AttrValue = None
    target: AttrValue = None


class Scroll(NodeSettings):
    """<scroll>: slider that makes the chart scrollable."""

    x: AttrValue = None
    y: AttrValue = None
    width: AttrValue = None
    height: AttrValue = None
    color: AttrValue = None
    alpha: AttrValue = None
    slider_color: AttrValue = None
    slider_alpha: AttrValue = None
    start: AttrValue = None
    span: AttrValue = None
    drag: AttrValue = None
    reverse_handle: AttrValue = None
    url_button_1_idle: AttrValue = None
    url_button_1_over: AttrValue = None
    url_button_1_press: AttrValue = None
    url_button_2_idle: AttrValue = None
    url_button_2_over: AttrValue = None
    url_button_2_press: AttrValue = None
    url_slider_body: AttrValue = None
    url_slider_handle_1: AttrValue = None
    url_slider_handle_2: AttrValue = None


class Tooltip(NodeSettings, TextStyle, FilterRefs):
    """<tooltip>: the cursor label shown over chart elements."""

    background_color: AttrValue = None
    background_alpha: AttrValue = None


class Update(NodeSettings):
    """<update>: reloads chart data without reloading the page."""

    url: AttrValue = None
    delay: AttrValue = None
    delay_type: AttrValue = None
    mode: AttrValue = None
    span: AttrValue = None
    retry: AttrValue = None
    timeout: AttrValue = None
