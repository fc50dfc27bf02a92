"""Chart builder for XML/SWF Charts documents.

Example:
    >>> chart = ChartBuilder()
    >>> chart.set_type("column")
    >>> chart.add_rows([[None, "2009", "2010"], ["Region A", 5, 10]])
    >>> chart.border(1, 1, 1, 1, "ff0000")
    >>> chart.legend(layout="horizontal", bold=True)
    >>> xml = chart.to_xml()
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

import polars as pl
from pydantic import ValidationError

from swfchart.infra.logging import get_logger
from swfchart.infra.settings import ChartSettings

from .document import ChartDocument, RowAttributes
from .enums import ChartNode
from .errors import ChartDataError, ChartSettingsError
from .models import (
    AxisCategory,
    AxisTicks,
    AxisValue,
    ChartBorder,
    ChartGrid,
    ChartGuide,
    ChartLabel,
    ChartNote,
    ChartPref,
    ChartRect,
    ChartTransition,
    ContextMenu,
    Legend,
    LinkData,
    NodeSettings,
    Scroll,
    Series,
    Tooltip,
    Update,
)
from .shapes import DRAW_SHAPES, FILTERS, DrawShape, Filter, GroupedChild, LinkArea

logger = get_logger(__name__)

SettingsT = TypeVar("SettingsT", bound=NodeSettings)
SettingsInput = NodeSettings | Mapping[str, Any] | None


def coerce_settings(
    model: type[SettingsT],
    settings: SettingsInput = None,
    node: str | None = None,
    **overrides: Any,
) -> SettingsT:
    """Build a settings model from a model instance, a mapping and/or keyword overrides.

    Args:
        model: Settings model class
        settings: Existing model, mapping of attribute names, or None
        node: Element name used in error messages
        **overrides: Attribute values applied on top of ``settings``

    Returns:
        Validated settings model

    Raises:
        ChartSettingsError: If a value is not a valid attribute value
    """
    if isinstance(settings, model) and not overrides:
        return settings

    data: dict[str, Any] = {}
    if isinstance(settings, NodeSettings):
        data.update(settings.model_dump(exclude_unset=True))
    elif settings:
        data.update(settings)
    data.update(overrides)

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ChartSettingsError.from_validation_error(e, node=node) from e


class ChartBuilder:
    """Builds one XML/SWF Charts document, one method per schema element.

    Builders are not shared: each document gets its own instance.
    """

    def __init__(self, settings: ChartSettings | None = None) -> None:
        """Initialize chart builder.

        Args:
            settings: Document settings; read from the environment when omitted
        """
        self.settings = settings or ChartSettings()
        self.document = ChartDocument(license_key=self.settings.license)

    def _attribute_node(
        self,
        node: ChartNode,
        model: type[NodeSettings],
        settings: SettingsInput,
        overrides: dict[str, Any],
    ) -> None:
        config = coerce_settings(model, settings, node=node.value, **overrides)
        self.document.add_attribute_node(node.value, config.attributes())

    def _grouped_child(self, child: GroupedChild, tag: str | None = None) -> None:
        self.document.add_to_container(child.container, tag or child.tag, child.attributes(), child.text())

    # Chart type and data

    def set_type(self, chart_type: str) -> None:
        """Set a single chart type, e.g. ``"column"`` or ``"pie"``."""
        self.document.add_text_node(ChartNode.CHART_TYPE.value, chart_type)

    def set_types(self, chart_types: Iterable[str]) -> None:
        """Set one chart type per series for mixed charts."""
        self.document.add_string_list(ChartNode.CHART_TYPE.value, chart_types)

    def add_row(self, row: Iterable[Any], attributes: RowAttributes | None = None) -> None:
        """Append a data row; each value is tagged null, color, number or string.

        Args:
            row: Values in column order; include None for empty cells
            attributes: Attributes of the leaf at each position (e.g. ``tooltip``, ``note``)
        """
        self.document.add_row(row, attributes)

    def add_rows(self, rows: Iterable[Iterable[Any]], attributes: Any = None) -> None:  # noqa: ANN401
        """Append several rows; ``attributes[i]`` holds the row attributes of ``rows[i]``."""
        self.document.add_rows(rows, attributes)

    def add_frame(
        self,
        frame: pl.DataFrame,
        category_column: str,
        series_columns: Sequence[str] | None = None,
    ) -> None:
        """Append rows from a wide data frame.

        The first row holds an empty cell followed by the categories; each
        series column then becomes a row led by its column name.

        Args:
            frame: One row per category, one column per series
            category_column: Column holding the category labels
            series_columns: Series to include; all other columns by default

        Raises:
            ChartDataError: If a requested column is missing
        """
        requested = [category_column, *(series_columns or [])]
        missing = [column for column in requested if column not in frame.columns]
        if missing:
            msg = f"Columns not found in frame: {missing}"
            raise ChartDataError(msg, available_columns=list(frame.columns))

        columns = list(series_columns) if series_columns else [c for c in frame.columns if c != category_column]
        self.add_row([None, *frame[category_column].to_list()])
        for column in columns:
            self.add_row([column, *frame[column].to_list()])

        logger.debug("Added frame", categories=frame.height, series=len(columns))

    # Attribute nodes

    def border(
        self,
        top_thickness: Any = None,  # noqa: ANN401
        bottom_thickness: Any = None,  # noqa: ANN401
        left_thickness: Any = None,  # noqa: ANN401
        right_thickness: Any = None,  # noqa: ANN401
        color: Any = None,  # noqa: ANN401
    ) -> None:
        """Set <chart_border>."""
        self._attribute_node(
            ChartNode.CHART_BORDER,
            ChartBorder,
            None,
            {
                "top_thickness": top_thickness,
                "bottom_thickness": bottom_thickness,
                "left_thickness": left_thickness,
                "right_thickness": right_thickness,
                "color": color,
            },
        )

    def grid_h(self, thickness: Any = None, color: Any = None, alpha: Any = None, type: Any = None) -> None:  # noqa: A002, ANN401
        """Set <chart_grid_h>, the horizontal grid."""
        self._attribute_node(
            ChartNode.CHART_GRID_H,
            ChartGrid,
            None,
            {"thickness": thickness, "color": color, "alpha": alpha, "type": type},
        )

    def grid_v(self, thickness: Any = None, color: Any = None, alpha: Any = None, type: Any = None) -> None:  # noqa: A002, ANN401
        """Set <chart_grid_v>, the vertical grid."""
        self._attribute_node(
            ChartNode.CHART_GRID_V,
            ChartGrid,
            None,
            {"thickness": thickness, "color": color, "alpha": alpha, "type": type},
        )

    def guide(self, settings: ChartGuide | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Set <chart_guide>, lines connecting the cursor with the axes."""
        self._attribute_node(ChartNode.CHART_GUIDE, ChartGuide, settings, kwargs)

    def label(self, settings: ChartLabel | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Set <chart_label>, the labels over the graphs."""
        self._attribute_node(ChartNode.CHART_LABEL, ChartLabel, settings, kwargs)

    def note(self, settings: ChartNote | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Set <chart_note>.

        Notes are attached to data points through the ``note`` attribute of
        row leaves; not supported by 3d, image, bubble and mixed charts.
        """
        self._attribute_node(ChartNode.CHART_NOTE, ChartNote, settings, kwargs)

    def pref(self, settings: ChartPref | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Set <chart_pref>; the recognized keys depend on the chart type."""
        self._attribute_node(ChartNode.CHART_PREF, ChartPref, settings, kwargs)

    def rect(self, settings: ChartRect | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Set <chart_rect>, the plot area."""
        self._attribute_node(ChartNode.CHART_RECT, ChartRect, settings, kwargs)

    def transition(
        self,
        type: Any = None,  # noqa: A002, ANN401
        delay: Any = None,  # noqa: ANN401
        duration: Any = None,  # noqa: ANN401
        order: Any = None,  # noqa: ANN401
    ) -> None:
        """Set <chart_transition>."""
        self._attribute_node(
            ChartNode.CHART_TRANSITION,
            ChartTransition,
            None,
            {"type": type, "delay": delay, "duration": duration, "order": order},
        )

    def series(self, bar_gap: Any = None, set_gap: Any = None, transfer: Any = None) -> None:  # noqa: ANN401
        """Set <series>."""
        self._attribute_node(
            ChartNode.SERIES,
            Series,
            None,
            {"bar_gap": bar_gap, "set_gap": set_gap, "transfer": transfer},
        )

    def axis_category(self, settings: AxisCategory | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Set <axis_category>, the category-axis labels."""
        self._attribute_node(ChartNode.AXIS_CATEGORY, AxisCategory, settings, kwargs)

    def axis_ticks(self, settings: AxisTicks | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Set <axis_ticks>."""
        self._attribute_node(ChartNode.AXIS_TICKS, AxisTicks, settings, kwargs)

    def axis_value(self, settings: AxisValue | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Set <axis_value>, the value-axis labels."""
        self._attribute_node(ChartNode.AXIS_VALUE, AxisValue, settings, kwargs)

    def context_menu(self, settings: ContextMenu | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Set <context_menu>, the right-click menu entries."""
        self._attribute_node(ChartNode.CONTEXT_MENU, ContextMenu, settings, kwargs)

    def legend(self, settings: Legend | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Set <legend>."""
        self._attribute_node(ChartNode.LEGEND, Legend, settings, kwargs)

    def link_data(self, settings: LinkData | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Set <link_data>, the script that handles drill-down clicks."""
        self._attribute_node(ChartNode.LINK_DATA, LinkData, settings, kwargs)

    def scroll(self, settings: Scroll | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Set <scroll>.

        Not supported by 3d, pie, donut, polar, scatter, bubble and image charts.
        """
        self._attribute_node(ChartNode.SCROLL, Scroll, settings, kwargs)

    def tooltip(self, settings: Tooltip | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Set <tooltip>."""
        self._attribute_node(ChartNode.TOOLTIP, Tooltip, settings, kwargs)

    def update(self, settings: Update | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Set <update> for live data without reloading the page."""
        self._attribute_node(ChartNode.UPDATE, Update, settings, kwargs)

    # Leaf lists

    def series_color(self, colors: Iterable[Any] = ()) -> None:
        """Set <series_color>; pass hex colors such as ``"ff8800"``."""
        self.document.add_leaf_list(ChartNode.SERIES_COLOR.value, colors)

    def series_explode(self, numbers: Iterable[Any] = ()) -> None:
        """Set <series_explode> for pie, line and scatter charts."""
        self.document.add_leaf_list(ChartNode.SERIES_EXPLODE.value, numbers)

    def axis_category_label(self, labels: Iterable[Any] = ()) -> None:
        """Set <axis_category_label>, overriding numeric category labels."""
        self.document.add_leaf_list(ChartNode.AXIS_CATEGORY_LABEL.value, labels)

    def axis_value_label(self, values: Iterable[Any] = ()) -> None:
        """Set <axis_value_label>, overriding the value-axis labels."""
        self.document.add_leaf_list(ChartNode.AXIS_VALUE_LABEL.value, values)

    # Grouped children

    def draw(self, shape: DrawShape | str, settings: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Add a shape to <draw>.

        Args:
            shape: A shape model, or a tag such as ``"circle"`` or ``"text"``
            settings: Attributes for a tag, or overrides for a shape model
            **kwargs: Attributes applied on top of ``settings``
        """
        if isinstance(shape, DrawShape):
            self._grouped_child(coerce_settings(type(shape), shape, node=shape.tag, **{**(settings or {}), **kwargs}))
            return
        model = DRAW_SHAPES.get(shape, DrawShape)
        self._grouped_child(coerce_settings(model, settings, node=shape, **kwargs), tag=shape)

    def filter(self, kind: Filter | str, settings: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Add a filter (``shadow``, ``bevel``, ``glow``, ``blur``) to <filter>."""
        if isinstance(kind, Filter):
            self._grouped_child(coerce_settings(type(kind), kind, node=kind.tag, **{**(settings or {}), **kwargs}))
            return
        model = FILTERS.get(kind, Filter)
        self._grouped_child(coerce_settings(model, settings, node=kind, **kwargs), tag=kind)

    def link(self, areas: Iterable[LinkArea | Mapping[str, Any]] = ()) -> None:
        """Add clickable areas to <link>."""
        for area in areas:
            self._grouped_child(coerce_settings(LinkArea, area, node=ChartNode.AREA.value))

    def embed(self, url: Any, timeout: Any = None, retry: Any = None, fonts: Iterable[Any] = ()) -> None:  # noqa: ANN401
        """Set <embed>, a SWF file with fonts to use besides Arial."""
        self.document.add_embed(url, timeout, retry, fonts)

    # Output

    def to_bytes(self) -> bytes:
        """Serialize the document as UTF-8 bytes."""
        return self.document.to_bytes(pretty_print=self.settings.pretty_print)

    def to_xml(self) -> str:
        """Serialize the document; can be called any number of times."""
        return self.document.to_xml(pretty_print=self.settings.pretty_print)

    def __str__(self) -> str:
        """Return the serialized document."""
        return self.to_xml()
