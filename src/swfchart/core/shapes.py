"""Settings for grouped children: draw shapes, filters and link areas.

Each model carries the tag of the element it becomes inside its container
(``<draw>``, ``<filter>`` or ``<link>``).
"""

from typing import ClassVar

from .enums import ChartNode
from .models import AttrValue, FilterRefs, NodeSettings


class GroupedChild(NodeSettings):
    """Base for a sub-element of a grouped container."""

    container: ClassVar[str] = ""
    tag: ClassVar[str] = ""

    def text(self) -> str | None:
        """Element text, if the element carries any."""
        return None


class DrawShape(GroupedChild, FilterRefs):
    """Any element of <draw>."""

    container: ClassVar[str] = ChartNode.DRAW.value

    layer: AttrValue = None
    transition: AttrValue = None
    delay: AttrValue = None
    duration: AttrValue = None


class Circle(DrawShape):
    """<draw><circle>."""

    tag: ClassVar[str] = "circle"

    x: AttrValue = None
    y: AttrValue = None
    radius: AttrValue = None
    fill_color: AttrValue = None
    fill_alpha: AttrValue = None
    line_color: AttrValue = None
    line_alpha: AttrValue = None
    line_thickness: AttrValue = None


class Image(DrawShape):
    """<draw><image>: JPEG, unanimated GIF, PNG or SWF."""

    tag: ClassVar[str] = "image"

    url: AttrValue = None
    x: AttrValue = None
    y: AttrValue = None
    width: AttrValue = None
    height: AttrValue = None
    alpha: AttrValue = None
    rotation: AttrValue = None


class Line(DrawShape):
    """<draw><line>."""

    tag: ClassVar[str] = "line"

    x1: AttrValue = None
    y1: AttrValue = None
    x2: AttrValue = None
    y2: AttrValue = None
    line_color: AttrValue = None
    line_alpha: AttrValue = None
    line_thickness: AttrValue = None


class Rect(DrawShape):
    """<draw><rect>."""

    tag: ClassVar[str] = "rect"

    x: AttrValue = None
    y: AttrValue = None
    width: AttrValue = None
    height: AttrValue = None
    fill_color: AttrValue = None
    fill_alpha: AttrValue = None
    line_color: AttrValue = None
    line_alpha: AttrValue = None
    line_thickness: AttrValue = None
    corner_tl: AttrValue = None
    corner_tr: AttrValue = None
    corner_br: AttrValue = None
    corner_bl: AttrValue = None


class Text(DrawShape):
    """<draw><text>: the only draw element with content."""

    tag: ClassVar[str] = "text"

    content: str | None = None
    x: AttrValue = None
    y: AttrValue = None
    width: AttrValue = None
    height: AttrValue = None
    h_align: AttrValue = None
    v_align: AttrValue = None
    rotation: AttrValue = None
    font: AttrValue = None
    bold: AttrValue = None
    size: AttrValue = None
    color: AttrValue = None
    alpha: AttrValue = None

    def attributes(self) -> dict[str, AttrValue]:
        """Attributes without the element content."""
        attributes = super().attributes()
        attributes.pop("content", None)
        return attributes

    def text(self) -> str | None:
        """The text to draw."""
        return self.content


class Filter(GroupedChild):
    """Any element of <filter>; ``id`` is what other elements reference."""

    container: ClassVar[str] = ChartNode.FILTER.value

    id: AttrValue = None


class Shadow(Filter):
    """<filter><shadow>."""

    tag: ClassVar[str] = "shadow"

    distance: AttrValue = None
    angle: AttrValue = None
    color: AttrValue = None
    alpha: AttrValue = None
    blurX: AttrValue = None  # noqa: N815
    blurY: AttrValue = None  # noqa: N815
    strength: AttrValue = None
    quality: AttrValue = None
    inner: AttrValue = None
    knockout: AttrValue = None


class Bevel(Filter):
    """<filter><bevel>."""

    tag: ClassVar[str] = "bevel"

    distance: AttrValue = None
    angle: AttrValue = None
    highlightColor: AttrValue = None  # noqa: N815
    highlightAlpha: AttrValue = None  # noqa: N815
    shadowColor: AttrValue = None  # noqa: N815
    shadowAlpha: AttrValue = None  # noqa: N815
    blurX: AttrValue = None  # noqa: N815
    blurY: AttrValue = None  # noqa: N815
    strength: AttrValue = None
    quality: AttrValue = None
    type: AttrValue = None
    knockout: AttrValue = None


class Glow(Filter):
    """<filter><glow>."""

    tag: ClassVar[str] = "glow"

    color: AttrValue = None
    alpha: AttrValue = None
    blurX: AttrValue = None  # noqa: N815
    blurY: AttrValue = None  # noqa: N815
    strength: AttrValue = None
    quality: AttrValue = None
    inner: AttrValue = None
    knockout: AttrValue = None


class Blur(Filter):
    """<filter><blur>."""

    tag: ClassVar[str] = "blur"

    blurX: AttrValue = None  # noqa: N815
    blurY: AttrValue = None  # noqa: N815
    quality: AttrValue = None


class LinkArea(GroupedChild):
    """<link><area>: a clickable rectangle."""

    container: ClassVar[str] = ChartNode.LINK.value
    tag: ClassVar[str] = ChartNode.AREA.value

    x: AttrValue = None
    y: AttrValue = None
    width: AttrValue = None
    height: AttrValue = None
    url: AttrValue = None
    target: AttrValue = None
    tooltip: AttrValue = None


DRAW_SHAPES: dict[str, type[DrawShape]] = {shape.tag: shape for shape in (Circle, Image, Line, Rect, Text)}
FILTERS: dict[str, type[Filter]] = {kind.tag: kind for kind in (Shadow, Bevel, Glow, Blur)}
