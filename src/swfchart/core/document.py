"""XML tree for a single chart document.

:class:`ChartDocument` owns the ``<chart>`` root, its fixed ``<chart_data>``
child and the registry of grouped containers. Its writers are the only code
that touches lxml; :class:`swfchart.core.builder.ChartBuilder` maps each
chart concept onto one of them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from lxml import etree

from swfchart.infra.logging import get_logger

from .enums import ChartNode, ValueType
from .errors import ChartDataError, SerializationError
from .values import attribute_value, classify, is_kept, render_text

logger = get_logger(__name__)

RowAttributes = Sequence[Mapping[str, Any] | None] | Mapping[int, Mapping[str, Any] | None]


def _position(attributes: Any, index: int) -> Any:  # noqa: ANN401
    """Look up the entry for ``index`` in a sequence or position-keyed mapping."""
    if not attributes:
        return None
    if isinstance(attributes, Mapping):
        return attributes.get(index)
    if isinstance(attributes, Sequence) and not isinstance(attributes, str) and index < len(attributes):
        return attributes[index]
    return None


class ChartDocument:
    """Accumulating XML tree with one writer per node shape."""

    def __init__(self, license_key: str | None = None) -> None:
        """Create the document skeleton.

        Args:
            license_key: Written to ``<license>`` when given
        """
        self._root = etree.Element(ChartNode.CHART.value)
        self._chart_data = etree.SubElement(self._root, ChartNode.CHART_DATA.value)
        self._containers: dict[str, etree._Element] = {}

        if license_key:
            etree.SubElement(self._root, ChartNode.LICENSE.value).text = license_key

    @property
    def root(self) -> etree._Element:
        """The ``<chart>`` element."""
        return self._root

    def _new_element(self, tag: str, text: str | None = None) -> etree._Element:
        """Create a detached element; writers attach it only once it is complete."""
        try:
            element = etree.Element(tag)
            if text is not None:
                element.text = text
        except ValueError as e:
            msg = f"Cannot write <{tag}>: {e}"
            raise ChartDataError(msg, hint="Element names must be valid XML names and text must be XML-compatible") from e
        return element

    def _sub_element(self, parent: etree._Element, tag: str, text: str | None = None) -> etree._Element:
        element = self._new_element(tag, text)
        parent.append(element)
        return element

    def _set_attribute(self, element: etree._Element, key: str, value: Any) -> None:  # noqa: ANN401
        try:
            element.set(key, render_text(value))
        except ValueError as e:
            msg = f"Cannot set attribute {key!r} on <{element.tag}>: {e}"
            raise ChartDataError(msg, hint="Attribute names must be valid XML names") from e

    def _add_leaf(self, parent: etree._Element, value: Any) -> etree._Element:  # noqa: ANN401
        value_type = classify(value)
        text = "" if value_type is ValueType.NULL else render_text(value)
        return self._sub_element(parent, value_type.value, text)

    def add_row(self, row: Iterable[Any], attributes: RowAttributes | None = None) -> etree._Element:
        """Append one ``<row>`` of typed leaves to ``<chart_data>``.

        Row-leaf attributes are written as given, without the omission
        policy of :meth:`add_attribute_node`.

        Args:
            row: Values in column order
            attributes: Per-position attribute maps, as a sequence or keyed by
                position; entries that are not mappings are ignored

        Returns:
            The new row element
        """
        row_element = self._new_element(ChartNode.ROW.value)

        for index, value in enumerate(row):
            leaf = self._add_leaf(row_element, value)
            leaf_attributes = _position(attributes, index)
            if isinstance(leaf_attributes, Mapping):
                for key, attr in leaf_attributes.items():
                    self._set_attribute(leaf, str(key), attr)

        self._chart_data.append(row_element)
        logger.debug("Added row", columns=len(row_element), rows=len(self._chart_data))
        return row_element

    def add_rows(self, rows: Iterable[Iterable[Any]], attributes: Any = None) -> None:  # noqa: ANN401
        """Append rows in order, pairing each with the attributes at its position."""
        for index, row in enumerate(rows):
            row_attributes = _position(attributes, index)
            self.add_row(row, row_attributes if row_attributes else None)

    def add_attribute_node(self, tag: str, attributes: Mapping[str, Any]) -> etree._Element:
        """Append a new attribute-only element to the root.

        Booleans become ``"true"``/``"false"``; values that are still falsy
        afterwards (None, ``""``, ``"0"``, zero) are omitted.

        Args:
            tag: Element name
            attributes: Attribute name to value

        Returns:
            The new element
        """
        element = self._new_element(tag)
        self._apply_attributes(element, {key: attribute_value(value) for key, value in attributes.items()})
        self._root.append(element)
        return element

    def add_leaf_list(self, tag: str, values: Iterable[Any]) -> etree._Element:
        """Append an element holding one typed leaf per value."""
        element = self._new_element(tag)
        for value in values:
            self._add_leaf(element, value)
        self._root.append(element)
        logger.debug("Added leaf list", node=tag, leaves=len(element))
        return element

    def add_to_container(
        self,
        container: str,
        tag: str,
        attributes: Mapping[str, Any],
        text: str | None = None,
    ) -> etree._Element:
        """Append a sub-element to a grouped container, creating the container once.

        Falsy values are omitted before boolean conversion, so ``False`` is
        dropped while ``True`` is written as ``"true"``.

        Args:
            container: Container element name (``draw``, ``filter``, ``link``)
            tag: Sub-element name
            attributes: Attribute name to value
            text: Optional element text

        Returns:
            The new sub-element
        """
        element = self._new_element(tag, text)
        self._apply_attributes(
            element,
            {key: attribute_value(value) for key, value in attributes.items() if is_kept(value)},
        )

        parent = self._containers.get(container)
        if parent is None:
            parent = self._new_element(container)
            self._root.append(parent)
            self._containers[container] = parent
            logger.debug("Created container", node=container)

        parent.append(element)
        return element

    def add_text_node(self, tag: str, text: Any) -> etree._Element:  # noqa: ANN401
        """Append an element whose only content is text."""
        element = self._new_element(tag, render_text(text))
        self._root.append(element)
        return element

    def add_string_list(self, tag: str, values: Iterable[Any]) -> etree._Element:
        """Append an element with one ``<string>`` leaf per value, regardless of type."""
        element = self._new_element(tag)
        for value in values:
            self._sub_element(element, ValueType.STRING.value, render_text(value))
        self._root.append(element)
        return element

    def add_embed(self, url: Any, timeout: Any, retry: Any, fonts: Iterable[Any] = ()) -> etree._Element:  # noqa: ANN401
        """Append ``<embed>`` with its three fixed attributes and one ``<font>`` per font."""
        element = self._new_element(ChartNode.EMBED.value)
        self._set_attribute(element, "url", url)
        self._set_attribute(element, "timeout", timeout)
        self._set_attribute(element, "retry", retry)
        for font in fonts:
            self._sub_element(element, ChartNode.FONT.value, render_text(font))
        self._root.append(element)
        return element

    def _apply_attributes(self, element: etree._Element, attributes: Mapping[str, Any]) -> None:
        omitted = []
        for key, value in attributes.items():
            if is_kept(value):
                self._set_attribute(element, key, value)
            else:
                omitted.append(key)
        if omitted:
            logger.debug("Omitted falsy attributes", node=element.tag, attributes=omitted)

    def to_bytes(self, *, pretty_print: bool = False) -> bytes:
        """Serialize the document as UTF-8 with an XML declaration.

        Raises:
            SerializationError: If lxml cannot render the tree
        """
        try:
            output = etree.tostring(
                self._root,
                encoding="UTF-8",
                xml_declaration=True,
                pretty_print=pretty_print,
            )
        except (etree.SerialisationError, ValueError) as e:
            msg = f"Failed to serialize chart document: {e}"
            raise SerializationError(msg) from e

        logger.debug("Serialized chart document", bytes=len(output), rows=len(self._chart_data))
        return output

    def to_xml(self, *, pretty_print: bool = False) -> str:
        """Serialize the document to a string; see :meth:`to_bytes`."""
        return self.to_bytes(pretty_print=pretty_print).decode("utf-8")
