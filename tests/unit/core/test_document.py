"""Unit tests for the ChartDocument tree and its writers."""

import pytest
from lxml import etree

from swfchart.core.document import ChartDocument
from swfchart.core.errors import ChartDataError


def parse(document: ChartDocument) -> etree._Element:
    """Parse the serialized document back into a tree."""
    return etree.fromstring(document.to_bytes())


class TestSkeleton:
    """Test the empty document."""

    def test_empty_document(self) -> None:
        """Test that a fresh document holds only chart_data."""
        root = parse(ChartDocument())
        assert root.tag == "chart"
        assert [child.tag for child in root] == ["chart_data"]
        assert len(root.find("chart_data")) == 0

    def test_license_follows_chart_data(self) -> None:
        """Test that the license leaf is written after chart_data."""
        root = parse(ChartDocument(license_key="ABC123KEY"))
        assert [child.tag for child in root] == ["chart_data", "license"]
        assert root.findtext("license") == "ABC123KEY"

    def test_declaration_and_idempotence(self) -> None:
        """Test that serialization has a declaration and does not change the tree."""
        document = ChartDocument()
        document.add_row(["A", 5])
        first = document.to_xml()
        second = document.to_xml()
        assert first == second
        assert first.startswith("<?xml")
        assert "UTF-8" in first.splitlines()[0]

    def test_pretty_print(self) -> None:
        """Test that pretty printing indents children."""
        document = ChartDocument()
        document.add_row(["A"])
        assert "\n  <chart_data>" in document.to_xml(pretty_print=True)


class TestRows:
    """Test the row writers."""

    def test_typed_leaves(self) -> None:
        """Test that each value becomes a leaf named after its type."""
        document = ChartDocument()
        document.add_row(["A", 5, None])
        xml = document.to_xml()
        assert "<row><string>A</string><number>5</number><null></null></row>" in xml

    def test_row_order(self) -> None:
        """Test that rows and columns keep caller order."""
        document = ChartDocument()
        document.add_rows([[None, "2009", "2010"], ["North", 1, 2], ["South", 3, 4]])
        rows = parse(document).find("chart_data")
        assert [[leaf.text or "" for leaf in row] for row in rows] == [
            ["", "2009", "2010"],
            ["North", "1", "2"],
            ["South", "3", "4"],
        ]

    def test_position_attributes_sequence(self) -> None:
        """Test attributes aligned with the row by position."""
        document = ChartDocument()
        document.add_row(["A", 10], [None, {"tooltip": "ten", "note": "peak"}])
        leaves = list(parse(document).find("chart_data/row"))
        assert leaves[0].attrib == {}
        assert leaves[1].get("tooltip") == "ten"
        assert leaves[1].get("note") == "peak"

    def test_position_attributes_mapping(self) -> None:
        """Test attributes keyed by position; non-mapping entries are ignored."""
        document = ChartDocument()
        document.add_row(["A", 10, 20], {0: "ignored", 2: {"label": "x"}})
        leaves = list(parse(document).find("chart_data/row"))
        assert leaves[0].attrib == {}
        assert leaves[2].get("label") == "x"

    def test_row_attributes_are_not_filtered(self) -> None:
        """Test that row-leaf attributes skip the omission policy."""
        document = ChartDocument()
        document.add_row([1], [{"alpha": 0, "shown": False}])
        leaf = parse(document).find("chart_data/row/number")
        assert leaf.get("alpha") == "0"
        assert leaf.get("shown") == "false"

    def test_bulk_attributes_by_row(self) -> None:
        """Test that add_rows pairs rows with attributes at the same position."""
        document = ChartDocument()
        document.add_rows([["a"], ["b"]], [None, [{"tooltip": "second"}]])
        rows = parse(document).find("chart_data")
        assert rows[0][0].get("tooltip") is None
        assert rows[1][0].get("tooltip") == "second"


class TestAttributeNodes:
    """Test the attribute-node writer."""

    def test_falsy_values_omitted(self) -> None:
        """Test that zero, empty and None values are not written."""
        document = ChartDocument()
        document.add_attribute_node("legend", {"alpha": 0, "color": "", "x": None, "size": "0", "y": 0.5})
        assert parse(document).find("legend").attrib == {"y": "0.5"}

    def test_booleans_become_tokens(self) -> None:
        """Test that both booleans are written as tokens."""
        document = ChartDocument()
        document.add_attribute_node("context_menu", {"about": False, "print": True})
        assert parse(document).find("context_menu").attrib == {"about": "false", "print": "true"}

    def test_each_call_adds_a_node(self) -> None:
        """Test that attribute nodes are not merged."""
        document = ChartDocument()
        document.add_attribute_node("chart_label", {"size": 10})
        document.add_attribute_node("chart_label", {"size": 12})
        assert len(parse(document).findall("chart_label")) == 2

    def test_invalid_attribute_name(self) -> None:
        """Test that names lxml rejects raise ChartDataError."""
        document = ChartDocument()
        with pytest.raises(ChartDataError, match="Cannot set attribute"):
            document.add_attribute_node("legend", {"bad name": 1})


class TestContainers:
    """Test the grouped-child writer."""

    def test_container_reused(self) -> None:
        """Test that a container is created once and reused."""
        document = ChartDocument()
        document.add_to_container("draw", "circle", {"x": 10})
        document.add_to_container("draw", "rect", {"x": 20})
        root = parse(document)
        assert len(root.findall("draw")) == 1
        assert [child.tag for child in root.find("draw")] == ["circle", "rect"]

    def test_container_keeps_first_position(self) -> None:
        """Test that later shapes join the container created first."""
        document = ChartDocument()
        document.add_to_container("draw", "circle", {})
        document.add_attribute_node("legend", {"x": 1})
        document.add_to_container("draw", "line", {})
        assert [child.tag for child in parse(document)] == ["chart_data", "draw", "legend"]

    def test_false_dropped_true_written(self) -> None:
        """Test the filter on raw values before conversion."""
        document = ChartDocument()
        document.add_to_container("filter", "glow", {"inner": False, "knockout": True, "alpha": 0})
        assert parse(document).find("filter/glow").attrib == {"knockout": "true"}

    def test_element_text(self) -> None:
        """Test sub-element text."""
        document = ChartDocument()
        document.add_to_container("draw", "text", {"x": 5}, text="Sales & costs")
        assert parse(document).findtext("draw/text") == "Sales & costs"


class TestOtherWriters:
    """Test the list, text and embed writers."""

    def test_leaf_list(self) -> None:
        """Test that list values are classified."""
        document = ChartDocument()
        document.add_leaf_list("series_color", ["ff0000", 10, "x", None])
        assert [leaf.tag for leaf in parse(document).find("series_color")] == ["color", "number", "string", "null"]

    def test_string_list(self) -> None:
        """Test that string lists skip classification."""
        document = ChartDocument()
        document.add_string_list("chart_type", ["column", "line"])
        assert [(leaf.tag, leaf.text) for leaf in parse(document).find("chart_type")] == [
            ("string", "column"),
            ("string", "line"),
        ]

    def test_embed(self) -> None:
        """Test the embed node."""
        document = ChartDocument()
        document.add_embed("fonts.swf", 10, 2, ["Verdana", "Tahoma"])
        embed = parse(document).find("embed")
        assert embed.attrib == {"url": "fonts.swf", "timeout": "10", "retry": "2"}
        assert [font.text for font in embed.findall("font")] == ["Verdana", "Tahoma"]

    def test_incompatible_text(self) -> None:
        """Test that control characters raise ChartDataError."""
        document = ChartDocument()
        with pytest.raises(ChartDataError):
            document.add_text_node("chart_type", "col\x00umn")


class TestFailedWrites:
    """Test that a rejected write leaves the tree unchanged."""

    def test_failed_row_not_attached(self) -> None:
        """Test that a row with an unwritable value is not added."""
        document = ChartDocument()
        document.add_row(["first"])
        before = document.to_xml()
        with pytest.raises(ChartDataError):
            document.add_row(["ok", "bad\x01"])
        assert document.to_xml() == before

    def test_failed_attribute_node_not_attached(self) -> None:
        """Test that valid attributes before an invalid name are not kept."""
        document = ChartDocument()
        with pytest.raises(ChartDataError):
            document.add_attribute_node("legend", {"x": 1, "bad name": 2})
        assert parse(document).find("legend") is None

    def test_failed_container_child_creates_no_container(self) -> None:
        """Test that the container is only created for a complete child."""
        document = ChartDocument()
        with pytest.raises(ChartDataError):
            document.add_to_container("draw", "circle", {"bad name": 1})
        assert parse(document).find("draw") is None

        document.add_to_container("draw", "circle", {"x": 1})
        assert len(parse(document).findall("draw/circle")) == 1

    def test_failed_embed_not_attached(self) -> None:
        """Test that a bad font name leaves no embed node."""
        document = ChartDocument()
        with pytest.raises(ChartDataError):
            document.add_embed("fonts.swf", 10, 2, ["Verdana", "bad\x02"])
        assert parse(document).find("embed") is None
