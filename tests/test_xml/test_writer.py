"""Tests de l'arbre XML immuable et du writer lxml."""

import pytest
from lxml import etree

from ubl_invoice.errors import SerializationError, UBLInvoiceError
from ubl_invoice.xml import Element, Text, XMLWriter, element

NS = "urn:example:test"


def _tag(local: str) -> str:
    return f"{{{NS}}}{local}"


class TestElementBuilder:
    """Construction fonctionnelle des éléments."""

    def test_strings_become_text_nodes(self) -> None:
        el = element("a", "hello")
        assert el.children == (Text("hello"),)
        assert el.text == "hello"

    def test_none_children_skipped(self) -> None:
        el = element("a", None, element("b"), None)
        assert [child.tag for child in el.elements] == ["b"]

    def test_iterables_flattened(self) -> None:
        el = element("a", [element("b"), None, element("c")], (element("d"),))
        assert [child.tag for child in el.elements] == ["b", "c", "d"]

    def test_attributes(self) -> None:
        el = element("amount", "10", currencyID="EUR")
        assert el.attributes == {"currencyID": "EUR"}

    def test_element_is_immutable(self) -> None:
        el = element("a")
        with pytest.raises(AttributeError):
            el.tag = "b"  # type: ignore[misc]

    def test_text_none_without_text_children(self) -> None:
        assert element("a", element("b")).text is None

    def test_find_and_iter(self) -> None:
        tree = element("root", element("x", element("y", "1")), element("x"))
        assert tree.find("x") is tree.elements[0]
        assert len(tree.findall("x")) == 2
        assert tree.find("z") is None
        assert [el.tag for el in tree.iter()] == ["root", "x", "y", "x"]


class TestXMLWriter:
    """Sérialisation via lxml."""

    def test_namespaces_declared_on_root(self) -> None:
        tree = element(
            _tag("root"),
            element(_tag("child"), "v"),
            nsmap={None: NS, "t": "urn:example:other"},
        )
        root = etree.fromstring(XMLWriter().write(tree))
        assert root.nsmap == {None: NS, "t": "urn:example:other"}
        assert root.find(_tag("child")).text == "v"

    def test_escaping(self) -> None:
        xml = XMLWriter(xml_declaration=False).to_string(element("a", "x & <y>"))
        assert xml.strip() == "<a>x &amp; &lt;y&gt;</a>"

    def test_attribute_escaping(self) -> None:
        xml = XMLWriter(xml_declaration=False).to_string(element("a", q='"&'))
        assert xml.strip() == '<a q="&quot;&amp;"/>'

    def test_mixed_content_uses_tail(self) -> None:
        tree = Element(
            tag="p",
            children=(Text("a"), element("b", "B"), Text("c"), Text("d")),
        )
        xml = XMLWriter(pretty_print=False, xml_declaration=False).to_string(tree)
        assert xml == "<p>a<b>B</b>cd</p>"

    def test_declaration_and_pretty_print(self) -> None:
        xml = XMLWriter().to_string(element("a", element("b", "1")))
        assert xml == "<?xml version='1.0' encoding='UTF-8'?>\n<a>\n  <b>1</b>\n</a>\n"

    def test_non_ascii_kept_as_utf8(self) -> None:
        data = XMLWriter(xml_declaration=False).write(element("city", "Liège"))
        assert "Liège".encode("utf-8") in data

    @pytest.mark.parametrize("text", ["Bad\x01Name", "nul\x00byte"])
    def test_control_characters_rejected(self, text: str) -> None:
        with pytest.raises(SerializationError, match="^Invalid XML content: "):
            XMLWriter().to_string(element("name", text))

    def test_control_character_in_attribute_rejected(self) -> None:
        with pytest.raises(SerializationError):
            XMLWriter().write(element("amount", "1", currencyID="E\x02UR"))

    def test_serialization_error_is_package_error(self) -> None:
        assert issubclass(SerializationError, UBLInvoiceError)
