"""Sérialisation d'un arbre ``Element`` avec lxml.

FR: Convertit l'arbre immuable en arbre lxml puis en XML indenté UTF-8,
    avec déclaration XML. L'échappement (&, <, >, guillemets) est assuré
    par lxml.
EN: Converts the immutable tree to an lxml tree, then to indented UTF-8
    XML with an XML declaration. Escaping is handled by lxml.
"""

from lxml import etree

from ubl_invoice.errors import SerializationError
from ubl_invoice.xml.nodes import Element, Text


class XMLWriter:
    """Writer XML réutilisable."""

    def __init__(
        self,
        pretty_print: bool = True,
        xml_declaration: bool = True,
        encoding: str = "UTF-8",
    ) -> None:
        self.pretty_print = pretty_print
        self.xml_declaration = xml_declaration
        self.encoding = encoding

    def to_etree(self, node: Element) -> etree._Element:
        """Construit l'arbre lxml équivalent.

        Raises:
            SerializationError: Texte ou attribut non représentable en XML
                (caractère de contrôle, octet nul).
        """
        try:
            return self._build(node, None)
        except ValueError as exc:
            raise SerializationError(f"Invalid XML content: {exc}") from exc

    def _build(
        self, node: Element, parent: etree._Element | None
    ) -> etree._Element:
        if parent is None:
            el = etree.Element(node.tag, nsmap=node.nsmap)
        else:
            el = etree.SubElement(parent, node.tag, nsmap=node.nsmap)
        for name, value in node.attributes.items():
            el.set(name, value)

        last: etree._Element | None = None
        for child in node.children:
            if isinstance(child, Text):
                # Texte avant le premier sous-élément -> .text, sinon .tail
                if last is None:
                    el.text = (el.text or "") + child.value
                else:
                    last.tail = (last.tail or "") + child.value
            else:
                last = self._build(child, el)
        return el

    def write(self, node: Element) -> bytes:
        """Sérialise l'arbre en bytes."""
        return etree.tostring(
            self.to_etree(node),
            xml_declaration=self.xml_declaration,
            encoding=self.encoding,
            pretty_print=self.pretty_print,
        )

    def to_string(self, node: Element) -> str:
        """Sérialise l'arbre en chaîne."""
        return self.write(node).decode(self.encoding)
