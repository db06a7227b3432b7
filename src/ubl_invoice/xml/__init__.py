"""Arbre XML immuable et sa sérialisation."""

from ubl_invoice.xml.nodes import Element, Node, Text, element
from ubl_invoice.xml.writer import XMLWriter

__all__ = ["Element", "Node", "Text", "XMLWriter", "element"]
