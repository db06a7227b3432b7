"""Arbre XML immuable.

FR: Représentation de document indépendante de la sérialisation : un
    élément porte un nom qualifié (notation Clark ``{ns}local``), ses
    attributs et ses enfants (éléments ou texte). Le générateur construit
    l'arbre, le writer le sérialise.
EN: Serialization-independent document representation: an element holds
    a qualified name (Clark notation), attributes and children (elements
    or text). The generator builds the tree; the writer serializes it.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Text:
    """Nœud texte (contenu non échappé, l'échappement est fait à l'écriture)."""

    value: str


@dataclass(frozen=True)
class Element:
    """Élément XML avec attributs et enfants."""

    tag: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: tuple["Node", ...] = ()
    nsmap: Mapping[str | None, str] | None = None

    @property
    def text(self) -> str | None:
        """Concaténation des nœuds texte directs, ou None s'il n'y en a pas."""
        parts = [child.value for child in self.children if isinstance(child, Text)]
        return "".join(parts) if parts else None

    @property
    def elements(self) -> tuple["Element", ...]:
        """Enfants de type élément, dans l'ordre du document."""
        return tuple(child for child in self.children if isinstance(child, Element))

    def find(self, tag: str) -> "Element | None":
        """Premier enfant direct portant ce nom qualifié."""
        for child in self.elements:
            if child.tag == tag:
                return child
        return None

    def findall(self, tag: str) -> list["Element"]:
        """Enfants directs portant ce nom qualifié."""
        return [child for child in self.elements if child.tag == tag]

    def iter(self) -> Iterator["Element"]:
        """Parcours en profondeur (l'élément lui-même inclus)."""
        yield self
        for child in self.elements:
            yield from child.iter()


Node = Union[Element, Text]

Child = Union[Element, Text, str, None]


def element(
    tag: str,
    *children: Child | Iterable[Child],
    nsmap: Mapping[str | None, str] | None = None,
    **attributes: str,
) -> Element:
    """Construit un élément.

    Les chaînes deviennent des nœuds texte, les ``None`` sont ignorés (champ
    optionnel absent) et les itérables sont aplatis.
    """
    nodes: list[Node] = []
    for child in children:
        if child is None:
            continue
        if isinstance(child, (Element, Text)):
            nodes.append(child)
        elif isinstance(child, str):
            nodes.append(Text(child))
        else:
            nodes.extend(
                Text(c) if isinstance(c, str) else c
                for c in child
                if c is not None
            )
    return Element(
        tag=tag,
        attributes=dict(attributes),
        children=tuple(nodes),
        nsmap=nsmap,
    )
