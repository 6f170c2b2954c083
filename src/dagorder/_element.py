"""Node identity for elements placed in a graph."""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from ._errors import UnsupportedTypeError


@runtime_checkable
class Element(Protocol):
    """An object that can be held by a graph node.

    The ``name`` identifies the node and must be unique within a graph.
    """

    @property
    def name(self) -> str: ...


class TextElement(str):
    """Adapter turning a piece of text into an :class:`Element`.

    It is a ``str`` itself, so sort results built from plain text
    compare equal to the original strings.

    Example:
        >>> TextElement("build").name
        'build'
        >>> TextElement("build") == "build"
        True

    """

    __slots__ = ()

    @property
    def name(self) -> str:
        return str.__str__(self)

    def __repr__(self) -> str:
        return f"TextElement({str.__repr__(self)})"


def _renders_text(element: object) -> bool:
    # Every object inherits object.__str__ and object.__repr__; only an override counts as rendering.
    return any(
        "__str__" in vars(klass) or "__repr__" in vars(klass) for klass in type(element).__mro__ if klass is not object
    )


def as_element(element: object) -> tuple[str, Element]:
    """Resolve an element to its node name and the value stored in the graph.

    Rules are tried in order:

    1. the element has a ``name`` that is a ``str``: stored as is;
    2. the element is a ``str``: stored as a :class:`TextElement`;
    3. the element's type defines ``__str__`` or ``__repr__``: its ``str()`` is stored as a
       :class:`TextElement`.

    Args:
        element: The object to place in a graph node.

    Returns:
        Tuple of (name, stored element).

    Raises:
        UnsupportedTypeError: If none of the rules apply.

    """
    if isinstance(element, Element) and isinstance(element.name, str):
        return element.name, element
    if isinstance(element, str):
        return element, TextElement(element)
    if _renders_text(element):
        text = str(element)
        return text, TextElement(text)
    raise UnsupportedTypeError(element)


def names(elements: Iterable[Element]) -> list[str]:
    """Return the names of the given elements, in order."""
    return [element.name for element in elements]
