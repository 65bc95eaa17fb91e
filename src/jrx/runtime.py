"""
JSX-style node factory.

``jsx`` mirrors the automatic JSX transform: a tag, a property bag and an
optional key. String tags and ``Fragment`` build a Node directly; a callable
tag is a function component and is called once with the untouched props.

Example::

    Card = component("Card")
    Text = component("Text")

    tree = jsx(Card, {"title": "Hello", "children": [jsx(Text, {"content": "World"})]})
"""

from typing import Any, Mapping

from .nodes import Component, Marker, Node, Tag, build_node, Fragment


def jsx(tag: Tag, props: Mapping[str, Any] | None = None, key: Any = None) -> Node:
    """
    Create a Node from a tag and a property bag.

    Args:
        tag: Component type name, ``Fragment``, or a component function
        props: Raw property bag (may contain reserved keys)
        key: Optional key passed outside of props; overrides ``props["key"]``

    Returns:
        The constructed Node, or whatever the component function returned
    """
    p = props if props is not None else {}

    if callable(tag):
        node = tag(p)
    else:
        node = build_node(tag, p)

    if key is not None:
        node.key = str(key)
    return node


# Multi-child and dev-mode call sites share the same factory
jsxs = jsx
jsx_dev = jsx


def component(type_name: str) -> Component:
    """
    Define a component for use as a tag.

    Args:
        type_name: Element type emitted into the Spec (e.g. "Card")

    Returns:
        A function mapping a property bag to a Node of ``type_name``
    """

    def create(props: Mapping[str, Any] | None = None) -> Node:
        return build_node(type_name, props if props is not None else {})

    create.__name__ = type_name
    create.__qualname__ = type_name
    return create


__all__ = ["Fragment", "Marker", "component", "jsx", "jsx_dev", "jsxs"]
