"""
Node representation for the intermediate component tree.

Nodes are produced by the factory in ``jrx.runtime`` and consumed by
``jrx.render``, which flattens them into a Spec. A node is discriminated
by its ``kind``: concrete elements materialize as Spec elements, fragments
only group their children and disappear during flattening.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, TypeAlias


class NodeKind(str, Enum):
    """Kinds of node in the intermediate tree."""

    ELEMENT = "element"
    FRAGMENT = "fragment"


class Marker(Enum):
    """Tag markers that are not component names.

    A plain Enum, so a marker never compares equal to a string tag.
    """

    FRAGMENT = "jrx.fragment"


Fragment = Marker.FRAGMENT

# Props that become Node/UIElement fields instead of staying in props
RESERVED_PROPS = frozenset({"key", "children", "visible", "on", "repeat", "watch"})

# Opaque sub-languages interpreted by the renderer
ActionBinding: TypeAlias = dict[str, Any]
Bindings: TypeAlias = dict[str, ActionBinding | list[ActionBinding]]
VisibilityCondition: TypeAlias = Any
RepeatConfig: TypeAlias = dict[str, Any]


@dataclass(slots=True)
class Node:
    """A node in the intermediate component tree.

    Attributes:
        kind:     ELEMENT for concrete components, FRAGMENT for groupings.
        type:     Component type name, or ``Fragment`` for fragments.
        props:    Component props with reserved keys already removed.
        children: Child nodes in source order.
        key:      Explicit element key (overrides auto-generation).
        visible:  Visibility condition.
        on:       Event name -> action binding(s).
        repeat:   ``{"statePath": ..., "key": ...}`` list repetition.
        watch:    State path -> action binding(s).
    """

    kind: NodeKind
    type: str | Marker
    props: dict[str, Any] = field(default_factory=dict)
    children: list["Node"] = field(default_factory=list)
    key: str | None = None
    visible: VisibilityCondition | None = None
    on: Bindings | None = None
    repeat: RepeatConfig | None = None
    watch: Bindings | None = None

    @property
    def is_fragment(self) -> bool:
        return self.kind is NodeKind.FRAGMENT


Component: TypeAlias = Callable[[Mapping[str, Any]], Node]
"""A function usable as a tag: property bag in, Node out."""

Tag: TypeAlias = str | Marker | Component


def is_node(value: Any) -> bool:
    """Check whether a value is a genuine Node (not a look-alike object)."""
    return isinstance(value, Node) and isinstance(value.kind, NodeKind)


def extract_props(raw_props: Mapping[str, Any]) -> dict[str, Any]:
    """Return the property bag minus reserved keys."""
    return {k: v for k, v in raw_props.items() if k not in RESERVED_PROPS}


def normalize_children(raw: Any) -> list[Any]:
    """
    Normalize a raw ``children`` value into a flat list.

    None and booleans are placeholders (``condition and child``) and are
    dropped at every nesting level. Lists and tuples are flattened
    recursively in order; any other value becomes a one-element list.
    """
    if raw is None or isinstance(raw, bool):
        return []

    if isinstance(raw, (list, tuple)):
        result: list[Any] = []
        for child in raw:
            if child is None or isinstance(child, bool):
                continue
            if isinstance(child, (list, tuple)):
                result.extend(normalize_children(child))
            else:
                result.append(child)
        return result

    return [raw]


def build_node(tag: str | Marker, raw_props: Mapping[str, Any]) -> Node:
    """Construct a Node from a tag name or marker and a raw property bag."""
    key = raw_props.get("key")
    return Node(
        kind=NodeKind.FRAGMENT if tag is Fragment else NodeKind.ELEMENT,
        type=tag,
        props=extract_props(raw_props),
        children=normalize_children(raw_props.get("children")),
        key=str(key) if key is not None else None,
        visible=raw_props.get("visible"),
        on=raw_props.get("on"),
        repeat=raw_props.get("repeat"),
        watch=raw_props.get("watch"),
    )
