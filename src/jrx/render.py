"""
Flatten a Node tree into a json-render Spec.

Analogous to ``ReactDOM.render`` but produces JSON instead of DOM mutations.
The tree is walked depth-first in pre-order; every concrete node becomes one
element keyed either by its explicit ``key`` or by ``{type}-{n}`` where ``n``
counts earlier nodes of the same lowercased type within this call.
"""

from dataclasses import dataclass, field
from typing import Any

from .core.errors import DuplicateKeyError, InvalidInputError, InvalidRootError
from .core.logging_config import get_logger
from .nodes import Node, is_node
from .spec import RenderOptions, Spec, UIElement

logger = get_logger(__name__)

# Element fields copied from the node only when set
_META_FIELDS = ("visible", "on", "repeat", "watch")


@dataclass
class RenderContext:
    """Bookkeeping for a single render() call."""

    counters: dict[str, int] = field(default_factory=dict)
    used_keys: set[str] = field(default_factory=set)
    elements: dict[str, UIElement] = field(default_factory=dict)

    def generate_key(self, type_name: str) -> str:
        """Next auto key for a type, e.g. ``card-1``, ``card-2``."""
        base = type_name.lower()
        count = self.counters.get(base, 0) + 1
        self.counters[base] = count
        return f"{base}-{count}"

    def claim(self, key: str) -> None:
        if key in self.used_keys:
            logger.error("duplicate_key", key=key)
            raise DuplicateKeyError(key)
        self.used_keys.add(key)


def render(node: Node, options: RenderOptions | None = None) -> Spec:
    """
    Flatten a Node tree into a Spec.

    Args:
        node: Root node (a concrete element, not a Fragment)
        options: Optional render configuration (e.g. initial state)

    Returns:
        A Spec with ``root``, ``elements`` and, when supplied, ``state``

    Raises:
        InvalidInputError: If ``node`` is not a Node
        InvalidRootError: If ``node`` is a Fragment
        DuplicateKeyError: If two elements resolve to the same key
    """
    if not is_node(node):
        logger.error("invalid_input", type=type(node).__name__)
        raise InvalidInputError("render() expects a Node produced by jsx().")

    if node.is_fragment:
        logger.error("fragment_root")
        raise InvalidRootError(
            "render() requires a single root element. Fragments cannot be used at the root level."
        )

    ctx = RenderContext()
    root_key = _flatten(node, ctx)

    spec: Spec = {"root": root_key, "elements": ctx.elements}

    if options is not None and options.state is not None:
        spec["state"] = options.state

    logger.debug("spec_rendered", root=root_key, element_count=len(ctx.elements))
    return spec


def expand_children(children: list[Any]) -> list[Node]:
    """
    Resolve children into concrete nodes, splicing fragments inline.

    Values that are not Nodes are skipped.
    """
    result: list[Node] = []
    for child in children:
        if not is_node(child):
            continue
        if child.is_fragment:
            result.extend(expand_children(child.children))
        else:
            result.append(child)
    return result


def _flatten(node: Node, ctx: RenderContext) -> str:
    """Flatten ``node`` and its subtree into ``ctx.elements``; return its key."""
    key = node.key if node.key is not None else ctx.generate_key(node.type)
    ctx.claim(key)

    child_keys = [_flatten(child, ctx) for child in expand_children(node.children)]

    element: UIElement = {"type": node.type, "props": node.props}

    if child_keys:
        element["children"] = child_keys

    for name in _META_FIELDS:
        value = getattr(node, name)
        if value is not None:
            element[name] = value

    ctx.elements[key] = element
    return key
