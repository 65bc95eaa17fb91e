"""
jrx - compile JSX-style component trees into json-render Specs.

Build a tree with ``jsx`` (or components from ``component``), then flatten
it with ``render``::

    from jrx import component, jsx, render

    Card = component("Card")
    Text = component("Text")

    spec = render(jsx(Card, {"title": "Hello", "children": jsx(Text, {"content": "World"})}))
    # {"root": "card-1", "elements": {"text-1": {...}, "card-1": {...}}}
"""

from .core import (
    JrxError,
    RenderError,
    InvalidInputError,
    InvalidRootError,
    DuplicateKeyError,
    JSONParseError,
    ValidationError,
    configure_logging,
)
from .nodes import Fragment, Node, NodeKind, RESERVED_PROPS, is_node
from .render import render
from .runtime import component, jsx, jsx_dev, jsxs
from .spec import RenderOptions, Spec, UIElement, dumps_spec, load_spec
from .validate import SpecIssue, SpecValidationResult, SpecValidator, check_spec, validate_spec

__version__ = "0.1.0"

__all__ = [
    # Factory
    "jsx",
    "jsxs",
    "jsx_dev",
    "component",
    "Fragment",
    # Nodes
    "Node",
    "NodeKind",
    "RESERVED_PROPS",
    "is_node",
    # Render
    "render",
    "RenderOptions",
    # Spec
    "Spec",
    "UIElement",
    "dumps_spec",
    "load_spec",
    # Validation
    "SpecIssue",
    "SpecValidationResult",
    "SpecValidator",
    "validate_spec",
    "check_spec",
    # Errors
    "JrxError",
    "RenderError",
    "InvalidInputError",
    "InvalidRootError",
    "DuplicateKeyError",
    "JSONParseError",
    "ValidationError",
    # Logging
    "configure_logging",
]
