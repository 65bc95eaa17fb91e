"""
Spec document types and serialization.

A Spec is the flat output of ``render()``: a root key plus a mapping of
keys to UI elements. At runtime it is a plain ``dict`` so it can be handed
to any JSON renderer unchanged; the TypedDicts describe its shape and the
pydantic models check documents that arrive from elsewhere.
"""

from dataclasses import dataclass
from typing import Any, NotRequired, TypedDict

from pydantic import BaseModel, ConfigDict, Field

from .core.json import loads_object, safe_json_dumps
from .nodes import Bindings, RepeatConfig, VisibilityCondition


class UIElement(TypedDict):
    """One entry in a Spec's element mapping."""

    type: str
    props: dict[str, Any]
    children: NotRequired[list[str]]
    visible: NotRequired[VisibilityCondition]
    on: NotRequired[Bindings]
    repeat: NotRequired[RepeatConfig]
    watch: NotRequired[Bindings]


class Spec(TypedDict):
    """Flat declarative UI document."""

    root: str
    elements: dict[str, UIElement]
    state: NotRequired[dict[str, Any]]


@dataclass(frozen=True)
class RenderOptions:
    """Optional render() configuration."""

    state: dict[str, Any] | None = None


class UIElementModel(BaseModel):
    """Structural model of a UIElement."""

    model_config = ConfigDict(extra="allow")

    type: str = Field(min_length=1)
    props: dict[str, Any] = Field(default_factory=dict)
    children: list[str] | None = None


class SpecModel(BaseModel):
    """Structural model of a Spec."""

    model_config = ConfigDict(extra="allow")

    root: str
    elements: dict[str, UIElementModel]
    state: dict[str, Any] | None = None


def dumps_spec(spec: Spec, indent: int = 0) -> str:
    """Serialize a Spec to JSON text."""
    return safe_json_dumps(spec, indent=indent)


def load_spec(text: str | bytes) -> Spec:
    """
    Parse JSON text into a Spec mapping.

    Raises:
        JSONParseError: If the text is not a JSON object
    """
    return loads_object(text)  # type: ignore[return-value]
