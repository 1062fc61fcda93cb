"""Pydantic models for description files."""

from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import RenderOptions
from .io_utils import read_data
from .nodes import Element, check_name

Scalar = Union[str, int, float, bool]


class ElementSpec(BaseModel):
    """One element of a description file."""

    tag: str = Field(..., description="Element name.")
    attrs: Optional[Union[Dict[str, Scalar], List[Tuple[str, Scalar]]]] = Field(
        None,
        description=(
            "Attribute block, written verbatim. Use a list of [key, value] pairs "
            "when order matters across repeated keys."
        ),
    )
    children: Optional[List["NodeSpec"]] = Field(
        None,
        description="Children block. Omit for a self-closing element; [] for an empty body.",
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("tag")
    @classmethod
    def _valid_tag(cls, value: str) -> str:
        return check_name(value)

    @field_validator("attrs")
    @classmethod
    def _valid_attr_names(cls, value):
        if value is None:
            return value
        keys = value.keys() if isinstance(value, dict) else [key for key, _ in value]
        for key in keys:
            check_name(key, "attribute")
        return value

    def to_node(self) -> Element:
        children = None
        if self.children is not None:
            children = [_to_node(child) for child in self.children]
        attrs = self.attrs.items() if isinstance(self.attrs, dict) else self.attrs
        return Element(self.tag, attrs, children)


NodeSpec = Union[ElementSpec, Scalar]
ElementSpec.model_rebuild()


def _to_node(spec: "NodeSpec"):
    if isinstance(spec, ElementSpec):
        return spec.to_node()
    return spec


class DocumentSpec(BaseModel):
    """A description file: render options plus the top-level node sequence."""

    options: RenderOptions = Field(default_factory=RenderOptions)
    nodes: List[NodeSpec] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def to_nodes(self) -> list:
        return [_to_node(spec) for spec in self.nodes]


def load_document(path: Path) -> DocumentSpec:
    """Read and validate a ``.yaml``/``.yml``/``.json`` description file."""
    data = read_data(path)
    if isinstance(data, list):
        data = {"nodes": data}
    return DocumentSpec.model_validate(data or {})
