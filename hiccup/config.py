"""Render options."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RenderOptions(BaseModel):
    """Switches that change how a node tree is serialized."""

    escape: bool = Field(
        False,
        description=(
            "HTML-escape literals and quote attribute values. Off by default: "
            "literals and attribute values are written verbatim."
        ),
    )
    max_depth: Optional[int] = Field(
        None,
        gt=0,
        description="Maximum element nesting depth; deeper trees are rejected.",
    )

    model_config = ConfigDict(extra="forbid", frozen=True)


DEFAULT_OPTIONS = RenderOptions()
