"""Pydantic models for graph files."""

from typing import Annotated

from pydantic import BaseModel, Field, field_validator, model_validator


class NodeSpec(BaseModel):
    """A node entry in a graph file.

    Edge targets are node positions. Their range is checked later, when the
    graph is exported or checked, not here.
    """

    label: str | None = None
    edges: list[Annotated[int, Field(ge=0)]] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def normalize_shorthand(cls, data):
        """Accept a bare label in place of a mapping."""
        if isinstance(data, (str, int, float)) and not isinstance(data, bool):
            return {"label": data}
        return data

    @field_validator("label", mode="before")
    @classmethod
    def stringify_label(cls, value):
        """Render scalar labels (numbers, booleans) as text."""
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float, bool)):
            return str(value)
        return value

    @field_validator("edges", mode="before")
    @classmethod
    def normalize_edges(cls, value):
        """Normalize a single target to a list."""
        if value is None:
            return []
        if isinstance(value, int) and not isinstance(value, bool):
            return [value]
        return value


class GraphSpec(BaseModel):
    """A complete graph file. Node order defines node positions."""

    name: str | None = None
    nodes: list[NodeSpec] = Field(default_factory=list)

    def get_labels(self) -> list[str]:
        """Get the display label of every node, defaulting to its position."""
        return [
            str(position) if node.label is None else node.label
            for position, node in enumerate(self.nodes)
        ]
