from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChartType(str, Enum):
    hierarchical = "hierarchical"
    radial = "radial"
    flowchart = "flowchart"
    network = "network"
    timeline = "timeline"
    concept = "concept"
    organizational = "organizational"
    circular = "circular"


# ── Request ──────────────────────────────────────────────────────────────────

class MindMapRequest(CamelModel):
    """Request body for prompt-based mind map generation."""
    prompt: Optional[str] = Field(default=None, description="Topic to map")
    chart_type: ChartType = Field(default=ChartType.hierarchical)

    @field_validator("chart_type", mode="before")
    @classmethod
    def default_chart_type(cls, v):
        return v or ChartType.hierarchical


# ── Response ─────────────────────────────────────────────────────────────────

class MindMapNode(CamelModel):
    """A single node of the flat mind map; the tree is encoded by parent_id."""
    id: str
    text: str = Field(..., min_length=1)
    level: int = Field(..., ge=0)
    parent_id: Optional[str] = None
    description: str = ""

    @field_validator("id", "parent_id", mode="before")
    @classmethod
    def numeric_id_to_str(cls, v):
        # models often answer with "id": 1 / "parentId": 1
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class MindMapResponse(CamelModel):
    """
    Full mind map returned to the client.

    Validation enforces the tree shape: exactly one parentless level-0 root,
    unique ids, and every other node pointing at an existing node of a lower
    level.
    """
    title: str
    chart_type: ChartType = ChartType.hierarchical
    nodes: List[MindMapNode] = Field(..., min_length=1)

    @model_validator(mode="after")
    def check_tree(self) -> MindMapResponse:
        by_id = {}
        for node in self.nodes:
            if node.id in by_id:
                raise ValueError(f"Duplicate node id '{node.id}'")
            by_id[node.id] = node

        roots = [n for n in self.nodes if n.level == 0]
        if len(roots) != 1:
            raise ValueError(f"Expected exactly one root node, got {len(roots)}")
        if roots[0].parent_id is not None:
            raise ValueError("Root node must not have a parentId")

        for node in self.nodes:
            if node.level == 0:
                continue
            parent = by_id.get(node.parent_id) if node.parent_id else None
            if parent is None:
                raise ValueError(
                    f"Node '{node.id}' references unknown parent '{node.parent_id}'"
                )
            if parent.level >= node.level:
                raise ValueError(
                    f"Node '{node.id}' (level {node.level}) has parent "
                    f"'{parent.id}' at level {parent.level}"
                )
        return self
