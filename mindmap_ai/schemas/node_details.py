from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from mindmap_ai.schemas.mindmap import CamelModel


class Difficulty(str, Enum):
    beginner = "Beginner"
    intermediate = "Intermediate"
    advanced = "Advanced"


# ── Request ──────────────────────────────────────────────────────────────────

class NodeDetailsRequest(CamelModel):
    """Request body for on-demand node expansion."""
    node_text: Optional[str] = None
    parent_context: Optional[str] = None
    document_context: Optional[str] = None


# ── Response ─────────────────────────────────────────────────────────────────

class DetailedInfo(CamelModel):
    definition: str
    applications: List[str] = []
    benefits: List[str] = []
    challenges: List[str] = []
    examples: List[str] = []
    related_concepts: List[str] = []


class LearningPath(CamelModel):
    prerequisites: List[str] = []
    next_steps: List[str] = []
    time_estimate: str = ""
    difficulty: Difficulty = Difficulty.intermediate
    resources: List[str] = []

    @field_validator("difficulty", mode="before")
    @classmethod
    def normalize_difficulty(cls, v):
        # Models often answer "advanced" or " Beginner "
        if isinstance(v, str):
            return v.strip().capitalize()
        return v


class PracticalInfo(CamelModel):
    how_to_implement: List[str] = []
    common_mistakes: List[str] = []
    best_practices: List[str] = []
    tools: List[str] = []


class NodeDetailsResponse(CamelModel):
    """Expanded educational content for a single node."""
    summary: str
    key_points: List[str] = Field(..., min_length=1)
    detailed_info: DetailedInfo
    learning_path: LearningPath
    practical_info: PracticalInfo
