"""pytest fixtures for the mind map API."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from mindmap_ai.core.config import settings
from mindmap_ai.main import app
from mindmap_ai.services import ai_client


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    """uploads land in a per-test directory."""
    directory = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(directory))
    return directory


@pytest.fixture
def ai_disabled(monkeypatch):
    """no provider credential; the returned mock records any model call."""
    call = AsyncMock(return_value="{}")
    monkeypatch.setattr(ai_client, "is_configured", lambda: False)
    monkeypatch.setattr(ai_client, "_call_model", call)
    return call


@pytest.fixture
def fake_model(monkeypatch):
    """provider configured; set fake_model.return_value to the raw model answer."""
    call = AsyncMock()
    monkeypatch.setattr(ai_client, "is_configured", lambda: True)
    monkeypatch.setattr(ai_client, "_call_model", call)
    return call


@pytest.fixture
def ai_mind_map():
    return {
        "title": "Photosynthesis Explained",
        "chartType": "radial",
        "nodes": [
            {"id": "root", "text": "Photosynthesis", "level": 0,
             "description": "How plants turn light into chemical energy."},
            {"id": "light", "text": "Light Reactions", "level": 1, "parentId": "root",
             "description": "Happen in the thylakoid membranes."},
            {"id": "calvin", "text": "Calvin Cycle", "level": 1, "parentId": "root",
             "description": "Fixes carbon in the stroma."},
            {"id": "ps2", "text": "Photosystem II", "level": 2, "parentId": "light",
             "description": "Splits water and releases oxygen."},
        ],
    }


@pytest.fixture
def ai_node_details():
    return {
        "summary": "Neural networks are layered function approximators.",
        "keyPoints": ["Layers of weighted units", "Trained with backpropagation"],
        "detailedInfo": {
            "definition": "A network of artificial neurons.",
            "applications": ["Vision", "Speech", "Translation", "Ranking", "Forecasting"],
            "benefits": ["Flexible"],
            "challenges": ["Data hungry"],
            "examples": ["ResNet"],
            "relatedConcepts": ["Deep learning"],
        },
        "learningPath": {
            "prerequisites": ["Linear algebra"],
            "nextSteps": ["Build a CNN"],
            "timeEstimate": "4 weeks",
            "difficulty": "advanced",
            "resources": ["Deep Learning book"],
        },
        "practicalInfo": {
            "howToImplement": ["Pick a framework"],
            "commonMistakes": ["No validation split"],
            "bestPractices": ["Normalize inputs"],
            "tools": ["PyTorch"],
        },
    }
