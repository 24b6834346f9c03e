"""tests for the AI client: JSON recovery, prompts, and failure modes."""

import json

import pytest

from mindmap_ai.core.config import settings
from mindmap_ai.schemas.mindmap import ChartType
from mindmap_ai.schemas.node_details import Difficulty
from mindmap_ai.services import ai_client
from mindmap_ai.services.ai_client import AIClientError, extract_json, truncate


class TestExtractJson:
    def test_plain_object(self):
        assert extract_json('{"a": 1}') == {"a": 1}

    def test_object_inside_prose_and_fences(self):
        raw = 'Sure! Here is the map:\n```json\n{"title": "T", "nodes": []}\n```\nEnjoy.'
        assert extract_json(raw) == {"title": "T", "nodes": []}

    def test_braces_inside_strings_are_ignored(self):
        raw = 'x {"text": "use {curly} braces \\" here }", "n": 2} trailing }'
        assert extract_json(raw) == {"text": 'use {curly} braces " here }', "n": 2}

    def test_first_of_several_objects(self):
        raw = '{"first": true} and then {"second": true}'
        assert extract_json(raw) == {"first": True}

    def test_skips_unparseable_span(self):
        raw = "{not json} but later {\"ok\": 1}"
        assert extract_json(raw) == {"ok": 1}

    def test_nested_objects(self):
        raw = 'answer: {"a": {"b": {"c": [1, 2]}}}'
        assert extract_json(raw) == {"a": {"b": {"c": [1, 2]}}}

    @pytest.mark.parametrize("raw", ["", "   ", "no json here", '{"open": 1', "[1, 2, 3]"])
    def test_no_object_raises(self, raw):
        with pytest.raises(AIClientError):
            extract_json(raw)


class TestTruncate:
    def test_short_text_untouched(self):
        assert truncate("abc", 10) == "abc"

    def test_long_text_gets_marker(self):
        out = truncate("x" * 20, 10)
        assert out == "x" * 10 + ai_client.TRUNCATION_MARKER


class TestPrompts:
    def test_file_prompt_truncates_document(self, monkeypatch):
        monkeypatch.setattr(settings, "MAX_DOCUMENT_CHARS", 50)
        prompt = ai_client.build_file_mindmap_prompt("y" * 500, "notes.txt", ChartType.radial)
        assert "y" * 50 + ai_client.TRUNCATION_MARKER in prompt
        assert "y" * 51 not in prompt
        assert "notes.txt" in prompt
        assert '"chartType": "radial"' in prompt

    def test_node_prompt_folds_in_context(self):
        prompt = ai_client.build_node_details_prompt(
            "Backpropagation", parent_context="Neural Networks", document_context="lecture 3"
        )
        assert '"Backpropagation" in the context of "Neural Networks"' in prompt
        assert "lecture 3" in prompt

    def test_node_prompt_without_context(self):
        prompt = ai_client.build_node_details_prompt("Backpropagation")
        assert "in the context of" not in prompt
        assert "document context" not in prompt


class TestGeneration:
    @pytest.mark.asyncio
    async def test_not_configured_never_calls_model(self, ai_disabled):
        with pytest.raises(AIClientError, match="not configured"):
            await ai_client.generate_mind_map("machine learning")
        ai_disabled.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_prompt_rejected(self, fake_model):
        with pytest.raises(AIClientError):
            await ai_client.generate_mind_map("   ")
        fake_model.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_transport_error_wrapped(self, fake_model):
        fake_model.side_effect = ConnectionError("network down")
        with pytest.raises(AIClientError, match="network down"):
            await ai_client.generate_mind_map("machine learning")
        assert fake_model.await_count == 1

    @pytest.mark.asyncio
    async def test_mind_map_parsed_and_chart_type_forced(self, fake_model, ai_mind_map):
        fake_model.return_value = "Here you go: " + json.dumps(ai_mind_map)
        result = await ai_client.generate_mind_map("photosynthesis", ChartType.timeline)
        assert result.chart_type == ChartType.timeline
        assert [n.id for n in result.nodes] == ["root", "light", "calvin", "ps2"]
        assert result.nodes[3].parent_id == "light"

    @pytest.mark.asyncio
    async def test_broken_tree_is_an_error(self, fake_model, ai_mind_map):
        ai_mind_map["nodes"][3]["parentId"] = "missing"
        fake_model.return_value = json.dumps(ai_mind_map)
        with pytest.raises(AIClientError, match="validation"):
            await ai_client.generate_mind_map("photosynthesis")

    @pytest.mark.asyncio
    async def test_file_mind_map_requires_text(self, fake_model):
        with pytest.raises(AIClientError):
            await ai_client.generate_file_mind_map("", "empty.txt")
        fake_model.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_node_details_difficulty_normalized(self, fake_model, ai_node_details):
        fake_model.return_value = json.dumps(ai_node_details)
        details = await ai_client.generate_node_details("Neural Networks")
        assert details.learning_path.difficulty == Difficulty.advanced

    @pytest.mark.asyncio
    async def test_node_details_missing_sections_is_an_error(self, fake_model):
        fake_model.return_value = '{"summary": "only a summary"}'
        with pytest.raises(AIClientError):
            await ai_client.generate_node_details("Neural Networks")
