"""tests for the deterministic fallback content."""

import pytest

from mindmap_ai.schemas.mindmap import ChartType
from mindmap_ai.schemas.node_details import Difficulty
from mindmap_ai.services import mock_generator


def _assert_tree(mind_map):
    ids = {n.id for n in mind_map.nodes}
    roots = [n for n in mind_map.nodes if n.level == 0]
    assert len(roots) == 1
    assert roots[0].parent_id is None
    for node in mind_map.nodes:
        if node.level > 0:
            assert node.parent_id in ids


class TestMockMindMap:
    def test_topic_from_first_words(self):
        mind_map = mock_generator.mock_mind_map("machine learning basics for beginners")
        root = mind_map.nodes[0]
        assert root.text == "machine learning basics"
        assert mind_map.title == "Comprehensive Mind Map: machine learning basics"
        assert "machine learning basics" in root.description

    def test_template_shape(self):
        mind_map = mock_generator.mock_mind_map("quantum computing", ChartType.radial)
        assert mind_map.chart_type == ChartType.radial
        assert len(mind_map.nodes) == 13
        assert sum(1 for n in mind_map.nodes if n.level == 1) == 6
        assert sum(1 for n in mind_map.nodes if n.level == 2) == 6
        _assert_tree(mind_map)

    @pytest.mark.parametrize("prompt", ["", "   ", "{}}{", "\n\t", "🚀" * 500])
    def test_never_fails(self, prompt):
        mind_map = mock_generator.mock_mind_map(prompt)
        assert mind_map.nodes[0].text
        _assert_tree(mind_map)

    def test_deterministic(self):
        a = mock_generator.mock_mind_map("history of rome")
        b = mock_generator.mock_mind_map("history of rome")
        assert a == b


class TestMockFileMindMap:
    def test_root_from_file_name(self):
        mind_map = mock_generator.mock_file_mind_map("lecture-notes.txt", ChartType.concept)
        assert mind_map.nodes[0].text == "lecture-notes"
        assert mind_map.title == "Analysis of lecture-notes.txt"
        assert mind_map.chart_type == ChartType.concept

    def test_five_flat_branches(self):
        mind_map = mock_generator.mock_file_mind_map("report.md")
        branches = mind_map.nodes[1:]
        assert len(branches) == 5
        assert all(n.level == 1 and n.parent_id == "1" for n in branches)
        _assert_tree(mind_map)

    def test_root_stops_at_first_dot(self):
        mind_map = mock_generator.mock_file_mind_map("report.v2.txt")
        assert mind_map.nodes[0].text == "report"
        assert mind_map.title == "Analysis of report.v2.txt"

    def test_nameless_file(self):
        mind_map = mock_generator.mock_file_mind_map("")
        assert mind_map.nodes[0].text == "Document"


class TestMockNodeDetails:
    def test_mentions_node(self):
        details = mock_generator.mock_node_details("Neural Networks")
        assert "Neural Networks" in details.summary
        assert "Neural Networks" in details.detailed_info.definition
        assert any("Neural Networks" in p for p in details.key_points)

    def test_shape(self):
        details = mock_generator.mock_node_details("Neural Networks")
        assert len(details.key_points) == 10
        assert len(details.detailed_info.applications) >= 5
        assert details.learning_path.difficulty == Difficulty.intermediate
        assert details.practical_info.tools
