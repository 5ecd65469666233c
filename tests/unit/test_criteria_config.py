"""Unit tests for loading criteria from YAML files."""

from pathlib import Path

import pytest

from api_inspector.config.criteria_config import load_criteria_config, parse_criteria
from api_inspector.evaluator import EvaluationType, MeasureFunction
from api_inspector.evaluator.exceptions import ConfigurationError, CriteriaConfigError

VALID_YAML = """
criteria:
  - id: endpoint_exists
    question: Is the endpoint path present?
    ground_truth: true
    evaluation_type: measurable
    measure_function: string_not_empty
    target_field: endpoint
  - id: description_length
    question: Is the description 3-20 words?
    ground_truth: [3, 20]
    evaluation_type: layered_measurable
    measure_function: word_count
    extract_prompt: Extract the GET description.
  - id: summary_quality
    question: Is the summary clear?
    evaluation_type: descriptive
"""


class TestLoadCriteriaConfig:
    def test_loads_yaml(self, tmp_path: Path):
        path = tmp_path / "criteria.yaml"
        path.write_text(VALID_YAML)

        criteria = load_criteria_config(path)

        assert [c.id for c in criteria] == ["endpoint_exists", "description_length", "summary_quality"]
        assert criteria[0].measure_function is MeasureFunction.STRING_NOT_EMPTY
        assert criteria[1].evaluation_type is EvaluationType.LAYERED_MEASURABLE
        assert criteria[1].ground_truth == (3, 20)
        assert criteria[2].ground_truth is True

    def test_none_falls_back_to_defaults(self):
        assert len(load_criteria_config(None)) == 10

    def test_missing_file_falls_back_to_defaults(self, tmp_path: Path):
        assert len(load_criteria_config(tmp_path / "missing.yaml")) == 10

    def test_invalid_yaml_raises(self, tmp_path: Path):
        path = tmp_path / "broken.yaml"
        path.write_text("criteria: [unclosed")
        with pytest.raises(CriteriaConfigError):
            load_criteria_config(path)


class TestParseCriteria:
    def test_bare_list_accepted(self):
        criteria = parse_criteria([{"id": "a", "question": "q", "evaluation_type": "descriptive"}])
        assert criteria[0].id == "a"

    def test_degenerate_criterion_is_allowed(self):
        criteria = parse_criteria([{"id": "a", "question": "q", "evaluation_type": "measurable"}])
        assert criteria[0].measure_function is None

    def test_unknown_strategy_rejected(self):
        with pytest.raises(CriteriaConfigError):
            parse_criteria([{"id": "a", "question": "q", "evaluation_type": "vibes"}])

    def test_duplicate_ids_rejected(self):
        entry = {"id": "a", "question": "q", "evaluation_type": "descriptive"}
        with pytest.raises(CriteriaConfigError, match="Duplicate"):
            parse_criteria([entry, dict(entry)])

    def test_not_a_list_rejected(self):
        with pytest.raises(CriteriaConfigError):
            parse_criteria({"criteria": "nope"})

    def test_is_a_configuration_error(self):
        assert issubclass(CriteriaConfigError, ConfigurationError)
