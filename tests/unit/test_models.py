"""Unit tests for the evaluation and API description models."""

from api_inspector.evaluator import ApiData, EvaluationResult, EvaluationType, QuickCheckResult


class TestEvaluationResult:
    def test_defaults(self):
        result = EvaluationResult(criteria_id="x", passed=False, evaluation_type=EvaluationType.MEASURABLE)
        assert result.actual_value is None
        assert result.expected_value is None
        assert result.evaluation_time == 0

    def test_camel_case_serialization(self):
        result = EvaluationResult(
            criteria_id="summary_word_count",
            passed=True,
            actual_value=7,
            expected_value=(3, 50),
            evaluation_type=EvaluationType.MEASURABLE,
            evaluation_time=1,
        )
        dumped = result.model_dump(by_alias=True, mode="json")
        assert dumped == {
            "criteriaId": "summary_word_count",
            "passed": True,
            "actualValue": 7,
            "expectedValue": [3.0, 50.0],
            "evaluationType": "measurable",
            "evaluationTime": 1,
        }

    def test_accepts_camel_case_input(self):
        result = EvaluationResult.model_validate(
            {"criteriaId": "a", "passed": True, "evaluationType": "descriptive", "actualValue": "YES"}
        )
        assert result.criteria_id == "a"
        assert result.actual_value == "YES"

    def test_bool_values_stay_bool(self):
        result = EvaluationResult(
            criteria_id="a", passed=True, actual_value=True, expected_value=True, evaluation_type="measurable"
        )
        assert result.actual_value is True
        assert result.expected_value is True


class TestApiData:
    def test_aliases(self, sample_api_data):
        assert sample_api_data.endpoints[0].response_schema[0].status == 200
        assert sample_api_data.endpoints[0].response_schema[0].content_type == "application/json"

    def test_to_tree_uses_aliases_and_excludes_results(self, sample_api_data):
        tree = sample_api_data.to_tree()
        assert tree["endpoints"][0]["responseSchema"][0]["status"] == 200
        assert "criteriaResults" not in tree
        assert "criteria_results" not in tree

    def test_record_results_appends(self, sample_api_data):
        first = EvaluationResult(criteria_id="a", passed=True, evaluation_type=EvaluationType.MEASURABLE)
        second = EvaluationResult(criteria_id="b", passed=False, evaluation_type=EvaluationType.DESCRIPTIVE)
        sample_api_data.record_results([first])
        sample_api_data.record_results([second])
        assert [r.criteria_id for r in sample_api_data.criteria_results] == ["a", "b"]


class TestQuickCheckResult:
    def test_defaults(self):
        check = QuickCheckResult(passed=True)
        assert check.failed_ids == []
        assert check.details == []
