"""Default criteria for a generated API route description.

Most checks are measurable so they run on every generation without a model
call; the two descriptive ones are judged by the LLM in a background pass.
"""

from __future__ import annotations

from api_inspector.evaluator import EvaluationType, MeasureFunction
from api_inspector.evaluator.criteria.base import Criterion

API_MEASURABLE_CRITERIA: list[Criterion] = [
    Criterion(
        id="endpoint_exists",
        question="Is the endpoint path present?",
        ground_truth=True,
        evaluation_type=EvaluationType.MEASURABLE,
        measure_function=MeasureFunction.STRING_NOT_EMPTY,
        target_field="endpoint",
    ),
    Criterion(
        id="endpoint_starts_with_slash",
        question='Does the endpoint start with "/"?',
        ground_truth="/",
        evaluation_type=EvaluationType.MEASURABLE,
        measure_function=MeasureFunction.REGEX_MATCH,
        target_field="endpoint",
    ),
    Criterion(
        id="endpoints_not_empty",
        question="Was at least one HTTP method detected?",
        ground_truth=True,
        evaluation_type=EvaluationType.MEASURABLE,
        measure_function=MeasureFunction.ARRAY_NOT_EMPTY,
        target_field="endpoints",
    ),
    Criterion(
        id="http_methods_valid",
        question="Are all HTTP methods valid (GET, POST, PUT, DELETE, etc)?",
        ground_truth=True,
        evaluation_type=EvaluationType.MEASURABLE,
        measure_function=MeasureFunction.HTTP_METHOD_VALID,
        target_field="endpoints[*].method",
    ),
    Criterion(
        id="summary_exists",
        question="Does every endpoint have a summary?",
        ground_truth=True,
        evaluation_type=EvaluationType.MEASURABLE,
        measure_function=MeasureFunction.STRING_NOT_EMPTY,
        target_field="endpoints[*].summary",
    ),
    Criterion(
        id="summary_word_count",
        question="Does every summary have 3-50 words?",
        ground_truth=(3, 50),
        evaluation_type=EvaluationType.MEASURABLE,
        measure_function=MeasureFunction.WORD_COUNT,
        target_field="endpoints[*].summary",
    ),
    Criterion(
        id="status_codes_valid",
        question="Are all response status codes valid (100-599)?",
        ground_truth=True,
        evaluation_type=EvaluationType.MEASURABLE,
        measure_function=MeasureFunction.STATUS_CODE_VALID,
        target_field="endpoints[*].responseSchema[*].status",
    ),
    Criterion(
        id="issues_severity_valid",
        question="Is every issue severity valid (error/warning/info)?",
        ground_truth=True,
        evaluation_type=EvaluationType.MEASURABLE,
        measure_function=MeasureFunction.KEYWORD_PRESENCE,
        target_field="issues[*].severity",
    ),
]

API_DESCRIPTIVE_CRITERIA: list[Criterion] = [
    Criterion(
        id="summary_quality",
        question="Does the summary clearly explain what the endpoint does?",
        ground_truth=True,
        evaluation_type=EvaluationType.DESCRIPTIVE,
    ),
    Criterion(
        id="issue_recommendation_helpful",
        question="Are the issue recommendations actionable and specific?",
        ground_truth=True,
        evaluation_type=EvaluationType.DESCRIPTIVE,
    ),
]

API_CRITERIA: list[Criterion] = API_MEASURABLE_CRITERIA + API_DESCRIPTIVE_CRITERIA
