"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from api_inspector.evaluator import ApiData, EvaluationType, MeasureFunction
from api_inspector.evaluator.criteria.base import Criterion


@pytest.fixture
def sample_api_tree() -> dict[str, Any]:
    """A well-formed API description as the generator emits it."""
    return {
        "endpoint": "/api/users",
        "endpoints": [
            {
                "method": "GET",
                "summary": "Retrieve the list of all registered users",
                "description": "Returns every user, optionally filtered by scope.",
                "params": [
                    {
                        "name": "scope",
                        "type": "string",
                        "required": False,
                        "description": "Visibility scope of the listing.",
                        "location": "query",
                    }
                ],
                "responseSchema": [
                    {"status": 200, "contentType": "application/json", "schema": '{"users": "array"}'},
                    {"status": 401, "contentType": "application/json", "schema": '{"error": "string"}'},
                ],
            },
            {
                "method": "post",
                "summary": "Create a new user from the request body",
                "params": [],
                "responseSchema": [{"status": 201, "contentType": "application/json", "schema": "{}"}],
            },
        ],
        "issues": [
            {
                "severity": "warning",
                "title": "No rate limiting",
                "description": "The endpoint can be called without limits.",
                "recommendation": "Add a per-user rate limiting middleware.",
            }
        ],
    }


@pytest.fixture
def sample_api_data(sample_api_tree: dict[str, Any]) -> ApiData:
    return ApiData.model_validate(sample_api_tree)


@pytest.fixture
def empty_api_tree() -> dict[str, Any]:
    """An output where the generator found no methods."""
    return {"endpoint": "/api/empty", "endpoints": [], "issues": []}


@pytest.fixture
def completer() -> AsyncMock:
    """Text-completion stub answering YES to every descriptive question."""
    stub = AsyncMock()
    stub.complete = AsyncMock(return_value="1. YES\n2. YES")
    return stub


@pytest.fixture
def measurable_criterion() -> Criterion:
    return Criterion(
        id="endpoint_exists",
        question="Is the endpoint path present?",
        ground_truth=True,
        evaluation_type=EvaluationType.MEASURABLE,
        measure_function=MeasureFunction.STRING_NOT_EMPTY,
        target_field="endpoint",
    )


@pytest.fixture
def layered_criterion() -> Criterion:
    return Criterion(
        id="description_length",
        question="Is the GET description 3-20 words long?",
        ground_truth=(3, 20),
        evaluation_type=EvaluationType.LAYERED_MEASURABLE,
        measure_function=MeasureFunction.WORD_COUNT,
        extract_prompt="Extract the description of the GET method.",
    )


@pytest.fixture
def descriptive_criteria() -> list[Criterion]:
    return [
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
