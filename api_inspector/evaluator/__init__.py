"""Pydantic models for evaluation inputs, outputs, and the API description."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EvaluationType(str, Enum):
    """How a criterion is evaluated."""

    MEASURABLE = "measurable"
    LAYERED_MEASURABLE = "layered_measurable"
    DESCRIPTIVE = "descriptive"


class MeasureFunction(str, Enum):
    """Deterministic measurement applied to extracted values."""

    STRING_NOT_EMPTY = "string_not_empty"
    ARRAY_NOT_EMPTY = "array_not_empty"
    WORD_COUNT = "word_count"
    SENTENCE_COUNT = "sentence_count"
    KEYWORD_PRESENCE = "keyword_presence"
    HTTP_METHOD_VALID = "http_method_valid"
    STATUS_CODE_VALID = "status_code_valid"
    FIELD_EXISTS = "field_exists"
    REGEX_MATCH = "regex_match"
    JSON_STRUCTURE = "json_structure"


GroundTruth = bool | int | float | str | tuple[float, float]
ActualValue = bool | int | float | str


class EvaluationResult(BaseModel):
    """Outcome of evaluating one criterion against one output."""

    model_config = ConfigDict(populate_by_name=True)

    criteria_id: str = Field(alias="criteriaId")
    passed: bool
    actual_value: ActualValue | None = Field(default=None, alias="actualValue")
    expected_value: GroundTruth | None = Field(default=None, alias="expectedValue")
    evaluation_type: EvaluationType = Field(alias="evaluationType")
    evaluation_time: int = Field(default=0, ge=0, alias="evaluationTime")  # ms


class QuickCheckResult(BaseModel):
    """Aggregate of the measurable-only fast path."""

    passed: bool
    failed_ids: list[str] = Field(default_factory=list)
    details: list[EvaluationResult] = Field(default_factory=list)


# ── API description (the structured output being evaluated) ──


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ApiParam(_CamelModel):
    name: str = ""
    type: str = ""
    required: bool = False
    description: str = ""
    location: str = "query"


class SecurityIssue(_CamelModel):
    severity: str = ""
    title: str = ""
    description: str = ""
    recommendation: str | None = None


class ResponseSchema(_CamelModel):
    status: int | str | None = None
    content_type: str = Field(default="application/json", alias="contentType")
    schema_: str = Field(default="", alias="schema")
    example: str | None = None


class ApiEndpoint(_CamelModel):
    """A single HTTP method exported by a route file."""

    method: str
    summary: str = ""
    description: str | None = None
    params: list[ApiParam] = Field(default_factory=list)
    response_schema: list[ResponseSchema] = Field(default_factory=list, alias="responseSchema")


class ApiData(_CamelModel):
    """Complete analysis of a route file, possibly with several methods.

    ``criteria_results`` only ever grows: see :meth:`record_results`.
    """

    endpoint: str = ""
    endpoints: list[ApiEndpoint] = Field(default_factory=list)
    issues: list[SecurityIssue] = Field(default_factory=list)
    criteria_results: list[EvaluationResult] = Field(default_factory=list, alias="criteriaResults")
    timestamp: str | None = None

    def record_results(self, results: list[EvaluationResult]) -> None:
        """Append evaluation results without touching earlier ones."""
        self.criteria_results.extend(results)

    def to_tree(self) -> dict[str, Any]:
        """Return the JSON-shaped tree the path expressions are written against."""
        return self.model_dump(by_alias=True, exclude={"criteria_results"}, mode="json")


__all__ = [
    "ActualValue",
    "ApiData",
    "ApiEndpoint",
    "ApiParam",
    "EvaluationResult",
    "EvaluationType",
    "GroundTruth",
    "MeasureFunction",
    "QuickCheckResult",
    "ResponseSchema",
    "SecurityIssue",
]
