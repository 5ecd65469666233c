"""Load and validate caller-supplied criteria from YAML files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from api_inspector.evaluator import EvaluationType, MeasureFunction
from api_inspector.evaluator.criteria import get_default_api_criteria
from api_inspector.evaluator.criteria.base import Criterion
from api_inspector.evaluator.exceptions import CriteriaConfigError


class CriterionConfig(BaseModel):
    """One criterion as written in a criteria file.

    Strategy-specific fields are optional here: a criterion missing them is
    loaded and simply fails when evaluated.
    """

    id: str
    question: str
    ground_truth: bool | int | float | str | tuple[float, float] = True
    evaluation_type: EvaluationType
    measure_function: MeasureFunction | None = None
    target_field: str | None = None
    extract_prompt: str | None = None

    def to_criterion(self) -> Criterion:
        return Criterion(
            id=self.id,
            question=self.question,
            ground_truth=self.ground_truth,
            evaluation_type=self.evaluation_type,
            measure_function=self.measure_function,
            target_field=self.target_field,
            extract_prompt=self.extract_prompt,
        )


def parse_criteria(data: Any) -> list[Criterion]:
    """Validate raw criteria data (a list, or a mapping with ``criteria``).

    Raises:
        CriteriaConfigError: On schema errors or duplicate ids.
    """
    if isinstance(data, dict):
        data = data.get("criteria")
    if not isinstance(data, list):
        raise CriteriaConfigError("Criteria config must be a list under 'criteria'")

    try:
        configs = [CriterionConfig.model_validate(entry) for entry in data]
    except ValidationError as exc:
        raise CriteriaConfigError(
            f"Invalid criterion definition: {exc}",
            context={"error_count": exc.error_count()},
        ) from exc

    seen: set[str] = set()
    for config in configs:
        if config.id in seen:
            raise CriteriaConfigError(f"Duplicate criterion id: {config.id}", context={"id": config.id})
        seen.add(config.id)

    return [config.to_criterion() for config in configs]


def load_criteria_config(path: Path | None = None) -> list[Criterion]:
    """Load criteria from a YAML file. Falls back to the built-in API criteria.

    Args:
        path: Optional path to a YAML criteria file.
    """
    if path is None or not path.exists():
        return get_default_api_criteria()

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise CriteriaConfigError(f"Could not parse {path}: {exc}", context={"path": str(path)}) from exc

    return parse_criteria(data)
