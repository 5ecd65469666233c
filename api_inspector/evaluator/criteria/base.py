"""Base dataclass for evaluation criteria."""

from __future__ import annotations

from dataclasses import dataclass

from api_inspector.evaluator import EvaluationType, GroundTruth, MeasureFunction


@dataclass(frozen=True)
class Criterion:
    """A single declared check against an output.

    ``measure_function`` and ``target_field`` are needed by measurable
    criteria, ``extract_prompt`` by layered ones. A criterion missing them is
    still valid to declare; it simply fails when evaluated.
    """

    id: str
    question: str
    ground_truth: GroundTruth
    evaluation_type: EvaluationType
    measure_function: MeasureFunction | None = None
    target_field: str | None = None  # path expression, e.g. "endpoints[*].method"
    extract_prompt: str | None = None

    def __post_init__(self) -> None:
        # Accept plain strings from config files; unknown names raise ValueError.
        object.__setattr__(self, "evaluation_type", EvaluationType(self.evaluation_type))
        if self.measure_function is not None:
            object.__setattr__(self, "measure_function", MeasureFunction(self.measure_function))
        if isinstance(self.ground_truth, list):
            object.__setattr__(self, "ground_truth", tuple(self.ground_truth))
