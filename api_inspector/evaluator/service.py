"""High-level inspection service: parse a generated API description and check it.

``ApiInspectionService.inspect()`` is the fast path a host calls right after
the model has produced an API description:

1. Clean and parse the raw response into ``ApiData``.
2. Run the measurable criteria (no network) and record their results.
3. Optionally schedule the descriptive criteria as a background task whose
   results are appended to the same ``ApiData`` when they arrive.

The returned report never waits on the background pass.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from pydantic import ValidationError

from api_inspector.config import Settings, get_settings
from api_inspector.config.criteria_config import load_criteria_config
from api_inspector.evaluator import ApiData, EvaluationResult, EvaluationType, QuickCheckResult
from api_inspector.evaluator.criteria import filter_by_type, get_default_api_criteria
from api_inspector.evaluator.criteria.base import Criterion
from api_inspector.evaluator.exceptions import EvaluatorError, OutputParseError
from api_inspector.evaluator.router import evaluate_all_criteria, quick_measurable_check
from api_inspector.utils.completion import TextCompleter
from api_inspector.utils.llm_factory import get_completer
from api_inspector.utils.structured_output import parse_json_response

logger = logging.getLogger(__name__)


@dataclass
class InspectionReport:
    """Clean result object returned by ``ApiInspectionService.inspect()``.

    Attributes:
        api_data: The parsed description, with quick-check results recorded.
        quick_check: Outcome of the measurable criteria.
        background_scheduled: Whether a descriptive pass was started.
        error: Error message when the response could not be parsed.
    """

    api_data: ApiData | None = None
    quick_check: QuickCheckResult | None = None
    background_scheduled: bool = False
    error: str | None = None


class ApiInspectionService:
    """Runs the criteria engine over generated API descriptions.

    Attributes:
        completer: Text-completion capability for the LLM-backed tiers.
            Without one only measurable criteria are evaluated.
        criteria: Criteria to apply; defaults to the built-in API criteria.
        background_descriptive: Start the descriptive pass after ``inspect``.
    """

    def __init__(
        self,
        completer: TextCompleter | None = None,
        criteria: list[Criterion] | None = None,
        background_descriptive: bool = True,
    ) -> None:
        self.completer = completer
        self.criteria = criteria if criteria is not None else get_default_api_criteria()
        self.background_descriptive = background_descriptive
        self._pending: set[asyncio.Task] = set()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ApiInspectionService:
        """Build a service from application settings.

        Loads criteria from ``criteria_config_path`` when set and builds a
        completer for ``llm_provider``. A provider that cannot be initialized
        leaves the service measurable-only rather than failing.
        """
        settings = settings or get_settings()
        criteria = load_criteria_config(settings.criteria_config_path)

        completer: TextCompleter | None
        try:
            completer = get_completer(settings.llm_provider.value)
        except RuntimeError as exc:
            logger.warning("No completer available, LLM-backed criteria disabled: %s", exc)
            completer = None

        return cls(
            completer=completer,
            criteria=criteria,
            background_descriptive=settings.background_descriptive_eval,
        )

    def inspect(self, raw_text: str) -> InspectionReport:
        """Parse a raw model response and run the quick check on it.

        The background descriptive pass is only scheduled when called from
        a running event loop; synchronous callers get the quick check alone.

        Args:
            raw_text: The model's response, possibly fenced or wrapped in prose.

        Returns:
            An ``InspectionReport``; parse failures are reported in ``error``.
        """
        try:
            api_data = ApiData.model_validate(parse_json_response(raw_text))
        except OutputParseError as exc:
            logger.error("Could not parse API description: %s context=%s", exc, exc.context)
            return InspectionReport(error=str(exc))
        except ValidationError as exc:
            logger.error("API description failed validation: %s", exc)
            return InspectionReport(error=f"Invalid API description: {exc.error_count()} error(s)")

        check = quick_measurable_check(api_data, self.criteria)
        api_data.record_results(check.details)

        if check.passed:
            logger.info("All measurable criteria passed")
        else:
            logger.warning("Measurable criteria failed: %s", check.failed_ids)

        scheduled = self._schedule_background(api_data)
        return InspectionReport(api_data=api_data, quick_check=check, background_scheduled=scheduled)

    def _schedule_background(self, api_data: ApiData) -> bool:
        if not self.background_descriptive or self.completer is None:
            return False
        if not api_data.endpoints:
            logger.warning("Descriptive evaluation skipped: no endpoints")
            return False

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning("Descriptive evaluation skipped: no running event loop")
            return False

        task = loop.create_task(self.evaluate_descriptive_background(api_data))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return True

    async def evaluate_descriptive_background(self, api_data: ApiData) -> list[EvaluationResult]:
        """Judge the descriptive criteria and append their results.

        Failures are logged and never propagate; the outcome is
        observational only.
        """
        descriptive = filter_by_type(self.criteria, EvaluationType.DESCRIPTIVE)
        if not descriptive:
            logger.info("No descriptive criteria to evaluate")
            return []

        try:
            results = await evaluate_all_criteria(api_data, descriptive, self.completer)
        except EvaluatorError as exc:
            logger.warning("Descriptive evaluation failed (non-critical): %s context=%s", exc, exc.context)
            return []
        except Exception as exc:
            logger.warning("Descriptive evaluation failed (non-critical): %s", exc, exc_info=True)
            return []

        failed_ids = [r.criteria_id for r in results if not r.passed]
        if failed_ids:
            logger.warning("%d descriptive criteria failed: %s", len(failed_ids), failed_ids)
        else:
            logger.info("All %d descriptive criteria passed", len(results))

        api_data.record_results(results)
        return results

    async def evaluate(self, api_data: ApiData) -> list[EvaluationResult]:
        """Run every tier now and append the results."""
        results = await evaluate_all_criteria(api_data, self.criteria, self.completer)
        api_data.record_results(results)
        return results

    async def wait_for_background(self) -> None:
        """Wait until every scheduled descriptive pass has finished."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
