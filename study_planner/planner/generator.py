"""Study plan generation against the AI gateway."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Callable

from pydantic import ValidationError

from study_planner.config import ConfigError, Settings
from study_planner.llm.gateway_client import (
    GatewayClient,
    GatewayError,
    GatewayStatusError,
    GatewayTransportError,
)
from study_planner.planner.contracts import PlanResult, err, ok
from study_planner.prompts.planner import (
    PLAN_TOOL,
    PLAN_TOOL_CHOICE,
    PLAN_TOOL_NAME,
    PLANNER_SYSTEM_PROMPT,
    PLANNER_USER_PROMPT,
)
from study_planner.schemas.plan import PlanRequest, StudyPlanResponse
from study_planner.utils.dates import days_until_exam
from study_planner.utils.llm_parse import ToolCallError, extract_tool_arguments, parse_json_with_schema

logger = logging.getLogger("uvicorn.error")


def _join(value) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)


def build_messages(request: PlanRequest, now: datetime | None = None) -> list[dict[str, str]]:
    """Render the system and user messages for one plan request.

    Field values are formatted as received, whatever their JSON type.
    """
    exam_date = str(request.examDate)
    days = days_until_exam(exam_date, now)
    days_text = "an unknown number of" if days is None else str(days)
    weak = _join(request.weakSubjects) if request.weakSubjects else "None specified"
    system = PLANNER_SYSTEM_PROMPT.format(days_until_exam=days_text)
    user = PLANNER_USER_PROMPT.format(
        subjects=_join(request.subjects),
        weak_subjects=weak,
        exam_date=exam_date,
        days_until_exam=days_text,
        hours_per_day=request.hoursPerDay,
        stress_level=request.stressLevel,
    )
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": user},
    ]


class StudyPlanGenerator:
    """Turns a plan request into a ``PlanResult``; never raises."""

    def __init__(
        self,
        config: Settings,
        gateway: GatewayClient | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._config_error: str | None = None
        if gateway is None:
            try:
                gateway = GatewayClient.from_settings(config)
            except ConfigError as exc:
                self._config_error = str(exc)
        self._gateway = gateway
        self._clock = clock

    @property
    def configured(self) -> bool:
        return self._gateway is not None

    def attempt_generate(self, request: PlanRequest) -> PlanResult:
        if self._gateway is None:
            logger.error("Plan generation skipped: %s", self._config_error)
            return err("config_error", self._config_error or "AI gateway not configured")

        now = self._clock() if self._clock else None
        messages = build_messages(request, now)

        logger.info("Plan LLM call started")
        try:
            data = self._gateway.complete(messages, [PLAN_TOOL], PLAN_TOOL_CHOICE)
        except GatewayStatusError as exc:
            if exc.status_code == 429:
                return err("rate_limited", str(exc))
            if exc.status_code == 402:
                return err("payment_required", str(exc))
            logger.error("AI gateway error: %s %s", exc.status_code, exc.body)
            return err("upstream_error", str(exc))
        except GatewayTransportError as exc:
            logger.error("AI gateway unreachable: %s", exc)
            return err("network_error", str(exc))
        except GatewayError as exc:
            logger.error("AI gateway failure: %s", exc)
            return err("upstream_error", str(exc))
        except Exception as exc:
            logger.exception("Unexpected error calling AI gateway")
            return err("upstream_error", str(exc))
        logger.info("Plan LLM call finished")

        try:
            arguments = extract_tool_arguments(data, PLAN_TOOL_NAME)
        except ToolCallError as exc:
            logger.error("Plan tool call missing: %s", exc)
            return err("invalid_tool_call", str(exc))

        try:
            plan = parse_json_with_schema(arguments, StudyPlanResponse)
        except json.JSONDecodeError as exc:
            logger.error("Plan tool arguments are not JSON: %s", exc)
            return err("invalid_json", str(exc))
        except ValidationError as exc:
            logger.error("Incomplete study plan generated: %s", exc.errors())
            return err("incomplete_plan", "Incomplete study plan generated")

        return ok(plan)
