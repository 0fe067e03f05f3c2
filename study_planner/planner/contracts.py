from __future__ import annotations

from typing import Literal
from typing_extensions import TypedDict

from study_planner.schemas.plan import StudyPlanResponse


FailureCode = Literal[
    "config_error",
    "invalid_request",
    "rate_limited",
    "payment_required",
    "upstream_error",
    "network_error",
    "invalid_tool_call",
    "invalid_json",
    "incomplete_plan",
]


class PlanFailureInfo(TypedDict):
    code: FailureCode
    message: str


class PlanSuccess(TypedDict):
    ok: Literal[True]
    plan: StudyPlanResponse


class PlanFailure(TypedDict):
    ok: Literal[False]
    failure: PlanFailureInfo


PlanResult = PlanSuccess | PlanFailure


def ok(plan: StudyPlanResponse) -> PlanSuccess:
    return {"ok": True, "plan": plan}


def err(code: FailureCode, message: str) -> PlanFailure:
    return {"ok": False, "failure": {"code": code, "message": message}}
