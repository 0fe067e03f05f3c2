"""Map a generation result to the HTTP status and body sent to the client."""

from __future__ import annotations

from typing import Any

from study_planner.planner.contracts import PlanResult
from study_planner.planner.fallback import fallback_plan

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again in a moment."
PAYMENT_REQUIRED_MESSAGE = "Service temporarily unavailable. Please try again later."

_PASSTHROUGH = {
    "rate_limited": (429, RATE_LIMIT_MESSAGE),
    "payment_required": (402, PAYMENT_REQUIRED_MESSAGE),
}


def resolve(result: PlanResult) -> tuple[int, dict[str, Any]]:
    """Return ``(status, body)`` for a generation result.

    Rate-limit and payment-required failures pass through with their own
    status; every other failure becomes a 200 carrying the fallback plan.
    """
    if result["ok"]:
        return 200, result["plan"].model_dump()

    code = result["failure"]["code"]
    if code in _PASSTHROUGH:
        status, message = _PASSTHROUGH[code]
        return status, {"error": message}
    return 200, fallback_plan().model_dump()
