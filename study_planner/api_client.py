"""HTTP client for the study plan endpoint."""

from __future__ import annotations

import requests
from pydantic import ValidationError

from study_planner.utils.constants import PLAN_ROUTE
from study_planner.schemas.plan import StudyPlanInput, StudyPlanResponse

DEFAULT_ERROR_MESSAGE = "Failed to generate study plan"


class StudyPlanClientError(Exception):
    """Raised with a user-facing message when plan generation fails."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class StudyPlanClient:
    def __init__(self, base_url: str, public_key: str = "", timeout: float = 90, session=None):
        self.url = base_url.rstrip("/") + PLAN_ROUTE
        self._public_key = public_key
        self._timeout = timeout
        self._session = session or requests.Session()

    def generate(self, plan_input: StudyPlanInput) -> StudyPlanResponse:
        headers = {"Content-Type": "application/json"}
        if self._public_key:
            headers["Authorization"] = f"Bearer {self._public_key}"
        try:
            resp = self._session.post(
                self.url, json=plan_input.to_payload(), headers=headers, timeout=self._timeout
            )
        except requests.RequestException as exc:
            raise StudyPlanClientError(str(exc) or DEFAULT_ERROR_MESSAGE) from exc

        if not resp.ok:
            raise StudyPlanClientError(_error_message(resp), status_code=resp.status_code)

        try:
            return StudyPlanResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise StudyPlanClientError(DEFAULT_ERROR_MESSAGE, status_code=resp.status_code) from exc


def _error_message(resp) -> str:
    try:
        data = resp.json()
    except ValueError:
        return DEFAULT_ERROR_MESSAGE
    if isinstance(data, dict) and isinstance(data.get("error"), str) and data["error"]:
        return data["error"]
    return DEFAULT_ERROR_MESSAGE
