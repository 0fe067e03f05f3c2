"""Schemas for study plan requests and responses."""

from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from study_planner.utils.constants import MAX_HOURS_PER_DAY, MIN_HOURS_PER_DAY

StressLevel = Literal["low", "medium", "high"]


class DailyPlan(BaseModel):
    day: str
    tasks: list[str]
    studyHours: int | float

    @field_validator("studyHours")
    @classmethod
    def _non_negative(cls, value):
        if value < 0:
            raise ValueError("studyHours must be non-negative")
        return value


class StudyPlanResponse(BaseModel):
    """Structured plan returned by the model, or the fallback plan."""

    overview: str = Field(min_length=1)
    weeklyPlan: list[DailyPlan] = Field(min_length=1)
    focusTips: list[str] = Field(min_length=1)
    burnoutWarnings: list[str] = Field(default_factory=list)
    motivation: str = ""


class PlanRequest(BaseModel):
    """Request body as accepted by the endpoint.

    Only ``subjects`` and ``examDate`` are checked, by ``missing_required``
    on the raw body; every field is passed into the prompt as received.
    """

    model_config = ConfigDict(extra="ignore")

    subjects: Any = Field(default_factory=list)
    examDate: Any = ""
    hoursPerDay: Any = None
    weakSubjects: Any = Field(default_factory=list)
    stressLevel: Any = None

    @staticmethod
    def missing_required(raw: dict) -> bool:
        subjects = raw.get("subjects")
        if not isinstance(subjects, (list, str)) or len(subjects) == 0:
            return True
        return not raw.get("examDate")


class StudyPlanInput(BaseModel):
    """Validated form input built on the client side."""

    subjects: list[str] = Field(min_length=1)
    examDate: date
    hoursPerDay: int = Field(default=4, ge=MIN_HOURS_PER_DAY, le=MAX_HOURS_PER_DAY)
    weakSubjects: list[str] = Field(default_factory=list)
    stressLevel: StressLevel = "medium"

    @field_validator("subjects")
    @classmethod
    def _distinct_subjects(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError("subjects must be distinct")
        return value

    @model_validator(mode="after")
    def _weak_subset(self) -> "StudyPlanInput":
        unknown = [s for s in self.weakSubjects if s not in self.subjects]
        if unknown:
            raise ValueError(f"weak subjects not in subjects: {', '.join(unknown)}")
        return self

    def to_payload(self) -> dict:
        return self.model_dump(mode="json")
