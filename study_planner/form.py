"""Client-side form state for collecting a study plan request."""

from __future__ import annotations

from datetime import date

from pydantic import ValidationError

from study_planner.schemas.plan import StressLevel, StudyPlanInput
from study_planner.utils.constants import MAX_HOURS_PER_DAY, MIN_HOURS_PER_DAY

STRESS_LEVELS = ("low", "medium", "high")


class FormError(ValueError):
    """Raised when the form cannot be submitted."""


class StudyPlanForm:
    """Mutable form state; ``submit`` freezes it into a ``StudyPlanInput``."""

    def __init__(self):
        self.subjects: list[str] = []
        self.weak_subjects: list[str] = []
        self.exam_date: date | None = None
        self.hours_per_day: int = 4
        self.stress_level: StressLevel = "medium"

    def add_subject(self, name: str) -> bool:
        subject = (name or "").strip()
        if not subject or subject in self.subjects:
            return False
        self.subjects.append(subject)
        return True

    def remove_subject(self, name: str) -> None:
        self.subjects = [s for s in self.subjects if s != name]
        self.weak_subjects = [s for s in self.weak_subjects if s != name]

    def toggle_weak(self, name: str) -> None:
        if name not in self.subjects:
            return
        if name in self.weak_subjects:
            self.weak_subjects = [s for s in self.weak_subjects if s != name]
        else:
            self.weak_subjects.append(name)

    def set_exam_date(self, value: str | date) -> None:
        if isinstance(value, date):
            self._set_parsed_date(value)
            return
        try:
            parsed = date.fromisoformat(value.strip())
        except ValueError as exc:
            raise FormError(f"Invalid exam date: {value!r} (expected YYYY-MM-DD)") from exc
        self._set_parsed_date(parsed)

    def _set_parsed_date(self, value: date) -> None:
        if value < date.today():
            raise FormError("Exam date cannot be in the past")
        self.exam_date = value

    def set_hours(self, hours: int) -> None:
        if not MIN_HOURS_PER_DAY <= hours <= MAX_HOURS_PER_DAY:
            raise FormError(
                f"Hours per day must be between {MIN_HOURS_PER_DAY} and {MAX_HOURS_PER_DAY}"
            )
        self.hours_per_day = hours

    def set_stress(self, level: str) -> None:
        normalized = (level or "").strip().lower()
        if normalized not in STRESS_LEVELS:
            raise FormError(f"Stress level must be one of: {', '.join(STRESS_LEVELS)}")
        self.stress_level = normalized

    @property
    def can_submit(self) -> bool:
        return bool(self.subjects) and self.exam_date is not None

    def submit(self) -> StudyPlanInput:
        if not self.can_submit:
            raise FormError("Add at least one subject and choose an exam date")
        try:
            return StudyPlanInput(
                subjects=list(self.subjects),
                examDate=self.exam_date,
                hoursPerDay=self.hours_per_day,
                weakSubjects=list(self.weak_subjects),
                stressLevel=self.stress_level,
            )
        except ValidationError as exc:
            raise FormError(str(exc)) from exc
