"""Plain-text rendering and file export of a study plan."""

from __future__ import annotations

from pathlib import Path

from study_planner.schemas.plan import StudyPlanResponse

DEFAULT_EXPORT_FILENAME = "my-study-plan.txt"


def _hours(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def render_plan_text(plan: StudyPlanResponse) -> str:
    """Render the plan as the text block used for copy, share and download."""
    content = f"📚 MY STUDY PLAN\n{'=' * 40}\n\n"
    content += f"📝 Overview:\n{plan.overview}\n\n"
    content += f"📅 Weekly Schedule:\n{'-' * 30}\n"

    for day in plan.weeklyPlan:
        content += f"\n{day.day} ({_hours(day.studyHours)}h):\n"
        for task in day.tasks:
            content += f"  • {task}\n"

    content += f"\n💡 Focus Tips:\n{'-' * 30}\n"
    for tip in plan.focusTips:
        content += f"  ✓ {tip}\n"

    if plan.burnoutWarnings:
        content += f"\n⚠️ Burnout Warnings:\n{'-' * 30}\n"
        for warning in plan.burnoutWarnings:
            content += f"  ! {warning}\n"

    content += f"\n💪 Motivation:\n{'-' * 30}\n{plan.motivation}\n"
    return content


def download_plan(plan: StudyPlanResponse, path: str | Path = DEFAULT_EXPORT_FILENAME) -> Path:
    target = Path(path)
    target.write_text(render_plan_text(plan), encoding="utf-8")
    return target
