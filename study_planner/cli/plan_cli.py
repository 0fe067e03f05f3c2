"""Command-line client for the study plan endpoint."""

from __future__ import annotations

import argparse
import logging
import sys

from study_planner.api_client import StudyPlanClient, StudyPlanClientError
from study_planner.config import settings
from study_planner.export import DEFAULT_EXPORT_FILENAME, download_plan, render_plan_text
from study_planner.form import STRESS_LEVELS, FormError, StudyPlanForm

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a weekly study plan")
    parser.add_argument("--subject", action="append", default=[], help="Subject to study (repeatable)")
    parser.add_argument("--weak", action="append", default=[], help="Subject needing extra attention (repeatable)")
    parser.add_argument("--exam-date", help="Exam date, YYYY-MM-DD")
    parser.add_argument("--hours", type=int, default=4, help="Available study hours per day (1-12)")
    parser.add_argument("--stress", choices=STRESS_LEVELS, default="medium", help="Current stress level")
    parser.add_argument("--url", default=settings.planner_base_url, help="Service base URL")
    parser.add_argument("--key", default=settings.planner_public_key, help="Public bearer key")
    parser.add_argument(
        "--timeout",
        type=int,
        default=settings.planner_timeout_seconds,
        help="Request timeout in seconds",
    )
    parser.add_argument(
        "--download",
        nargs="?",
        const=DEFAULT_EXPORT_FILENAME,
        help="Also save the plan as a text file",
    )
    parser.add_argument("--interactive", action="store_true", help="Prompt for the form fields")
    return parser.parse_args(argv)


def build_form(args: argparse.Namespace) -> StudyPlanForm:
    form = StudyPlanForm()
    for subject in args.subject:
        form.add_subject(subject)
    for subject in args.weak:
        form.add_subject(subject)
        if subject.strip() not in form.weak_subjects:
            form.toggle_weak(subject.strip())
    if args.exam_date:
        form.set_exam_date(args.exam_date)
    form.set_hours(args.hours)
    form.set_stress(args.stress)
    return form


def _prompt(label: str) -> str:
    try:
        return input(label).strip()
    except EOFError:
        return ""


def fill_form_interactively(form: StudyPlanForm) -> None:
    """Ask for whatever the flags left empty."""
    if not form.subjects:
        print("Enter subjects, one per line. Blank line to finish.")
        while True:
            subject = _prompt("subject> ")
            if not subject:
                break
            form.add_subject(subject)
    if form.subjects and not form.weak_subjects:
        weak = _prompt("Weak subjects (comma separated, optional)> ")
        for name in (w.strip() for w in weak.split(",")):
            if name in form.subjects:
                form.toggle_weak(name)
    while form.exam_date is None:
        raw = _prompt("Exam date (YYYY-MM-DD)> ")
        if not raw:
            break
        try:
            form.set_exam_date(raw)
        except FormError as exc:
            print(exc)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    try:
        form = build_form(args)
    except FormError as exc:
        print(f"Error: {exc}")
        return 2
    if args.interactive:
        fill_form_interactively(form)

    try:
        plan_input = form.submit()
    except FormError as exc:
        print(f"Error: {exc}")
        return 2

    client = StudyPlanClient(args.url, public_key=args.key, timeout=args.timeout)
    while True:
        try:
            plan = client.generate(plan_input)
            break
        except StudyPlanClientError as exc:
            logger.error("Plan request failed: %s", exc)
            print(f"Something went wrong: {exc}")
            if not args.interactive or _prompt("Retry? [y/N]> ").lower() not in {"y", "yes"}:
                return 1

    print("✨ Study Plan Ready!")
    print(render_plan_text(plan))
    if args.download:
        path = download_plan(plan, args.download)
        print(f"Study plan saved as text file: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
