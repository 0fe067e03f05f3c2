"""Exam date helpers."""

from __future__ import annotations

import math
from datetime import datetime, timezone

_SECONDS_PER_DAY = 60 * 60 * 24


def parse_exam_date(raw: str) -> datetime | None:
    """Parse a ``YYYY-MM-DD`` or ISO timestamp; naive values are taken as UTC."""
    text = (raw or "").strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def days_until_exam(raw: str, now: datetime | None = None) -> int | None:
    exam = parse_exam_date(raw)
    if exam is None:
        return None
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return math.ceil((exam - now).total_seconds() / _SECONDS_PER_DAY)
