"""Static plan returned whenever generation fails."""

from study_planner.schemas.plan import DailyPlan, StudyPlanResponse

FALLBACK_PLAN = StudyPlanResponse(
    overview=(
        "We encountered an issue generating your personalized plan. "
        "Here's a general study strategy to get you started."
    ),
    weeklyPlan=[
        DailyPlan(day="Monday", tasks=["Review notes from all subjects", "Create study flashcards"], studyHours=4),
        DailyPlan(day="Tuesday", tasks=["Focus on weak subjects", "Practice problems"], studyHours=4),
        DailyPlan(day="Wednesday", tasks=["Active recall session", "Group study if possible"], studyHours=4),
        DailyPlan(day="Thursday", tasks=["Review difficult concepts", "Take practice tests"], studyHours=4),
        DailyPlan(day="Friday", tasks=["Light review", "Organize materials"], studyHours=3),
        DailyPlan(day="Saturday", tasks=["Mock exam practice", "Review mistakes"], studyHours=4),
        DailyPlan(day="Sunday", tasks=["Rest and light review", "Plan next week"], studyHours=2),
    ],
    focusTips=[
        "Use the Pomodoro Technique: 25 minutes of focused work, then a 5-minute break",
        "Study in a quiet, well-lit environment",
        "Stay hydrated and take short walks between sessions",
        "Review material before bed for better retention",
    ],
    burnoutWarnings=[
        "Remember to take regular breaks to avoid mental fatigue",
        "Don't sacrifice sleep for extra study time",
    ],
    motivation=(
        "You've got this! Every hour of focused study brings you closer to your goals. "
        "Believe in yourself and stay consistent."
    ),
)


def fallback_plan() -> StudyPlanResponse:
    return FALLBACK_PLAN.model_copy(deep=True)
