"""Study plan generation prompt templates and tool schema."""

PLAN_TOOL_NAME = "generate_study_plan"

PLANNER_SYSTEM_PROMPT = """\
You are an expert study planner and focus coach. Your job is to create personalized, realistic study plans that prevent burnout.

IMPORTANT RULES:
- Allocate more time to weak subjects
- If stress level is high, schedule shorter sessions with more breaks
- Never exceed the daily study hours limit
- Include at least one rest day or lighter day per week
- Suggest practical, proven focus techniques
- Warn about potential burnout if schedule is too intense
- Always be encouraging and supportive

The student has {days_until_exam} days until their exam."""

PLANNER_USER_PROMPT = """\
Create a weekly study plan for the following:

Subjects: {subjects}
Weak subjects that need extra attention: {weak_subjects}
Exam date: {exam_date} ({days_until_exam} days away)
Available study time: {hours_per_day} hours per day
Current stress level: {stress_level}

Generate a structured response using the generate_study_plan function."""

PLAN_TOOL = {
    "type": "function",
    "function": {
        "name": PLAN_TOOL_NAME,
        "description": "Generate a structured weekly study plan with focus tips and burnout warnings",
        "parameters": {
            "type": "object",
            "properties": {
                "overview": {
                    "type": "string",
                    "description": "A 1-2 sentence overview of the study plan strategy",
                },
                "weeklyPlan": {
                    "type": "array",
                    "description": "Array of daily study plans for the week",
                    "items": {
                        "type": "object",
                        "properties": {
                            "day": {
                                "type": "string",
                                "description": "Day name (e.g., 'Monday', 'Tuesday')",
                            },
                            "tasks": {
                                "type": "array",
                                "items": {"type": "string"},
                                "description": "List of specific study tasks for this day",
                            },
                            "studyHours": {
                                "type": "number",
                                "description": "Total study hours for this day",
                            },
                        },
                        "required": ["day", "tasks", "studyHours"],
                    },
                },
                "focusTips": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "3-5 practical focus techniques for the student",
                },
                "burnoutWarnings": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Warnings about potential burnout risks and how to avoid them (empty array if no concerns)",
                },
                "motivation": {
                    "type": "string",
                    "description": "A personalized motivational message for the student",
                },
            },
            "required": ["overview", "weeklyPlan", "focusTips", "burnoutWarnings", "motivation"],
        },
    },
}

PLAN_TOOL_CHOICE = {"type": "function", "function": {"name": PLAN_TOOL_NAME}}
