"""Rule-based goal feedback used when no AI provider answers."""

import re

ACTION_VERBS = ("complete", "finish", "build", "create")
MEASURE_MARKERS = ("hour", "minute", "page")
_DIGIT = re.compile(r"\d")

ACTION_ADVICE = "Consider making your goal more action-oriented with specific outcomes."
MEASURE_ADVICE = "Add measurable criteria to track your progress."
GUIDING_QUESTIONS = (
    "• What specific steps will you take to achieve this?",
    "• How will you know when you've completed it?",
    "• What resources or help do you need?",
)


def generate_fallback_feedback(goal_text: str) -> str:
    """Return SMART-style advice for *goal_text* without any network access.

    Adds an advisory line when the goal has no action verb and another when
    it has nothing measurable, followed by the three guiding questions.
    """
    goal = goal_text.lower()
    lines = []

    if not any(verb in goal for verb in ACTION_VERBS):
        lines.append(ACTION_ADVICE)

    if not any(marker in goal for marker in MEASURE_MARKERS) and not _DIGIT.search(goal):
        lines.append(MEASURE_ADVICE)

    lines.extend(GUIDING_QUESTIONS)
    return "\n\n".join(lines)
