"""Prompt templates for goal feedback."""

CONCISE_TEMPLATE = """\
You are an expert mentor. Read the student's goal and the context.

Student goal: "{goal_text}"

Context:
{context}

Respond in short Markdown only. Do NOT use section headers.
1) Provide a single short sentence (one line) that states the main thing that \
is incorrect or missing in the goal. Keep this one line under ~25 words.
2) Provide up to 5 concise Socratic bullet questions (each 8-20 words) that \
guide the student to fix the goal.
Do NOT rewrite the goal or lecture. Keep total response under 200 words."""

DETAILED_TEMPLATE = """\
You are an expert programming mentor helping students create effective SMART \
goals. Read the student's goal and the curriculum context carefully.

Student goal: "{goal_text}"

Curriculum Context:
{context}

Provide detailed, specific feedback to help the student improve their goal. \
Focus on making it SMART (Specific, Measurable, Achievable, Relevant, \
Time-bound) while considering their current curriculum phase and topic.

Structure your response in Markdown:

**Main Issue:** [One clear sentence identifying the primary problem or missing \
element in the goal]

**SMART Analysis:** [Briefly explain which SMART criteria are missing or weak, \
and why this matters]

**Specific Feedback:** [2-3 sentences explaining why this matters for their \
current curriculum phase and topic, with SMART improvement suggestions]

**Guiding Questions:** [4-6 specific questions that help them refine their \
goal, considering the curriculum context and deliverables]

Keep the response focused and actionable. Reference the curriculum phase, \
topic, and deliverables where relevant."""

TEMPLATES = {
    "concise": CONCISE_TEMPLATE,
    "detailed": DETAILED_TEMPLATE,
}


def build_prompt(goal_text: str, formatted_context: str, style: str = "concise") -> str:
    """Fill the *style* template with the goal and an already-formatted context block."""
    try:
        template = TEMPLATES[style]
    except KeyError:
        raise ValueError(f"Unknown prompt style: {style!r}") from None
    return template.format(goal_text=goal_text, context=formatted_context)
