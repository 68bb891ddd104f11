"""Curriculum context formatting for the feedback prompt."""

import json
import logging
from typing import Any

from .constants import NO_CONTEXT_PLACEHOLDER

logger = logging.getLogger(__name__)

# (field, label) in the order the bullets are emitted.
CONTEXT_FIELDS = (
    ("phase", "Phase"),
    ("topic", "Topic"),
    ("description", "Topic Description"),
    ("keyTags", "Key Tags"),
    ("deliverable", "Deliverable"),
)


def _coerce(raw: Any) -> dict | None:
    """Turn *raw* into a dict, or None if it carries no structured context."""
    if isinstance(raw, dict):
        return raw
    if isinstance(raw, str):
        try:
            parsed = json.loads(raw)
        except ValueError:
            logger.debug("Context is not JSON, ignoring it")
            return None
        return parsed if isinstance(parsed, dict) else None
    return None


def format_context(raw: Any) -> str:
    """Render curriculum context as a bulleted block.

    *raw* may be None, a JSON-encoded string or a dict.  Only recognised
    fields are rendered; anything unparseable or empty yields the
    placeholder text.  Never raises.
    """
    ctx = _coerce(raw)
    if not ctx:
        return NO_CONTEXT_PLACEHOLDER

    parts = []
    for key, label in CONTEXT_FIELDS:
        value = ctx.get(key)
        if not value:
            continue
        if isinstance(value, (list, tuple)):
            value = ", ".join(str(v) for v in value)
        parts.append(f"- {label}: {value}")

    return "\n".join(parts) or NO_CONTEXT_PLACEHOLDER
