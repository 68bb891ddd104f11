"""Response-shape extractors.

Provider envelopes are not stable, so the text is pulled out by an ordered
list of extractors.  Each one pairs a ``matches`` predicate with a
``project`` function; the first extractor whose predicate accepts the
payload wins.  The last resort is the JSON dump of the payload itself.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Extractor:
    name: str
    matches: Callable[[Any], bool]
    project: Callable[[Any], str]


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def _part_text(part: Any) -> str | None:
    if isinstance(part, dict) and isinstance(part.get("text"), str):
        return part["text"]
    return None


def _candidates_text(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    candidate = _first(payload.get("candidates"))
    if not isinstance(candidate, dict):
        return None
    content = candidate.get("content")
    # Gemini REST nests the parts; some SDK builds return the list directly.
    if isinstance(content, dict):
        return _part_text(_first(content.get("parts")))
    return _part_text(_first(content))


def _output_text(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    item = _first(payload.get("output"))
    if not isinstance(item, dict):
        return None
    return _part_text(_first(item.get("content")))


def _choices_text(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    choice = _first(payload.get("choices"))
    if not isinstance(choice, dict):
        return None
    message = choice.get("message")
    if isinstance(message, dict) and isinstance(message.get("content"), str):
        return message["content"]
    return None


def _content_text(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    return _part_text(_first(payload.get("content")))


def _response_text(payload: Any) -> str | None:
    if not isinstance(payload, dict) or "response" not in payload:
        return None
    inner = payload["response"]
    if isinstance(inner, str):
        return inner
    if isinstance(inner, dict):
        for extractor in EXTRACTORS:
            if extractor.name != "response" and extractor.matches(inner):
                return extractor.project(inner)
    return None


def _plain_text(payload: Any) -> str | None:
    if isinstance(payload, str):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("text"), str):
        return payload["text"]
    return None


def _shape(probe: Callable[[Any], str | None], name: str) -> Extractor:
    return Extractor(
        name=name,
        matches=lambda payload: probe(payload) is not None,
        project=lambda payload: probe(payload) or "",
    )


EXTRACTORS: list[Extractor] = [
    _shape(_candidates_text, "candidates"),
    _shape(_output_text, "output"),
    _shape(_response_text, "response"),
    _shape(_choices_text, "choices"),
    _shape(_content_text, "content"),
    _shape(_plain_text, "text"),
]


def _dump(payload: Any) -> str:
    if payload is None:
        return ""
    try:
        return json.dumps(payload)
    except (TypeError, ValueError):
        return str(payload)


def extract_text(payload: Any) -> str:
    """Return the generated text carried by *payload*, stripped.

    Falls back to the serialised payload when no known shape matches.
    """
    for extractor in EXTRACTORS:
        if extractor.matches(payload):
            return extractor.project(payload).strip()
    logger.warning("Unrecognised provider response shape, using raw payload")
    return _dump(payload).strip()
