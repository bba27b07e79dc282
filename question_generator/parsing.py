from __future__ import annotations

import json
import logging
from typing import Optional

from .models import QuestionResult


logger = logging.getLogger(__name__)

MISSING_QUESTION = "Could not parse question"
MISSING_ANSWER = "N/A"
GENERIC_IDEAL_ANSWER = "Please provide a comprehensive answer covering the main concepts."


def extract_json_object(text: str) -> Optional[str]:
    """
    Return the first balanced `{...}` span in `text`, or None.

    Braces inside JSON string literals are ignored. The span is not
    validated as JSON here.
    """
    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        for idx in range(start, len(text)):
            ch = text[idx]
            if in_string:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_string = False
                continue
            if ch == '"':
                in_string = True
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return text[start : idx + 1]
        start = text.find("{", start + 1)
    return None


def _field(data: dict, key: str, placeholder: str) -> str:
    value = data.get(key)
    if value is None:
        return placeholder
    text = str(value).strip()
    return text or placeholder


def parse_generated_text(text: str, topic: str, sub_topic: str) -> Optional[QuestionResult]:
    """
    Turn free model output into a question/answer pair.

    A JSON object supplies both fields. Output with no JSON object becomes
    the question itself, with a generic instruction as the ideal answer.
    Returns None when a JSON object is present but cannot be decoded.
    """
    span = extract_json_object(text)
    if span is None:
        logger.warning("No JSON found in response, using raw text")
        return QuestionResult(
            question=text.strip() or f"What are the key concepts of {sub_topic} in {topic}?",
            ideal_answer=GENERIC_IDEAL_ANSWER,
        )

    try:
        data = json.loads(span)
    except json.JSONDecodeError as exc:
        logger.warning("JSON span in model output did not decode: %s", exc)
        return None
    return QuestionResult(
        question=_field(data, "question", MISSING_QUESTION),
        ideal_answer=_field(data, "ideal_answer", MISSING_ANSWER),
    )
