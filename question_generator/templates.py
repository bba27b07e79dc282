from __future__ import annotations

import math
from typing import Tuple

from .models import QuestionResult


WARMING_UP_RESULT = QuestionResult(
    question="The AI model is currently loading. Please try again in a moment.",
    ideal_answer="N/A",
)

# (question, ideal_answer) pairs, formatted with topic and sub_topic.
FALLBACK_TEMPLATES: Tuple[Tuple[str, str], ...] = (
    (
        "Explain the concept of {sub_topic} in {topic} and its practical applications.",
        "{sub_topic} is an important concept in {topic}. It involves understanding the core "
        "principles and being able to apply them in real-world scenarios.",
    ),
    (
        "What are the main advantages and disadvantages of using {sub_topic} in {topic}?",
        "When considering {sub_topic}, it's important to weigh both benefits and drawbacks "
        "in the context of {topic}.",
    ),
    (
        "Can you describe a real-world scenario where {sub_topic} would be particularly useful in {topic}?",
        "{sub_topic} can be applied in various scenarios within {topic}, particularly when "
        "specific requirements need to be met.",
    ),
    (
        "How does {sub_topic} compare to alternative approaches in {topic}?",
        "Understanding the trade-offs between {sub_topic} and other approaches is crucial for "
        "making informed decisions in {topic}.",
    ),
    (
        "What are common mistakes developers make when implementing {sub_topic} in {topic}?",
        "Being aware of common pitfalls helps in implementing {sub_topic} correctly in {topic} projects.",
    ),
)


def fallback_question(topic: str, sub_topic: str, now: float) -> QuestionResult:
    """
    Pick a canned question by wall-clock second, so it varies over time but
    is stable within one second.
    """
    question, answer = FALLBACK_TEMPLATES[math.floor(now) % len(FALLBACK_TEMPLATES)]
    return QuestionResult(
        question=question.format(topic=topic, sub_topic=sub_topic),
        ideal_answer=answer.format(topic=topic, sub_topic=sub_topic),
    )
