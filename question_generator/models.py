from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class QuestionResult:
    question: str
    ideal_answer: str

    def to_dict(self) -> Dict[str, str]:
        return {"question": self.question, "ideal_answer": self.ideal_answer}
