from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class QuestionType(str, Enum):
    YES_NO = "YES_NO"
    CONFIRMATION = "CONFIRMATION"


class AnswerValue(str, Enum):
    YES = "YES"
    NO = "NO"
    SKIPPED = "SKIPPED"


class Answer(BaseModel):
    value: AnswerValue = AnswerValue.SKIPPED
    text: str = ""

    def is_yes(self) -> bool:
        return self.value == AnswerValue.YES


class Question(BaseModel):
    text: str
    type: QuestionType = QuestionType.YES_NO
    stage: str = ""
    default: Answer | None = None

    def hint(self) -> str:
        if self.default is None:
            return "[y/n]"
        if self.default.is_yes():
            return "[Y/n]"
        return "[y/N]"
