from __future__ import annotations

from collections import deque

from git_sync.interviewer.models import Answer, AnswerValue, Question


class QueueInterviewer:
    def __init__(self, answers: list[Answer]) -> None:
        self._answers: deque[Answer] = deque(answers)
        self._questions: list[Question] = []
        self._messages: list[tuple[str, str]] = []

    def ask(self, question: Question) -> Answer:
        self._questions.append(question)
        if self._answers:
            return self._answers.popleft()
        if question.default is not None:
            return question.default
        return Answer(value=AnswerValue.SKIPPED)

    def inform(self, message: str, stage: str = "") -> None:
        self._messages.append((message, stage))

    @property
    def questions(self) -> list[Question]:
        return list(self._questions)

    @property
    def messages(self) -> list[str]:
        return [message for message, _ in self._messages]
