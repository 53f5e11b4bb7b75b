from __future__ import annotations

import sys

from git_sync.interviewer.models import Answer, AnswerValue, Question


class ConsoleInterviewer:
    """Reads yes/no answers from stdin, one line per question.

    An empty line, EOF or Ctrl-C takes the question's default. Messages
    informed with ``stage="warning"`` or ``stage="error"`` go to stderr.
    """

    def ask(self, question: Question) -> Answer:
        response = self._read_input(f"{question.text} {question.hint()}: ")
        if response is None or not response.strip():
            return self._handle_default(question)

        response = response.strip().upper()
        if response in ("Y", "YES"):
            return Answer(value=AnswerValue.YES, text=response)
        return Answer(value=AnswerValue.NO, text=response)

    def inform(self, message: str, stage: str = "") -> None:
        stream = sys.stderr if stage in ("warning", "error") else sys.stdout
        print(message, file=stream, flush=True)

    def _handle_default(self, question: Question) -> Answer:
        if question.default is not None:
            return question.default
        return Answer(value=AnswerValue.SKIPPED)

    def _read_input(self, prompt: str) -> str | None:
        try:
            return input(prompt)
        except (EOFError, KeyboardInterrupt):
            print(flush=True)
            return None
