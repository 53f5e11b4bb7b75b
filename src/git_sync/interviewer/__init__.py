from git_sync.interviewer.auto_approve import AutoApproveInterviewer
from git_sync.interviewer.base import Interviewer
from git_sync.interviewer.console import ConsoleInterviewer
from git_sync.interviewer.models import Answer, AnswerValue, Question, QuestionType
from git_sync.interviewer.queue import QueueInterviewer

__all__ = [
    "Answer",
    "AnswerValue",
    "AutoApproveInterviewer",
    "ConsoleInterviewer",
    "Interviewer",
    "Question",
    "QuestionType",
    "QueueInterviewer",
]
