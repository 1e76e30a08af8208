"""Submission Commands."""

from recycle_score.application.submission.commands.submit_score import (
    SubmitScoreCommand,
    SubmitScoreRequest,
    SubmitScoreResponse,
)

__all__ = [
    "SubmitScoreCommand",
    "SubmitScoreRequest",
    "SubmitScoreResponse",
]
