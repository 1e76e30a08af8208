"""Submission Ports - Prediction Gateway, Submission Writer."""

from recycle_score.application.submission.ports.prediction_gateway import PredictionGateway
from recycle_score.application.submission.ports.submission_writer import SubmissionWriter

__all__ = ["PredictionGateway", "SubmissionWriter"]
