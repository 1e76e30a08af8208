"""Domain Entities."""

from recycle_score.domain.entities.submission import Submission

__all__ = ["Submission"]
