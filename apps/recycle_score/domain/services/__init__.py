"""Domain Services."""

from recycle_score.domain.services.score_extractor import extract_score, is_qualifying_detection

__all__ = ["extract_score", "is_qualifying_detection"]
