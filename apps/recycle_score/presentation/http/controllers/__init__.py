"""HTTP Controllers."""

from recycle_score.presentation.http.controllers.addresses import router as addresses_router
from recycle_score.presentation.http.controllers.health import router as health_router
from recycle_score.presentation.http.controllers.score import router as score_router

__all__ = ["addresses_router", "health_router", "score_router"]
