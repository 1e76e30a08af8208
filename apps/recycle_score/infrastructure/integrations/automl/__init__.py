"""AutoML Vision Integration."""

from recycle_score.infrastructure.integrations.automl.automl_gateway import (
    AutoMLPredictionGateway,
)

__all__ = ["AutoMLPredictionGateway"]
