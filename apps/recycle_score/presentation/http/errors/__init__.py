"""HTTP Error Handling."""

from recycle_score.presentation.http.errors.handlers import (
    describe_error,
    register_exception_handlers,
)

__all__ = ["describe_error", "register_exception_handlers"]
