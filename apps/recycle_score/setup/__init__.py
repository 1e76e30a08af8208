"""Recycle Score Setup - Config, Logging, Tracing, Dependencies."""

from recycle_score.setup.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
