"""Recycle Score Presentation Layer."""
