"""Recycle Score Infrastructure Layer."""
