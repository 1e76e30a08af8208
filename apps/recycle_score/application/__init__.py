"""Recycle Score Application Layer."""
