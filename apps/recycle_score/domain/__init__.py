"""Recycle Score Domain Layer."""
