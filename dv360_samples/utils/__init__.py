"""Utility helpers package for HTML rendering, IDs, and file staging."""
