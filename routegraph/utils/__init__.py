"""Utility helpers shared across routegraph modules."""
