"""Textual widgets for statbar."""
