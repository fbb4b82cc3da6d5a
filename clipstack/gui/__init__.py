"""Presentation helpers for the clipboard history window."""
