"""Textual widgets and default renderers for termlist."""
