"""Presentation layer: pure views plus Textual widgets."""
