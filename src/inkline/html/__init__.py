"""Rendering model: classification, renderability, visual lines and line merging."""
