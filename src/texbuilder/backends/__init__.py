"""Backends for markup output (LaTeX fragments, .tex files)."""

from .latex import format_options, keyword, render_environment, save_document

__all__ = ["format_options", "keyword", "render_environment", "save_document"]
