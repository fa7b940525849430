"""Transformers for rendering the cover aggregate to HTML."""

from .index_renderer import IndexRenderer

__all__ = ["IndexRenderer"]
