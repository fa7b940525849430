"""Parsers for print-edition index pages."""

from .index_parser import IndexParser

__all__ = ["IndexParser"]
