"""Harvest print-edition cover images and build static HTML indices."""

__version__ = "0.1.0"
