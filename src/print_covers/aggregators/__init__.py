"""Aggregators for gathering covers from the print-edition site."""

from .cover_aggregator import CoverAggregator, IndexContent
from .image_downloader import ImageDownloader

__all__ = ["CoverAggregator", "ImageDownloader", "IndexContent"]
