"""Schema definitions for the print cover pipeline."""

from .aggregate import CoverAggregate, IssueImages
from .issue import IssueDescriptor

__all__ = [
    "CoverAggregate",
    "IssueDescriptor",
    "IssueImages",
]
