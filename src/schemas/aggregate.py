"""In-memory aggregate of every harvested cover, handed to rendering.

Structure:
    years
    └── {year}                      # descending, current year first
        └── {YYYY-MM-DD}            # index page order
            ├── display_date
            └── files
                ├── THUMBNAIL: location
                ├── MEDIUM: location
                └── LARGE: location

A location is a local cache path or a remote URL, depending on the run.
"""

from pydantic import BaseModel, Field


class IssueImages(BaseModel):
    """Image locations for one issue.

    Attributes:
        display_date: Human-readable date label
        files: Variant name to location, in variant order
    """

    display_date: str = ""
    files: dict[str, str] = Field(default_factory=dict)


class CoverAggregate(BaseModel):
    """Year to issue date to image locations."""

    years: dict[int, dict[str, IssueImages]] = Field(default_factory=dict)

    def ensure_year(self, year: int) -> dict[str, IssueImages]:
        return self.years.setdefault(year, {})

    def add_issue(self, year: int, ymd: str, images: IssueImages) -> None:
        self.ensure_year(year)[ymd] = images

    def issue_count(self, year: int | None = None) -> int:
        if year is not None:
            return len(self.years.get(year, {}))
        return sum(len(issues) for issues in self.years.values())
