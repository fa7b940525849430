"""Issue descriptor parsed from a yearly covers index page."""

from datetime import date

from pydantic import BaseModel, ConfigDict


class IssueDescriptor(BaseModel):
    """One print edition discovered on a year's index page.

    Attributes:
        issue_date: Publication date, unique within a year
        display_date: Human-readable date label (may be empty)
        thumbnail_image_url: Source URL of the thumbnail cover image
        issue_page_url: URL of the issue's own page
    """

    model_config = ConfigDict(frozen=True)

    issue_date: date
    display_date: str = ""
    thumbnail_image_url: str
    issue_page_url: str | None = None

    @property
    def ymd(self) -> str:
        return self.issue_date.isoformat()
