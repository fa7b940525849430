"""Extract issue descriptors from a yearly covers index page."""

import logging
from datetime import date

from lxml import etree, html

from print_covers import util
from print_covers.exceptions import IndexParseError
from schemas.issue import IssueDescriptor

logger = logging.getLogger(__name__)


def _has_class(name: str) -> str:
    return f'contains(concat(" ", normalize-space(@class), " "), " {name} ")'


COVER_XPATH = f"//*[{_has_class('views-print-cover')}]"
DATE_XPATH = f".//span[{_has_class('date-display-single')}]"


class IndexParser:
    """Turns index page markup into an ordered list of issues.

    Each cover block on the page looks like:

        <div class="views-print-cover">
            <a href="/printedition/2018-09-15"><img src="https://.../thumb.jpg"/></a>
            <span class="date-display-single">Sep 15th 2018</span>
        </div>

    Issues are returned in page order.
    """

    def __init__(self, base_url: str):
        self.base_url = base_url

    def parse(self, content: str) -> list[IssueDescriptor]:
        """Parse index page markup.

        Raises:
            IndexParseError: If the markup cannot be parsed or a cover block is malformed
        """
        if not content or not content.strip():
            logger.debug("Index page is empty")
            return []

        try:
            document = html.fromstring(content)
        except (etree.ParserError, ValueError) as e:
            raise IndexParseError(f"Could not parse index page: {e}") from e

        issues = [self._parse_cover(cover) for cover in document.xpath(COVER_XPATH)]
        logger.debug(f"Parsed {len(issues)} issues from index page")
        return issues

    def _parse_cover(self, cover: html.HtmlElement) -> IssueDescriptor:
        anchors = cover.xpath(".//a[@href]")
        if not anchors:
            raise IndexParseError("Cover block has no issue link")
        anchor = anchors[0]

        images = anchor.xpath(".//img[@src]")
        if not images:
            raise IndexParseError(f"Cover block for {anchor.get('href')} has no image")

        ymd = util.last_part_of_path(anchor.get("href"))
        try:
            issue_date = date.fromisoformat(ymd)
        except ValueError as e:
            raise IndexParseError(f"Invalid issue date {ymd!r} in cover link") from e

        dates = cover.xpath(DATE_XPATH)
        display_date = dates[0].text_content().strip() if dates else ""

        return IssueDescriptor(
            issue_date=issue_date,
            display_date=display_date,
            thumbnail_image_url=images[0].get("src"),
            issue_page_url=util.issue_page_url(self.base_url, issue_date),
        )
