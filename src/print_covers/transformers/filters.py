"""Jinja2 filters for cover index rendering.

These filters are used by the index templates to format aggregate data.
"""

import os
from datetime import date
from pathlib import Path


def format_issue_date(ymd: str) -> str:
    """Format an ISO issue date as a human-readable date.

    Args:
        ymd: Date string in format "YYYY-MM-DD"

    Returns:
        Formatted date string like "September 1, 2018"

    Examples:
        >>> format_issue_date("2018-09-01")
        'September 1, 2018'
    """
    if not ymd:
        return ""
    try:
        dt = date.fromisoformat(ymd)
    except ValueError:
        return ymd
    return dt.strftime("%B %d, %Y").replace(" 0", " ")


def image_href(location: str, output_dir: str | Path = ".") -> str:
    """Turn an image location into a link usable from the output directory.

    Remote URLs are returned unchanged. Local cache paths are made relative
    to the directory the index file is written to.

    Examples:
        >>> image_href("https://example.com/a.jpg", "output")
        'https://example.com/a.jpg'
        >>> image_href("images/2018/2018-09-01/large.jpg", "output")
        '../images/2018/2018-09-01/large.jpg'
    """
    if not location:
        return ""
    if location.startswith(("http://", "https://", "//")):
        return location
    relative = os.path.relpath(Path(location).absolute(), Path(output_dir).absolute())
    return Path(relative).as_posix()


def year_anchor(year: int | str) -> str:
    """Build the fragment id for a year's section.

    Examples:
        >>> year_anchor(2018)
        'year-2018'
    """
    return f"year-{year}"


# Registry of all filters for easy registration with Jinja2
FILTERS = {
    "format_issue_date": format_issue_date,
    "image_href": image_href,
    "year_anchor": year_anchor,
}
