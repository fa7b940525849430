"""Time, path and URL helpers shared across the pipeline."""

import logging
import time
from datetime import date, datetime
from urllib.parse import quote

logger = logging.getLogger(__name__)

YEAR_FILTER_KEY = "date_filter[value][year]"


def current_year() -> int:
    return datetime.now().year


def current_time_millis() -> float:
    return time.time() * 1000


def last_part_of_path(path: str) -> str:
    """Return the text after the last slash, or an empty string if there is none.

    Examples:
        >>> last_part_of_path("/printedition/2018-09-15")
        '2018-09-15'
        >>> last_part_of_path("no-slash")
        ''
    """
    n = path.rfind("/")
    return path[n + 1:] if n >= 0 else ""


def directory_part_of_path(path: str) -> str:
    """Return the text before the last slash.

    A path whose only slash is the leading one yields "/", and a path
    without any slash yields an empty string.

    Examples:
        >>> directory_part_of_path("images/2018/thumbnail.jpg")
        'images/2018'
        >>> directory_part_of_path("/root")
        '/'
    """
    n = path.rfind("/")
    if n == 0:
        return "/"
    return path[:n] if n > 0 else ""


def index_page_url(base_url: str, year: int, print_region: int) -> str:
    """Build the URL of the covers index page for a given year.

    The year filter key contains brackets and must be percent-encoded.
    """
    return (
        f"{base_url}/covers"
        f"?{quote(YEAR_FILTER_KEY, safe='')}={year}"
        f"&print_region={print_region}"
    )


def issue_page_url(base_url: str, issue_date: date | str) -> str:
    return f"{base_url}/{issue_date}"


def throttle_after_fetch(enabled: bool, seconds: float) -> None:
    """Pause after a network fetch to keep the request rate polite."""
    if enabled and seconds > 0:
        logger.debug(f"Throttling for {seconds}s")
        time.sleep(seconds)
