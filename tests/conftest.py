"""Pytest fixtures for print-covers tests."""

from datetime import date

import pytest

from print_covers.cache import CacheStore
from print_covers.settings import CoverSettings
from schemas.issue import IssueDescriptor

IMAGE_URL_BASE = (
    "https://www.economist.com/sites/default/files/imagecache/"
    "print-cover-thumbnail/print-covers"
)


@pytest.fixture
def image_url_base():
    return IMAGE_URL_BASE


@pytest.fixture
def thumbnail_image_url():
    return f"{IMAGE_URL_BASE}/20180922_cuk400.jpg"


@pytest.fixture
def sample_index_content():
    """Index page fragment with three cover blocks, newest first."""
    return f"""
        <div class="views-print-cover">
            <a href="/path/2018-09-15"><img src="{IMAGE_URL_BASE}/20180915_cuk400hires.jpg" /></a>
            <div><span class="date-display-single">Sep 15 2018</span></div>
        </div>
        <div class="views-print-cover">
            <a href="/path/2018-09-08"><img src="{IMAGE_URL_BASE}/20180908_cuk400.jpg" /></a>
            <div><span class="date-display-single">Sep 8 2018</span></div>
        </div>
        <div class="views-print-cover">
            <a href="/path/2018-09-01"><img src="{IMAGE_URL_BASE}/20180901_cna400.jpg" /></a>
            <div><span class="date-display-single">Sep 1 2018</span></div>
        </div>
        """


@pytest.fixture
def sample_image_content():
    return bytes([1, 2, 3, 4, 16])


@pytest.fixture
def sample_issue(thumbnail_image_url):
    return IssueDescriptor(
        issue_date=date(2018, 9, 22),
        display_date="Sep 22nd 2018",
        thumbnail_image_url=thumbnail_image_url,
        issue_page_url="https://www.economist.com/printedition/2018-09-22",
    )


@pytest.fixture
def settings(tmp_path):
    """Settings rooted in a temporary directory with throttling disabled."""
    return CoverSettings(
        root_dir=tmp_path,
        output_dir=tmp_path / "output",
        throttle_enabled=False,
    )


@pytest.fixture
def cache(tmp_path):
    return CacheStore(tmp_path)
