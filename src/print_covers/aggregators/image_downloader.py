"""Image downloader for fetching the cover variants of an issue."""

import logging
from pathlib import Path

from print_covers import util
from print_covers.cache import CacheStore
from print_covers.clients import CoverClient, FetchFailure
from print_covers.exceptions import InvalidImageContent
from print_covers.settings import CoverSettings, ImageVariant
from schemas.aggregate import IssueImages
from schemas.issue import IssueDescriptor

logger = logging.getLogger(__name__)

HTML_SIGNATURES = (b"<html", b"<!doctype html")


def looks_like_html(content: bytes) -> bool:
    """Check whether a response body is an HTML page rather than an image."""
    head = content[:64].lstrip().lower()
    return head.startswith(HTML_SIGNATURES)


class ImageDownloader:
    """Downloads and caches every image variant of an issue.

    An image already present in the cache is never fetched again. A variant
    that fails to download is logged and left without a cache file; the
    other variants and issues are unaffected.

    Example:
        downloader = ImageDownloader(settings, cache, client)
        images = downloader.download_issue_images(2018, issue)
    """

    def __init__(
        self,
        settings: CoverSettings,
        cache: CacheStore,
        client: CoverClient,
    ):
        self.settings = settings
        self.cache = cache
        self.client = client

    def variant_url(self, thumbnail_image_url: str, variant: ImageVariant) -> str:
        """Derive a variant's URL from the thumbnail URL."""
        thumbnail = self.settings.thumbnail_variant
        return thumbnail_image_url.replace(thumbnail.url_segment, variant.url_segment)

    def download_issue_images(self, year: int, issue: IssueDescriptor) -> IssueImages:
        """Fetch all variants of an issue and record their locations.

        Every variant gets a location, including variants that failed to
        download.

        Args:
            year: Year of the index page the issue was listed on
            issue: The issue to fetch images for

        Returns:
            IssueImages with one location per variant
        """
        files: dict[str, str] = {}

        for variant in self.settings.variants:
            url = self.variant_url(issue.thumbnail_image_url, variant)
            path = self.cache.resolve_path(
                "image", year=year, issue_date=issue.issue_date, variant=variant.cache_segment
            )

            try:
                self._download_variant(issue, variant, url, path)
            except (InvalidImageContent, FetchFailure, OSError) as e:
                logger.error(f"ERROR loading {variant.name} image for {issue.ymd}: {e}")

            files[variant.name] = url if self.settings.use_remote_images else str(path)

        return IssueImages(display_date=issue.display_date, files=files)

    def _download_variant(
        self,
        issue: IssueDescriptor,
        variant: ImageVariant,
        url: str,
        path: Path,
    ) -> bool:
        """Fetch one variant unless it is already cached.

        Returns:
            True if the image was fetched, False on a cache hit

        Raises:
            InvalidImageContent: If the response is empty or an HTML page
        """
        if self.cache.exists(path):
            return False

        label = f"{issue.ymd} {issue.display_date}".rstrip()
        logger.info(f"    {label}: fetch {variant.name} image")

        try:
            content = self.client.fetch_image(url)
            if not content:
                raise InvalidImageContent(f"empty response from {url}")
            if looks_like_html(content):
                raise InvalidImageContent(f"HTML page instead of image from {url}")
            self.cache.write(path, content)
        finally:
            util.throttle_after_fetch(
                self.settings.throttle_enabled, self.settings.throttle_seconds
            )

        return True
