"""Cover aggregator for walking the yearly index pages."""

import logging
from dataclasses import dataclass
from typing import Literal

from print_covers import util
from print_covers.aggregators.image_downloader import ImageDownloader
from print_covers.cache import CacheStore
from print_covers.clients import CoverClient
from print_covers.parsers import IndexParser
from print_covers.settings import CoverSettings
from schemas.aggregate import CoverAggregate
from schemas.issue import IssueDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexContent:
    """Index page markup and where it came from."""

    source: Literal["cache", "net"]
    data: str


class CoverAggregator:
    """Aggregates every year's covers into a single CoverAggregate.

    Years are processed one at a time from the current year down to the
    first supported year. For each year the index page is loaded from the
    cache or the network, parsed into issues, and each issue's images are
    fetched through the ImageDownloader.

    The current year's index page is re-fetched once it is older than the
    configured expiration window. Past years and images never expire.

    Example:
        with CoverClient({"base_url": settings.base_url}) as client:
            aggregator = CoverAggregator(settings, client, CacheStore(settings.root_dir))
            aggregate = aggregator.process_years()
    """

    def __init__(
        self,
        settings: CoverSettings,
        client: CoverClient,
        cache: CacheStore,
        parser: IndexParser | None = None,
        image_downloader: ImageDownloader | None = None,
    ):
        """Initialize the cover aggregator.

        Args:
            settings: Run-level configuration
            client: Client for fetching pages and images
            cache: Cache store for pages and images
            parser: Optional IndexParser for dependency injection
            image_downloader: Optional ImageDownloader for dependency injection
        """
        self.settings = settings
        self.client = client
        self.cache = cache
        self.parser = parser or IndexParser(settings.base_url)
        self.image_downloader = image_downloader or ImageDownloader(
            settings, cache, client
        )

    def load_page_content_from_net(self, year: int) -> str:
        url = util.index_page_url(
            self.settings.base_url, year, self.settings.print_region
        )
        return self.client.fetch_page(url)

    def load_index_page_content(self, year: int) -> IndexContent:
        """Load a year's index page from the cache, falling back to the network.

        Content fetched from the network is written back to the cache
        immediately.
        """
        cache_file = self.cache.resolve_path("index", year=year)
        expire_seconds = (
            self.settings.index_expire_seconds if year == util.current_year() else 0
        )

        data = self.cache.read(cache_file, max_age_seconds=expire_seconds)
        if data:
            return IndexContent(source="cache", data=data)

        data = self.load_page_content_from_net(year)
        self.cache.write(cache_file, data)
        return IndexContent(source="net", data=data)

    def process_year(self, year: int, aggregate: CoverAggregate) -> list[IssueDescriptor]:
        """Load, parse and fetch images for one year.

        Args:
            year: The year to process
            aggregate: Aggregate to merge the year's issues into

        Returns:
            The issues listed on the year's index page
        """
        content = self.load_index_page_content(year)
        logger.info(f"index for {year} loaded from {content.source}")

        issues = self.parser.parse(content.data)

        aggregate.ensure_year(year)
        for issue in issues:
            images = self.image_downloader.download_issue_images(year, issue)
            aggregate.add_issue(year, issue.ymd, images)

        return issues

    def process_years(self) -> CoverAggregate:
        """Process every supported year, newest first."""
        aggregate = CoverAggregate()

        for year in range(util.current_year(), self.settings.first_supported_year - 1, -1):
            self.process_year(year, aggregate)

        logger.info(
            f"Collected {aggregate.issue_count()} issues across {len(aggregate.years)} years"
        )
        return aggregate
