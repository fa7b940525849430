"""Pipeline orchestrator for end-to-end harvest and rendering.

Wires the cache, client, parser, aggregator and renderer together and runs
a complete pass over every supported year.
"""

import logging

from print_covers.aggregators import CoverAggregator
from print_covers.cache import CacheStore
from print_covers.clients import CoverClient
from print_covers.parsers import IndexParser
from print_covers.settings import CoverSettings
from print_covers.transformers import IndexRenderer
from schemas.aggregate import CoverAggregate

logger = logging.getLogger(__name__)


class Orchestrator:
    """End-to-end pipeline orchestrator.

    Every collaborator is built once from the settings unless one is
    injected, so tests can replace any single seam.

    Attributes:
        settings: Run-level configuration
        client: Client used for all network access
        cache: Cache store rooted at settings.root_dir
        aggregator: Walks the years and collects covers
        renderer: Renders the aggregate into index files
    """

    def __init__(
        self,
        settings: CoverSettings,
        client: CoverClient,
        cache: CacheStore | None = None,
        parser: IndexParser | None = None,
        renderer: IndexRenderer | None = None,
    ):
        self.settings = settings
        self.client = client
        self.cache = cache or CacheStore(settings.root_dir)
        self.aggregator = CoverAggregator(
            settings,
            client,
            self.cache,
            parser=parser or IndexParser(settings.base_url),
        )
        self.renderer = renderer or IndexRenderer(
            output_dir=settings.output_dir,
            template_names=settings.template_names,
            templates_dir=settings.templates_dir,
            use_remote_images=settings.use_remote_images,
        )

    def run(self) -> CoverAggregate:
        """Harvest every year and render the index files.

        Returns:
            The aggregate that was rendered
        """
        aggregate = self.aggregator.process_years()
        written = self.renderer.render_all(aggregate)
        logger.info(
            f"Rendered {len(written)} of {len(self.renderer.template_names)} index files"
        )
        return aggregate
