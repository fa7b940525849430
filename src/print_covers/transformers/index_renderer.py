"""Index renderer for turning the cover aggregate into static HTML pages."""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError

from print_covers.exceptions import RenderFailure
from print_covers.settings import DEFAULT_TEMPLATE_NAMES, TEMPLATES_DIR
from schemas.aggregate import CoverAggregate

from .filters import FILTERS

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".html.j2"


class IndexRenderer:
    """Render the cover aggregate through each index template.

    Each template ``{name}.html.j2`` produces ``{output_dir}/{name}.html``.
    A template that fails to render is logged and skipped; the rest are
    still written.

    Attributes:
        output_dir: Directory the HTML files are written to
        template_names: Names of the templates to render, in order
        use_remote_images: Whether image locations are remote URLs
    """

    def __init__(
        self,
        output_dir: Path,
        template_names: tuple[str, ...] = DEFAULT_TEMPLATE_NAMES,
        templates_dir: Path | None = None,
        use_remote_images: bool = False,
    ):
        """Initialize the index renderer.

        Args:
            output_dir: Directory the HTML files are written to
            template_names: Names of the templates to render
            templates_dir: Directory containing templates (default: the packaged templates)
            use_remote_images: Whether image locations are remote URLs

        Raises:
            FileNotFoundError: If templates_dir is not a directory
        """
        self.output_dir = Path(output_dir)
        self.template_names = tuple(template_names)
        self.templates_dir = templates_dir or TEMPLATES_DIR
        if not Path(self.templates_dir).is_dir():
            raise FileNotFoundError(f"Templates directory not found: {self.templates_dir}")
        self.use_remote_images = use_remote_images

        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
        )
        for name, func in FILTERS.items():
            self._env.filters[name] = func

    def render_all(self, aggregate: CoverAggregate) -> list[Path]:
        """Render every template against the aggregate.

        Returns:
            Paths of the index files that were written
        """
        written: list[Path] = []

        for name in self.template_names:
            try:
                written.append(self.render_index(aggregate, name))
            except RenderFailure as e:
                logger.error(e.message)

        return written

    def render_index(self, aggregate: CoverAggregate, name: str) -> Path:
        """Render one template and write it to the output directory.

        Raises:
            RenderFailure: If the template cannot be rendered or written
        """
        output_file = self.output_dir / f"{name}.html"
        try:
            template = self._env.get_template(f"{name}{TEMPLATE_SUFFIX}")
            html_content = template.render(
                images=aggregate.years,
                issue_count=aggregate.issue_count(),
                indices=self.template_names,
                current_index=name,
                output_dir=str(self.output_dir),
                use_remote_images=self.use_remote_images,
            )
            self.output_dir.mkdir(parents=True, exist_ok=True)
            output_file.write_text(html_content, encoding="utf-8")
        except (TemplateError, OSError) as e:
            raise RenderFailure(
                f"Error rendering template {name}: {e}", template_name=name
            ) from e

        logger.info(f"index written to {output_file}")
        return output_file
