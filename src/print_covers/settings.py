"""Run-level configuration for the cover harvesting pipeline."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://www.economist.com/printedition"
DEFAULT_PRINT_REGION = 76980
DEFAULT_FIRST_YEAR = 1997
INDEX_EXPIRE_SECONDS = 24 * 3600

# Templates are installed as package data
PACKAGE_ROOT = Path(__file__).parent
TEMPLATES_DIR = PACKAGE_ROOT / "resources" / "templates"

THUMBNAIL = "THUMBNAIL"


class ImageVariant(BaseModel):
    """One image resolution fetched for every issue.

    Attributes:
        name: Upper-case variant name, e.g. "LARGE"
        url_segment: Path segment identifying this variant in image URLs
    """

    model_config = ConfigDict(frozen=True)

    name: str
    url_segment: str

    @property
    def cache_segment(self) -> str:
        return self.name.lower()


DEFAULT_VARIANTS = (
    ImageVariant(name=THUMBNAIL, url_segment="print-cover-thumbnail"),
    ImageVariant(name="MEDIUM", url_segment="200-width"),
    ImageVariant(name="LARGE", url_segment="print-cover-full"),
)

DEFAULT_TEMPLATE_NAMES = ("index", "index_tight", "index_min", "index_tiny")


class CoverSettings(BaseModel):
    """Immutable configuration threaded through the pipeline.

    Variants are processed in the order they are declared. The thumbnail
    variant is required because every other variant URL is derived from it.

    Example:
        settings = CoverSettings(root_dir=Path("./workspace"), use_remote_images=True)
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    print_region: int = DEFAULT_PRINT_REGION
    variants: tuple[ImageVariant, ...] = DEFAULT_VARIANTS
    first_supported_year: int = DEFAULT_FIRST_YEAR
    index_expire_seconds: int = INDEX_EXPIRE_SECONDS
    use_remote_images: bool = False
    throttle_enabled: bool = True
    throttle_seconds: float = Field(default=1.0, ge=0)
    root_dir: Path = Path(".")
    output_dir: Path = Path("output")
    templates_dir: Path = TEMPLATES_DIR
    template_names: tuple[str, ...] = DEFAULT_TEMPLATE_NAMES

    @field_validator("variants")
    @classmethod
    def _check_variants(cls, variants: tuple[ImageVariant, ...]) -> tuple[ImageVariant, ...]:
        names = [v.name for v in variants]
        if THUMBNAIL not in names:
            raise ValueError(f"variants must include {THUMBNAIL}")
        if len(set(names)) != len(names):
            raise ValueError("variant names must be unique")
        return variants

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, base_url: str) -> str:
        return base_url.rstrip("/")

    @property
    def thumbnail_variant(self) -> ImageVariant:
        return next(v for v in self.variants if v.name == THUMBNAIL)
