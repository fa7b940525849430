"""Flat-file cache for index pages and cover images.

Cache tree layout (relative to the cache root):
    root/
    ├── _CACHE/
    │   └── {year}-covers.html
    └── images/
        └── {year}/
            └── {YYYY-MM-DD}/
                ├── thumbnail.jpg
                ├── medium.jpg
                └── large.jpg
"""

import logging
import os
from datetime import date
from pathlib import Path
from typing import Literal

from print_covers import util
from print_covers.exceptions import CorruptMetadata, InvalidKind

logger = logging.getLogger(__name__)

INDEX_DIR = "_CACHE"
IMAGES_DIR = "images"

ResourceKind = Literal["index", "image"]

REQUIRED_PARAMS: dict[str, tuple[str, ...]] = {
    "index": ("year",),
    "image": ("year", "issue_date", "variant"),
}


class CacheStore:
    """Maps logical resources to files and reads/writes them.

    The store knows nothing about the network. Expiration is decided by
    the caller through ``max_age_seconds`` on each read.

    Example:
        cache = CacheStore(Path("./workspace"))
        path = cache.resolve_path("index", year=2018)
        content = cache.read(path, max_age_seconds=24 * 3600)
    """

    def __init__(self, root: Path):
        self.root = Path(root)

    def resolve_path(self, kind: ResourceKind, **params) -> Path:
        """Compute the file path for a logical cache key.

        Args:
            kind: "index" (requires year) or "image" (requires year,
                  issue_date and variant)
            **params: Key parameters for the resource kind

        Returns:
            Path of the cached file under the cache root

        Raises:
            InvalidKind: If the kind is unknown or a parameter is missing
        """
        if kind not in REQUIRED_PARAMS:
            raise InvalidKind(f"Unknown cache resource kind: {kind!r}")

        missing = [
            name for name in REQUIRED_PARAMS[kind]
            if params.get(name) in (None, "")
        ]
        if missing:
            raise InvalidKind(
                f"Cache resource kind {kind!r} is missing parameters: {', '.join(missing)}"
            )

        year = params["year"]
        if kind == "index":
            return self.root / INDEX_DIR / f"{year}-covers.html"

        issue_date = params["issue_date"]
        if isinstance(issue_date, date):
            issue_date = issue_date.isoformat()
        variant = str(params["variant"]).lower()
        return self.root / IMAGES_DIR / str(year) / issue_date / f"{variant}.jpg"

    def exists(self, path: Path) -> bool:
        return Path(path).is_file()

    def read(
        self,
        path: Path,
        max_age_seconds: float | None = None,
    ) -> str | None:
        """Read cached content unless it is missing or stale.

        Args:
            path: File to read
            max_age_seconds: Maximum age of the file. Falsy means the file
                             never expires.

        Returns:
            The file content, or None if missing or expired

        Raises:
            CorruptMetadata: If the file's modification time is unusable
        """
        path = Path(path)
        if not path.is_file():
            return None

        if max_age_seconds:
            file_ms = self._file_mtime_millis(path)
            expire_ms = file_ms + max_age_seconds * 1000
            if util.current_time_millis() >= expire_ms:
                logger.debug(f"Cache file {path} expired")
                return None

        return path.read_text(encoding="utf-8")

    def write(self, path: Path, content: str | bytes) -> None:
        """Write content, creating parent directories as needed."""
        path = Path(path)
        directory = util.directory_part_of_path(path.as_posix())
        if directory:
            Path(directory).mkdir(mode=0o777, parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        logger.debug(f"Wrote cache file {path}")

    def _stat(self, path: Path) -> os.stat_result:
        return os.stat(path)

    def _file_mtime_millis(self, path: Path) -> float:
        stat = self._stat(path)
        mtime = getattr(stat, "st_mtime", None)

        if mtime is None:
            raise CorruptMetadata(f"stat for {path} has no modification time")
        if mtime == "":
            raise CorruptMetadata(f"stat for {path} has empty modification time")
        if isinstance(mtime, bool) or not isinstance(mtime, (int, float)):
            raise CorruptMetadata(f"stat for {path} has invalid modification time")
        if mtime == 0:
            raise CorruptMetadata(f"stat for {path} has zero modification time")

        return mtime * 1000
