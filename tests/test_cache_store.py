"""Tests for the CacheStore class."""

import os
from datetime import date
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from print_covers import util
from print_covers.cache import CacheStore
from print_covers.exceptions import CorruptMetadata, InvalidKind


class TestResolvePath:
    """Tests for CacheStore.resolve_path()."""

    def test_index_path(self, cache, tmp_path):
        """Index pages live under _CACHE with the year in the name."""
        path = cache.resolve_path("index", year=2018)

        assert path == tmp_path / "_CACHE" / "2018-covers.html"

    def test_index_path_is_deterministic(self, cache):
        assert cache.resolve_path("index", year=2018) == cache.resolve_path("index", year=2018)

    def test_index_path_differs_per_year(self, cache):
        paths = {cache.resolve_path("index", year=year) for year in range(1997, 2027)}

        assert len(paths) == 30

    def test_image_path(self, cache, tmp_path):
        path = cache.resolve_path("image", year=2018, issue_date="2018-09-01", variant="LARGE")

        assert path == tmp_path / "images" / "2018" / "2018-09-01" / "large.jpg"

    def test_image_path_accepts_date(self, cache, tmp_path):
        path = cache.resolve_path(
            "image", year=2018, issue_date=date(2018, 9, 1), variant="MEDIUM"
        )

        assert path == tmp_path / "images" / "2018" / "2018-09-01" / "medium.jpg"

    @pytest.mark.parametrize("variant", ["THUMBNAIL", "thumbnail", "ThumbNail"])
    def test_image_path_lowercases_variant(self, cache, variant):
        path = cache.resolve_path("image", year=2018, issue_date="2018-09-01", variant=variant)

        assert path.name == "thumbnail.jpg"

    def test_unknown_kind(self, cache):
        with pytest.raises(InvalidKind, match="Unknown cache resource kind"):
            cache.resolve_path("video", year=2018)

    def test_index_missing_year(self, cache):
        with pytest.raises(InvalidKind, match="year"):
            cache.resolve_path("index")

    def test_image_missing_variant(self, cache):
        with pytest.raises(InvalidKind, match="variant"):
            cache.resolve_path("image", year=2018, issue_date="2018-09-01")


class TestRead:
    """Tests for CacheStore.read()."""

    def test_missing_file(self, cache, tmp_path):
        assert cache.read(tmp_path / "missing.html") is None

    def test_missing_file_with_expiration(self, cache, tmp_path):
        assert cache.read(tmp_path / "missing.html", max_age_seconds=60) is None

    def test_read_text(self, cache, tmp_path):
        path = tmp_path / "page.html"
        path.write_text("<p>cached</p>")

        assert cache.read(path) == "<p>cached</p>"

    def test_fresh_file_within_window(self, cache, tmp_path):
        """Content is returned while now < mtime + max_age."""
        path = tmp_path / "page.html"
        path.write_text("fresh")
        os.utime(path, (1000, 1000))

        with patch("print_covers.util.current_time_millis", return_value=1000 * 1000 + 59_999):
            assert cache.read(path, max_age_seconds=60) == "fresh"

    def test_stale_file_at_window_end(self, cache, tmp_path):
        """Content is stale once now reaches mtime + max_age."""
        path = tmp_path / "page.html"
        path.write_text("stale")
        os.utime(path, (1000, 1000))

        with patch("print_covers.util.current_time_millis", return_value=1000 * 1000 + 60_000):
            assert cache.read(path, max_age_seconds=60) is None

    @pytest.mark.parametrize("max_age", [None, 0])
    def test_no_expiration_when_falsy(self, cache, tmp_path, max_age):
        """An old file is still returned when no expiration is given."""
        path = tmp_path / "page.html"
        path.write_text("old")
        os.utime(path, (1000, 1000))

        assert cache.read(path, max_age_seconds=max_age) == "old"

    @pytest.mark.parametrize(
        "stat, message",
        [
            (SimpleNamespace(), "no modification time"),
            (SimpleNamespace(st_mtime=""), "empty"),
            (SimpleNamespace(st_mtime=0), "zero"),
            (SimpleNamespace(st_mtime="abc"), "invalid"),
        ],
    )
    def test_corrupt_metadata(self, cache, tmp_path, stat, message):
        path = tmp_path / "page.html"
        path.write_text("content")

        with patch.object(cache, "_stat", return_value=stat):
            with pytest.raises(CorruptMetadata, match=message):
                cache.read(path, max_age_seconds=60)

    def test_metadata_not_checked_without_expiration(self, cache, tmp_path):
        path = tmp_path / "page.html"
        path.write_text("content")

        with patch.object(cache, "_stat", return_value=SimpleNamespace(st_mtime=0)):
            assert cache.read(path) == "content"


class TestWrite:
    """Tests for CacheStore.write()."""

    def test_creates_parent_directories(self, cache, tmp_path):
        path = tmp_path / "images" / "2018" / "2018-09-01" / "large.jpg"

        cache.write(path, b"\x01\x02")

        assert path.read_bytes() == b"\x01\x02"

    def test_parent_directory_from_path_helper(self, cache, tmp_path):
        """The target directory is the part of the path before the last slash."""
        path = tmp_path / "images" / "2019" / "2019-01-05" / "medium.jpg"

        with patch(
            "print_covers.util.directory_part_of_path",
            wraps=util.directory_part_of_path,
        ) as mock_directory:
            cache.write(path, b"\x01")

        mock_directory.assert_called_once_with(path.as_posix())
        assert (tmp_path / "images" / "2019" / "2019-01-05").is_dir()

    def test_bare_file_name_written_to_working_directory(self, cache, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        cache.write("loose.html", "content")

        assert (tmp_path / "loose.html").read_text() == "content"

    def test_round_trip(self, cache, tmp_path):
        path = cache.resolve_path("index", year=2018)

        cache.write(path, "<html>covers</html>")

        assert cache.read(path) == "<html>covers</html>"
        assert cache.read(path) == "<html>covers</html>"

    def test_overwrite_updates_content_and_mtime(self, cache, tmp_path):
        path = tmp_path / "page.html"
        cache.write(path, "first")
        os.utime(path, (1000, 1000))
        mtime1 = path.stat().st_mtime

        cache.write(path, "second")

        assert cache.read(path) == "second"
        assert path.stat().st_mtime > mtime1

    def test_exists(self, cache, tmp_path):
        path = tmp_path / "a" / "b.jpg"
        assert cache.exists(path) is False

        cache.write(path, b"x")

        assert cache.exists(path) is True


class TestCacheStoreRoot:
    """Tests for CacheStore construction."""

    def test_root_accepts_string(self, tmp_path):
        cache = CacheStore(str(tmp_path))

        assert cache.resolve_path("index", year=2020).parent == tmp_path / "_CACHE"
