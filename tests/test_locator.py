"""Tests for the fixture locator."""

import os
from pathlib import Path

import pytest

from snappydoo.collector.locator import locate_fixtures
from snappydoo.errors import DiscoveryError


class TestLocateFixtures:
    """Tests for recursive fixture discovery."""

    def test_finds_nested_snap_files(self, snapshot_dir: Path):
        (snapshot_dir / "Button").mkdir()
        (snapshot_dir / "Button" / "snap.test.js.snap").write_text("")
        (snapshot_dir / "forms" / "Input").mkdir(parents=True)
        (snapshot_dir / "forms" / "Input" / "snap.test.js.snap").write_text("")

        found = sorted(locate_fixtures(snapshot_dir))

        assert found == ["Button/snap.test.js.snap", "forms/Input/snap.test.js.snap"]

    def test_ignores_other_extensions(self, snapshot_dir: Path):
        (snapshot_dir / "README.md").write_text("docs")
        (snapshot_dir / "Button.test.js").write_text("test")
        (snapshot_dir / "Button.test.js.snap").write_text("")

        assert list(locate_fixtures(snapshot_dir)) == ["Button.test.js.snap"]

    def test_ignores_directories_named_like_fixtures(self, snapshot_dir: Path):
        (snapshot_dir / "odd.snap").mkdir()

        assert list(locate_fixtures(snapshot_dir)) == []

    def test_paths_are_relative_to_root(self, snapshot_dir: Path):
        (snapshot_dir / "a" / "b").mkdir(parents=True)
        (snapshot_dir / "a" / "b" / "c.test.js.snap").write_text("")

        (found,) = list(locate_fixtures(snapshot_dir))

        assert not Path(found).is_absolute()
        assert found == "a/b/c.test.js.snap"

    def test_empty_root_yields_nothing(self, snapshot_dir: Path):
        assert list(locate_fixtures(snapshot_dir)) == []


class TestLocateFixturesErrors:
    """Tests for unusable input roots."""

    def test_missing_root_raises(self, tmp_path: Path):
        with pytest.raises(DiscoveryError, match="does not exist"):
            locate_fixtures(tmp_path / "missing")

    def test_file_root_raises(self, tmp_path: Path):
        file_path = tmp_path / "file.snap"
        file_path.write_text("")

        with pytest.raises(DiscoveryError, match="not a folder"):
            locate_fixtures(file_path)

    @pytest.mark.skipif(
        os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="permission bits are not enforced",
    )
    def test_unreadable_root_raises(self, snapshot_dir: Path):
        snapshot_dir.chmod(0o000)
        try:
            with pytest.raises(DiscoveryError, match="not readable"):
                locate_fixtures(snapshot_dir)
        finally:
            snapshot_dir.chmod(0o755)

    def test_error_raised_before_iteration(self, tmp_path: Path):
        """The root is validated when called, not lazily on first next()."""
        with pytest.raises(DiscoveryError):
            locate_fixtures(tmp_path / "missing")
