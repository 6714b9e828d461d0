"""Tests for directory walking."""

import os
import sys
from pathlib import Path
import pytest

from repeated_photos.errors import FilesystemError
from repeated_photos.scan import find_images, is_image_path


class TestIsImagePath:
    @pytest.mark.parametrize("name", ["a.jpg", "a.JPEG", "b.png", "c.gif", "d.bmp", "e.tiff", "f.TIF"])
    def test_accepted(self, name):
        assert is_image_path(Path(name))

    @pytest.mark.parametrize("name", ["notes.txt", "movie.mp4", "jpg", "archive.jpg.zip"])
    def test_rejected(self, name):
        assert not is_image_path(Path(name))

    def test_custom_extensions(self):
        assert is_image_path(Path("x.webp"), {".webp"})
        assert not is_image_path(Path("x.jpg"), {"webp"})


class TestFindImages:
    def test_recursive_and_sorted(self, tmp_path):
        (tmp_path / "2019" / "summer").mkdir(parents=True)
        for rel in ["b.jpg", "a.png", "2019/c.JPG", "2019/summer/d.gif", "readme.txt"]:
            (tmp_path / rel).write_bytes(b"x")

        images = find_images(tmp_path)

        assert images == sorted(images)
        assert {Path(p).name for p in images} == {"a.png", "b.jpg", "c.JPG", "d.gif"}
        assert all(Path(p).is_absolute() for p in images)

    def test_extension_filter(self, tmp_path):
        (tmp_path / "a.png").write_bytes(b"x")
        (tmp_path / "b.jpg").write_bytes(b"x")

        images = find_images(tmp_path, extensions={"png"})

        assert [Path(p).name for p in images] == ["a.png"]

    def test_excluded_directory_is_pruned(self, tmp_path):
        (tmp_path / "a.jpg").write_bytes(b"x")
        (tmp_path / "duplicates" / "nested").mkdir(parents=True)
        (tmp_path / "duplicates" / "a.jpg").write_bytes(b"x")
        (tmp_path / "duplicates" / "nested" / "b.jpg").write_bytes(b"x")

        images = find_images(tmp_path, exclude=[tmp_path / "duplicates"])

        assert images == [str((tmp_path / "a.jpg").resolve())]

    def test_exclude_relative_path(self, tmp_path, monkeypatch):
        (tmp_path / "a.jpg").write_bytes(b"x")
        (tmp_path / "review").mkdir()
        (tmp_path / "review" / "a.jpg").write_bytes(b"x")
        monkeypatch.chdir(tmp_path)

        images = find_images(".", exclude=["review"])

        assert [Path(p).name for p in images] == ["a.jpg"]

    def test_exclude_outside_root_is_ignored(self, tmp_path):
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "a.jpg").write_bytes(b"x")

        images = find_images(tmp_path / "src", exclude=[tmp_path / "elsewhere"])

        assert [Path(p).name for p in images] == ["a.jpg"]

    def test_empty_directory(self, tmp_path):
        assert find_images(tmp_path) == []

    def test_missing_root(self, tmp_path):
        with pytest.raises(FilesystemError):
            find_images(tmp_path / "nope")

    def test_file_as_root(self, tmp_path):
        file_path = tmp_path / "a.jpg"
        file_path.write_bytes(b"x")
        with pytest.raises(FilesystemError):
            find_images(file_path)

    @pytest.mark.skipif(sys.platform == "win32" or os.geteuid() == 0,
                        reason="permission bits are not enforced")
    def test_unreadable_directory_is_skipped(self, tmp_path):
        (tmp_path / "ok.jpg").write_bytes(b"x")
        locked = tmp_path / "locked"
        locked.mkdir()
        (locked / "hidden.jpg").write_bytes(b"x")
        locked.chmod(0)
        try:
            images = find_images(tmp_path)
        finally:
            locked.chmod(0o755)

        assert [Path(p).name for p in images] == ["ok.jpg"]
