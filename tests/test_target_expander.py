"""
Tests cho core.aggregation.target_expander.

Kiem tra:
- Listing va tasks cho file, directory, URL, target khong ton tai
- Thu tu targets va thu tu duyet depth-first
- Exclusion ap dung giong nhau cho listing va tasks
"""

import os
import sys
from pathlib import Path

import pytest

from core.aggregation.target_expander import (
    expand_targets,
    is_url,
    walk_directory,
)
from core.aggregation.types import FileTask


class TestIsUrl:
    def test_http_https(self):
        assert is_url("http://example.com")
        assert is_url("https://example.com/a.txt")

    def test_not_url(self):
        assert not is_url("ftp://example.com")
        assert not is_url("src/http_client.py")


class TestExpandTargetsBasic:
    """Test expand_targets() voi cac loai target."""

    def test_plain_file(self, sample_tree: Path):
        """File target -> 1 dong listing + 1 full-path task."""
        result = expand_targets(["a.txt"])
        assert result.listing == ["a.txt"]
        assert result.tasks == [
            FileTask(path="a.txt", origin_target="a.txt", is_full_path=True)
        ]

    def test_directory(self, sample_tree: Path):
        """Directory target -> listing co trailing '/', task relative."""
        result = expand_targets(["sub/"])
        assert result.listing == ["sub/", "sub/b.txt"]
        assert len(result.tasks) == 1
        task = result.tasks[0]
        assert task.is_full_path is False
        assert task.path == "b.txt"
        assert task.full_path == os.path.join("sub/", "b.txt")

    def test_directory_khong_co_trailing_separator(self, sample_tree: Path):
        result = expand_targets(["sub"])
        assert result.listing == ["sub/", "sub/b.txt"]

    def test_url_target(self):
        """URL -> 1 listing line + 1 task, khong check filesystem."""
        url = "https://example.com/file.txt"
        result = expand_targets([url])
        assert result.listing == [f"URL: {url}"]
        assert result.tasks == [FileTask(path=url, origin_target=url, is_url=True)]

    def test_url_khong_bi_exclude(self):
        url = "https://example.com/sub/file.txt"
        result = expand_targets([url], ["sub"])
        assert len(result.tasks) == 1

    def test_missing_target_recorded_verbatim(self, tmp_path: Path):
        """Target khong stat duoc -> listing nguyen van, khong co task."""
        missing = str(tmp_path / "nope.txt")
        result = expand_targets([missing])
        assert result.listing == [missing]
        assert result.tasks == []

    def test_scenario_a_listing(self, sample_tree: Path):
        result = expand_targets(["a.txt", "sub/"])
        assert result.listing == ["a.txt", "sub/", "sub/b.txt"]
        assert [t.full_path for t in result.tasks] == ["a.txt", "sub/b.txt"]


class TestExpandTargetsOrder:
    """Thu tu targets va thu tu duyet duoc giu nguyen."""

    def test_target_order_preserved(self, sample_tree: Path):
        result = expand_targets(["sub", "a.txt"])
        assert result.listing == ["sub/", "sub/b.txt", "a.txt"]
        assert [t.full_path for t in result.tasks] == ["sub/b.txt", "a.txt"]

    def test_depth_first_directories_truoc(self, tmp_path: Path):
        root = tmp_path / "root"
        (root / "b_dir" / "inner").mkdir(parents=True)
        (root / "a_dir").mkdir()
        (root / "a_dir" / "x.txt").write_text("x")
        (root / "b_dir" / "inner" / "y.txt").write_text("y")
        (root / "Z.txt").write_text("z")
        (root / "m.txt").write_text("m")

        rel = [p for p, _ in walk_directory(str(root))]
        assert rel == [
            "a_dir",
            "a_dir/x.txt",
            "b_dir",
            "b_dir/inner",
            "b_dir/inner/y.txt",
            "m.txt",
            "Z.txt",
        ]

    def test_listing_matches_task_order(self, tmp_path: Path):
        root = tmp_path / "proj"
        (root / "pkg").mkdir(parents=True)
        (root / "pkg" / "one.py").write_text("1")
        (root / "two.py").write_text("2")

        result = expand_targets([str(root)])
        files_in_listing = [line for line in result.listing if not line.endswith("/")]
        assert files_in_listing == [t.full_path for t in result.tasks]

    def test_idempotent(self, sample_tree: Path):
        first = expand_targets(["a.txt", "sub/"])
        second = expand_targets(["a.txt", "sub/"])
        assert first.listing == second.listing
        assert first.tasks == second.tasks


class TestExpandTargetsExclusion:
    """Exclusion ap dung dong nhat cho listing va tasks."""

    def test_scenario_b_exclude_sub(self, sample_tree: Path):
        result = expand_targets(["a.txt", "sub/"], ["sub"])
        assert result.listing == ["a.txt"]
        assert [t.full_path for t in result.tasks] == ["a.txt"]

    def test_exclude_by_relative_path(self, tmp_path: Path, monkeypatch):
        """Pattern viet theo root-relative path van khop entry."""
        (tmp_path / "proj" / "gen").mkdir(parents=True)
        (tmp_path / "proj" / "gen" / "out.txt").write_text("o")
        (tmp_path / "proj" / "keep.txt").write_text("k")
        monkeypatch.chdir(tmp_path)

        result = expand_targets(["proj"], ["gen/out.txt"])
        assert "proj/gen/" in result.listing
        assert "proj/gen/out.txt" not in result.listing
        assert [t.full_path for t in result.tasks] == ["proj/keep.txt"]

    def test_exclude_by_joined_path(self, tmp_path: Path, monkeypatch):
        """Pattern viet theo target-joined path cung khop."""
        (tmp_path / "proj").mkdir()
        (tmp_path / "proj" / "secret.env").write_text("s")
        (tmp_path / "proj" / "app.py").write_text("a")
        monkeypatch.chdir(tmp_path)

        result = expand_targets(["proj"], ["proj/secret.env"])
        assert result.listing == ["proj/", "proj/app.py"]
        assert [t.path for t in result.tasks] == ["app.py"]

    def test_excluded_directory_prunes_descendants(self, tmp_path: Path):
        root = tmp_path / "r"
        (root / "node_modules" / "lib").mkdir(parents=True)
        (root / "node_modules" / "lib" / "x.js").write_text("x")
        (root / "index.js").write_text("i")

        result = expand_targets([str(root)], ["node_modules"])
        assert not any("node_modules" in line for line in result.listing)
        assert all("node_modules" not in t.full_path for t in result.tasks)

    def test_listing_and_tasks_consistent(self, tmp_path: Path):
        """Moi file trong listing co dung 1 task va nguoc lai."""
        root = tmp_path / "r"
        (root / "a").mkdir(parents=True)
        (root / "a" / "keep.md").write_text("k")
        (root / "a" / "drop.log").write_text("d")
        (root / "top.log").write_text("t")
        (root / "top.md").write_text("t")

        result = expand_targets([str(root)], [".log"])
        listed_files = {line for line in result.listing if not line.endswith("/")}
        assert listed_files == {t.full_path for t in result.tasks}
        assert all(not p.endswith(".log") for p in listed_files)


@pytest.mark.skipif(sys.platform == "win32", reason="symlink can quyen admin")
class TestExpandTargetsSymlinks:
    """Directory symlinks: liet ke nhu directory, khong follow."""

    def test_directory_symlink_listed_with_separator(self, tmp_path: Path):
        real = tmp_path / "real"
        real.mkdir()
        (real / "inner.txt").write_text("x", encoding="utf-8")
        root = tmp_path / "root"
        root.mkdir()
        os.symlink(real, root / "link", target_is_directory=True)

        result = expand_targets([str(root)])

        assert result.listing == [f"{root}/", f"{root}/link/"]
        assert result.tasks == []

    def test_symlink_loop_khong_duyet_vo_han(self, tmp_path: Path):
        root = tmp_path / "root"
        root.mkdir()
        (root / "a.txt").write_text("a", encoding="utf-8")
        os.symlink(root, root / "self", target_is_directory=True)

        result = expand_targets([str(root)])

        assert result.listing == [f"{root}/", f"{root}/self/", f"{root}/a.txt"]
        assert [t.path for t in result.tasks] == ["a.txt"]

    def test_file_symlink_is_read(self, tmp_path: Path):
        (tmp_path / "real.txt").write_text("x", encoding="utf-8")
        root = tmp_path / "root"
        root.mkdir()
        os.symlink(tmp_path / "real.txt", root / "alias.txt")

        result = expand_targets([str(root)])

        assert result.listing == [f"{root}/", f"{root}/alias.txt"]
        assert [t.path for t in result.tasks] == ["alias.txt"]

    def test_walk_directory_reports_link_as_dir(self, tmp_path: Path):
        real = tmp_path / "real"
        real.mkdir()
        (real / "inner.txt").write_text("x", encoding="utf-8")
        os.symlink(real, tmp_path / "link", target_is_directory=True)

        entries = list(walk_directory(str(tmp_path)))

        assert ("link", True) in entries
        assert ("link/inner.txt", False) not in entries
        assert ("real/inner.txt", False) in entries
