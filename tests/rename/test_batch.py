"""Tests for batch renaming: routing, per-file outcomes, and failure isolation."""
from pathlib import Path

import pytest

from medianamer.rename import batch
from medianamer.rename.models import RenameOptions
from medianamer.utils import (
    STATUS_DRY_RUN,
    STATUS_EXISTS,
    STATUS_FAIL,
    STATUS_RENAMED,
    STATUS_SKIP,
    STATUS_UNCHANGED,
    ErrorKind,
    FilesystemError,
)


@pytest.fixture
def library(tmp_path):
    """A small source tree with TV, movie, and unparseable files."""
    root = tmp_path / "incoming"
    (root / "season1").mkdir(parents=True)
    (root / "Movie.Name.2007.mkv").write_bytes(b"movie")
    (root / "season1" / "show.name.s01e02.mkv").write_bytes(b"ep2")
    (root / "__.mkv").write_bytes(b"junk")
    return root


class TestRouteTarget:
    def test_no_target_means_in_place(self, tmp_path):
        assert batch.route_target(tmp_path / "a.mkv", tmp_path, None) is None

    def test_mirrors_relative_directory(self, tmp_path):
        (tmp_path / "src" / "x" / "y").mkdir(parents=True)
        file = tmp_path / "src" / "x" / "y" / "a.mkv"
        assert batch.route_target(file, tmp_path / "src", tmp_path / "out") == tmp_path / "out" / "x" / "y"

    def test_top_level_file_goes_to_root(self, tmp_path):
        (tmp_path / "src").mkdir()
        file = tmp_path / "src" / "a.mkv"
        assert batch.route_target(file, tmp_path / "src", tmp_path / "out") == tmp_path / "out"

    def test_direct_file_source(self, tmp_path):
        file = tmp_path / "a.mkv"
        file.write_bytes(b"")
        assert batch.route_target(file, file, tmp_path / "out") == tmp_path / "out"


class TestProcessFile:
    def test_dry_run(self, tmp_path):
        file = tmp_path / "Show.Name.S01E02.mkv"
        file.write_bytes(b"x")

        outcome = batch.process_file(file, RenameOptions())

        assert outcome.status == STATUS_DRY_RUN
        assert outcome.target == tmp_path / "Show Name - S01E02.mkv"
        assert file.exists()

    def test_apply(self, tmp_path):
        file = tmp_path / "Movie.Name.2007.mkv"
        file.write_bytes(b"x")

        outcome = batch.process_file(file, RenameOptions(apply=True))

        assert outcome.status == STATUS_RENAMED
        assert (tmp_path / "Movie Name (2007).mkv").exists()
        assert outcome.error is None

    def test_already_normalized(self, tmp_path):
        file = tmp_path / "Show Name - S01E02.mkv"
        file.write_bytes(b"x")
        assert batch.process_file(file, RenameOptions(apply=True)).status == STATUS_UNCHANGED

    def test_unparseable(self, tmp_path):
        file = tmp_path / "__.mkv"
        file.write_bytes(b"x")

        outcome = batch.process_file(file, RenameOptions(apply=True))

        assert outcome.status == STATUS_SKIP
        assert outcome.target is None
        assert outcome.error.kind is ErrorKind.UNPARSEABLE
        assert file.exists()

    def test_conflict(self, tmp_path):
        file = tmp_path / "Movie.Name.2007.mkv"
        file.write_bytes(b"new")
        (tmp_path / "Movie Name (2007).mkv").write_bytes(b"old")

        outcome = batch.process_file(file, RenameOptions(apply=True))

        assert outcome.status == STATUS_EXISTS
        assert outcome.target == tmp_path / "Movie Name (2007).mkv"
        assert outcome.error.kind is ErrorKind.DESTINATION_EXISTS

    def test_filesystem_failure(self, tmp_path, monkeypatch):
        file = tmp_path / "Movie.Name.2007.mkv"
        file.write_bytes(b"x")

        def _boom(original_path, new_basename, options):
            raise FilesystemError("disk on fire", original_path)

        monkeypatch.setattr(batch.core, "relocate", _boom)

        outcome = batch.process_file(file, RenameOptions(apply=True))

        assert outcome.status == STATUS_FAIL
        assert outcome.error.kind is ErrorKind.FILESYSTEM


class TestRenameFiles:
    def test_dry_run_changes_nothing(self, library):
        before = sorted(p for p in library.rglob("*"))

        summary = batch.rename_files([library], recursive=True)

        assert sorted(p for p in library.rglob("*")) == before
        assert summary.planned == 2
        assert summary.skipped == 1
        assert not summary.has_errors

    def test_non_recursive_only_top_level(self, library):
        summary = batch.rename_files([library])
        assert [o.source.name for o in summary.outcomes] == ["Movie.Name.2007.mkv", "__.mkv"]

    def test_apply_in_place(self, library):
        summary = batch.rename_files([library], recursive=True, apply=True)

        assert summary.renamed == 2
        assert (library / "Movie Name (2007).mkv").read_bytes() == b"movie"
        assert (library / "season1" / "Show Name - S01E02.mkv").read_bytes() == b"ep2"
        assert (library / "__.mkv").exists()

    def test_apply_to_target_mirrors_structure(self, library, tmp_path):
        out = tmp_path / "renamed"

        summary = batch.rename_files([library], recursive=True, apply=True, target=out)

        assert summary.renamed == 2
        assert (out / "Movie Name (2007).mkv").exists()
        assert (out / "season1" / "Show Name - S01E02.mkv").exists()
        assert not (library / "Movie.Name.2007.mkv").exists()

    def test_target_inside_source_is_not_walked(self, library):
        out = library / "renamed"
        out.mkdir()
        (out / "Old Show - S09E09.mkv").write_bytes(b"done")

        summary = batch.rename_files([library], recursive=True, target=out)

        assert all(out not in o.source.parents for o in summary.outcomes)

    def test_conflict_does_not_stop_batch(self, tmp_path):
        (tmp_path / "Show.Name.S01E02.mkv").write_bytes(b"first")
        (tmp_path / "show name s01e02.mkv").write_bytes(b"second")
        (tmp_path / "zzz.movie.1999.avi").write_bytes(b"third")

        summary = batch.rename_files([tmp_path], apply=True)

        statuses = [o.status for o in summary.outcomes]
        assert statuses == [STATUS_RENAMED, STATUS_EXISTS, STATUS_RENAMED]
        assert (tmp_path / "Show Name - S01E02.mkv").read_bytes() == b"first"
        assert (tmp_path / "Zzz Movie (1999).avi").exists()
        assert summary.conflicts == 1
        assert summary.has_errors

    def test_replace_overwrites(self, tmp_path):
        (tmp_path / "Show Name - S01E02.mkv").write_bytes(b"old")
        (tmp_path / "show.name.s01e02.mkv").write_bytes(b"new")

        summary = batch.rename_files([tmp_path / "show.name.s01e02.mkv"], apply=True, replace=True)

        assert summary.renamed == 1
        assert (tmp_path / "Show Name - S01E02.mkv").read_bytes() == b"new"

    def test_empty_sources(self, tmp_path):
        summary = batch.rename_files([tmp_path / "missing"])
        assert summary.outcomes == []
        assert not summary.has_errors

    def test_direct_file_with_target(self, tmp_path):
        file = tmp_path / "Movie.Name.2007.mkv"
        file.write_bytes(b"x")

        summary = batch.rename_files([file], target=tmp_path / "out")

        assert summary.outcomes[0].target == tmp_path / "out" / "Movie Name (2007).mkv"
        assert isinstance(summary.outcomes[0].target, Path)
