# python
"""Batch rename utilities for normalizing media filenames.

This module expands source paths into files, proposes a normalized name for
each using the project's parser/formatter, and moves files into place (or
just reports the plan in dry-run mode). Files are handled one at a time in
discovery order; a failure on one file is recorded and the run continues.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from tqdm import tqdm

from medianamer.rename import core, formatter, parser
from medianamer.rename.models import RenameOptions
from medianamer.utils import (
    STATUS_DRY_RUN,
    STATUS_EXISTS,
    STATUS_FAIL,
    STATUS_RENAMED,
    STATUS_SKIP,
    STATUS_UNCHANGED,
    DestinationExistsError,
    FilesystemError,
    LogLevel,
    RenameError,
    UnparseableError,
    file_util,
    logger,
)


@dataclass
class RenameOutcome:
    """What happened to one file."""

    source: Path
    target: Path | None
    status: str
    error: RenameError | None = None


@dataclass
class BatchSummary:
    """Tally of a batch run, plus every per-file outcome in processing order."""

    outcomes: list[RenameOutcome] = field(default_factory=list)

    def count(self, status: str) -> int:
        return sum(1 for o in self.outcomes if o.status == status)

    @property
    def renamed(self) -> int:
        return self.count(STATUS_RENAMED)

    @property
    def planned(self) -> int:
        return self.count(STATUS_DRY_RUN)

    @property
    def unchanged(self) -> int:
        return self.count(STATUS_UNCHANGED)

    @property
    def skipped(self) -> int:
        return self.count(STATUS_SKIP)

    @property
    def conflicts(self) -> int:
        return self.count(STATUS_EXISTS)

    @property
    def failed(self) -> int:
        return self.count(STATUS_FAIL)

    @property
    def has_errors(self) -> bool:
        return self.conflicts > 0 or self.failed > 0


def route_target(file: Path, source_root: Path, target_root: Path | None) -> Path | None:
    """
    Pick the destination directory for `file` under `target_root`.

    A file found while walking a directory source keeps its path relative to
    that source; a file passed directly lands in `target_root` itself. With
    no target root the file is renamed in place (None).
    """
    if target_root is None:
        return None
    if source_root.is_dir():
        try:
            return target_root / file.parent.relative_to(source_root)
        except ValueError:
            pass
    return target_root


def process_file(file: Path, options: RenameOptions) -> RenameOutcome:
    """Parse, name, and relocate a single file, turning per-file errors into an outcome."""
    record = parser.parse_filename(file.name)
    if record is None:
        err = UnparseableError(f"No title could be derived from {file.name}", file)
        return RenameOutcome(file, None, STATUS_SKIP, err)

    new_name = formatter.generate_filename(record)
    try:
        target = core.relocate(file, new_name, options)
    except DestinationExistsError as e:
        return RenameOutcome(file, core.destination_for(file, new_name, options), STATUS_EXISTS, e)
    except FilesystemError as e:
        return RenameOutcome(file, core.destination_for(file, new_name, options), STATUS_FAIL, e)

    if file_util.same_location(file, target):
        status = STATUS_UNCHANGED
    elif options.apply:
        status = STATUS_RENAMED
    else:
        status = STATUS_DRY_RUN
    return RenameOutcome(file, target, status)


def _log_outcome(outcome: RenameOutcome) -> None:
    if outcome.status in (STATUS_RENAMED, STATUS_DRY_RUN):
        logger.log("rename.result", LogLevel.INFO, status=outcome.status,
                   old=str(outcome.source), new=str(outcome.target))
    elif outcome.status == STATUS_UNCHANGED:
        logger.log("rename.result", LogLevel.DEBUG, status=outcome.status, path=str(outcome.source))
    elif outcome.status == STATUS_SKIP:
        logger.log("rename.skip", LogLevel.WARN, file=str(outcome.source), reason=str(outcome.error))
    else:
        logger.log("rename.error", LogLevel.ERROR, status=outcome.status, file=str(outcome.source),
                   kind=outcome.error.kind.value if outcome.error else None, error=str(outcome.error))


def rename_files(
        sources: Iterable[Path | str],
        recursive: bool = False,
        apply: bool = False,
        replace: bool = False,
        target: Path | str | None = None,
) -> BatchSummary:
    """Rename media files found under `sources`.

    The function:
    - Expands each source into files (recursing when asked, never into `target`).
    - Parses each filename and builds its normalized name.
    - Moves the file, or only reports the destination unless `apply=True`.

    Args:
        sources: Files and/or directories to process, in order.
        recursive (bool): Descend into sub-directories of directory sources.
        apply (bool): Perform the moves; otherwise dry-run.
        replace (bool): Overwrite existing destinations.
        target (Path | None): Root directory to move files under, mirroring
            their location relative to the directory source they came from.

    Returns:
        BatchSummary: Per-file outcomes and counts.
    """
    target_root = Path(target) if target is not None else None
    work: list[tuple[Path, Path]] = []
    for source in sources:
        source_root = Path(source)
        for file in file_util.walk_paths([source_root], recursive=recursive, exclude=target_root):
            work.append((file, source_root))

    summary = BatchSummary()
    if not work:
        logger.log("rename.empty", LogLevel.WARN, msg="No files found to rename")
        return summary

    logger.log("rename.start", LogLevel.INFO, files=len(work), apply=apply, replace=replace,
               target=str(target_root) if target_root else None)

    for file, source_root in tqdm(work, desc="Renaming files" if apply else "Analyzing files", disable=None):
        options = RenameOptions(apply=apply, replace=replace,
                                target_directory=route_target(file, source_root, target_root))
        outcome = process_file(file, options)
        _log_outcome(outcome)
        summary.outcomes.append(outcome)

    logger.log(
        "rename.summary",
        LogLevel.INFO,
        renamed=summary.renamed,
        planned=summary.planned,
        unchanged=summary.unchanged,
        skipped=summary.skipped,
        conflicts=summary.conflicts,
        failed=summary.failed,
    )
    return summary
