#!/usr/bin/env python3
"""
medianamer: rename TV episodes and movies into a normalized naming scheme.

Without --apply the run is a dry run: every proposed rename is reported and
nothing on disk changes.
"""
import argparse
import sys
from pathlib import Path

import medianamer as medianamer_module
from medianamer import rename
from medianamer.utils import DEFAULT_TARGET, EXIT_FAILURES, EXIT_OK, EXIT_USAGE, LOG_FILE, LOG_LEVEL, LogLevel, logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="medianamer",
        description="Rename media files (TV episodes, movies) into a normalized naming scheme. "
                    "Runs as a dry run unless --apply is given.",
        epilog="Example: medianamer --recursive --target ./renamed .",
    )
    parser.add_argument("sources", nargs="*", default=["."],
                        help="Files or directories to process (default: current directory)")
    parser.add_argument("--apply", action="store_true", help="Actually perform renames/moves")
    parser.add_argument("--recursive", action="store_true", help="Recurse into directories to find media files")
    parser.add_argument("--replace", action="store_true", help="Overwrite destination files if they exist")
    parser.add_argument("--target", default=DEFAULT_TARGET,
                        help="Directory to place renamed files in (default: rename in place or $MEDIANAMER_TARGET)")
    parser.add_argument("--log-file", default=LOG_FILE,
                        help="Also write log output to this file (default: $MEDIANAMER_LOG_FILE)")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {medianamer_module.__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    medianamer_module.DEBUG = args.debug
    if args.debug:
        logger.set_log_level(LogLevel.DEBUG)
    else:
        try:
            logger.set_log_level(logger.level_from_name(LOG_LEVEL))
        except ValueError as e:
            logger.log("startup.error", LogLevel.ERROR, msg=str(e))
            return EXIT_USAGE

    if args.log_file:
        try:
            logger.set_log_file(args.log_file)
        except OSError as e:
            logger.log("startup.error", LogLevel.ERROR, msg="Cannot open log file", path=args.log_file, error=str(e))
            return EXIT_USAGE
        logger.log("startup.log_file", LogLevel.DEBUG, path=args.log_file)

    target = Path(args.target).expanduser() if args.target else None
    if target is not None and target.exists() and not target.is_dir():
        logger.log("startup.error", LogLevel.ERROR, msg="Target is not a directory", target=str(target))
        return EXIT_USAGE

    try:
        summary = rename.rename_files(
            [Path(s).expanduser() for s in args.sources],
            recursive=args.recursive,
            apply=args.apply,
            replace=args.replace,
            target=target,
        )
        if not args.apply and summary.planned:
            logger.safe_print("\n🧪 Dry-run mode: no changes were made. Re-run with --apply to rename.")
    finally:
        logger.set_log_file(None)

    return EXIT_FAILURES if summary.has_errors else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
