"""
Rename a directory of TV episodes using TheTVDB metadata, or undo the last run.
"""

import argparse
import sys
import time
from pathlib import Path

import telenamer as telenamer_module
from telenamer.rename import Pipeline, undo
from telenamer.utils import DEFAULT_FORMAT, LogLevel, STATUS_FAIL, STATUS_OK, UNDO_JOURNAL_PATH, logger
from telenamer.utils.config import resolve_login
from telenamer.utils.errors import ConfigError, JournalUnavailable
from telenamer.utils.file_util import LocalFileSystem


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Rename TV episodes to a consistent scheme using TheTVDB metadata.",
        epilog='Example: tele_namer ~/Videos/South\\ Park --series "South Park" --yes',
    )
    parser.add_argument("directory", nargs="?", default=".", help="Directory containing the episodes (default: .)")
    parser.add_argument("--series", help="Series name to use instead of the one guessed from each file name")
    parser.add_argument(
        "--format",
        default=DEFAULT_FORMAT,
        help="Naming template: {s} series, {n} title, {e}/{0e} episode, {z}/{0z} season "
             f"(default: \"{DEFAULT_FORMAT}\")",
    )
    parser.add_argument("--login", help="Path to login.json (default: ./login.json or $TVDB_* variables)")
    parser.add_argument("--yes", action="store_true", help="Rename without asking for confirmation")
    parser.add_argument("--undo", action="store_true", help="Undo the renames of the last run")
    parser.add_argument("--journal", default=str(UNDO_JOURNAL_PATH), help="Undo journal location")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {telenamer_module.__version__}")
    return parser.parse_args(argv)


def _run_undo(fs: LocalFileSystem, journal_path: Path) -> int:
    try:
        outcomes = undo(fs, journal_path)
    except JournalUnavailable as e:
        logger.log("undo.error", LogLevel.ERROR, msg=e.message, details=e.details)
        return 1
    return 1 if any(not outcome.ok for outcome in outcomes) else 0


def main(argv=None) -> int:
    args = _parse_args(argv)

    telenamer_module.DEBUG = args.debug
    logger.set_log_level(LogLevel.DEBUG if args.debug else LogLevel.INFO)

    root_dir = Path(args.directory).expanduser().resolve()
    if not root_dir.is_dir():
        logger.log("startup.error", LogLevel.ERROR, msg="Directory does not exist", root=str(root_dir))
        return 2

    fs = LocalFileSystem(root_dir)
    journal_path = Path(args.journal)

    if args.undo:
        return _run_undo(fs, journal_path)

    try:
        login = resolve_login(args.login)
    except ConfigError as e:
        logger.log("startup.error", LogLevel.ERROR, msg=e.message, details=e.details)
        return 2

    try:
        file_names = fs.list_files()
    except OSError as e:
        logger.log("startup.error", LogLevel.ERROR, msg="Could not list directory", root=str(root_dir), error=str(e))
        return 2

    start_time = time.time()
    logger.log(
        "telenamer.start",
        LogLevel.INFO,
        root=str(root_dir),
        files_found=len(file_names),
        series=args.series,
        format=args.format,
        confirm=not args.yes,
    )

    pipeline = Pipeline(fs, login, template=args.format, series=args.series, journal_path=journal_path)
    result = pipeline.run(file_names, confirm=not args.yes)

    for outcome in result.failed:
        logger.log(
            "telenamer.failed",
            LogLevel.WARN,
            file=outcome.file_name,
            status=STATUS_FAIL,
            error=outcome.error.__class__.__name__,
            msg=outcome.error.message,
        )

    logger.log(
        "telenamer.end",
        LogLevel.INFO,
        runtime=f"{time.time() - start_time:.2f}s",
        status=STATUS_OK if not result.failed else STATUS_FAIL,
        renamed=len(result.renamed),
        failed=len(result.failed),
        skipped=len(result.skipped),
        rejected=result.rejected,
        journal=str(journal_path),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
