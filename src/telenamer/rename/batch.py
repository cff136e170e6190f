# python
"""Batch utilities for parsing and renaming many episode files at once.

Every batch stage uses the same scatter-gather pattern: one task per item on a
short-lived thread pool, followed by collection of every result. The caller
picks how results are gathered:

- `Ordering.COMPLETION` returns results as soon as each task finishes. Used by
  the automated path, which has no use for a stable order.
- `Ordering.INPUT` returns results in the order the items were given. Used by
  the interactive path so files are reviewed in a predictable sequence.

Per-item failures never cancel sibling tasks.
"""
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from enum import Enum
from typing import Callable, Iterable, TypeVar

from tqdm import tqdm

from telenamer.rename import parser
from telenamer.rename.models import RawIdentity, RenameOp, RenameOutcome
from telenamer.utils import LogLevel, logger
from telenamer.utils.errors import RenameFailed

T = TypeVar("T")
R = TypeVar("R")


class Ordering(Enum):
    """How scatter_gather returns its results."""
    COMPLETION = "completion"
    INPUT = "input"


def scatter_gather(
        func: Callable[[T], R],
        items: Iterable[T],
        ordering: Ordering = Ordering.INPUT,
        max_workers: int | None = None,
        desc: str | None = None,
) -> list[R]:
    """
    Run `func` on every item concurrently and collect all results.

    Args:
        func: Work for a single item. Expected to report per-item failures in
            its return value; an exception raised here propagates to the caller.
        items: Items to process, one task each.
        ordering: Completion order or input order for the returned list.
        max_workers: Upper bound on concurrent tasks (default: one per item).
        desc: Progress bar label; no bar is shown when omitted.

    Returns:
        list: One result per item.
    """
    items = list(items)
    if not items:
        return []

    workers = max_workers or len(items)
    with ThreadPoolExecutor(max_workers=workers) as executor, \
            tqdm(total=len(items), desc=desc, disable=desc is None, leave=False) as progress:
        futures = [executor.submit(func, item) for item in items]
        pending = as_completed(futures) if ordering is Ordering.COMPLETION else futures

        results = []
        for fut in pending:
            results.append(fut.result())
            progress.update(1)
        return results


def parse_files(
        file_names: Iterable[str], series: str | None = None, ordering: Ordering = Ordering.INPUT
) -> list[RawIdentity]:
    """Parse every file name concurrently and keep only the valid identities."""
    results = scatter_gather(lambda name: parser.extract_identity(name, series), file_names, ordering)
    return [result for result in results if isinstance(result, RawIdentity)]


def parse_files_in_order(file_names: Iterable[str], series: str | None = None) -> list[RawIdentity]:
    """Parse file names, returning identities in the same order as the input."""
    return parse_files(file_names, series, Ordering.INPUT)


def parse_files_fastest(file_names: Iterable[str], series: str | None = None) -> list[RawIdentity]:
    """Parse file names, returning identities as soon as each is ready."""
    return parse_files(file_names, series, Ordering.COMPLETION)


class TargetClaims:
    """Thread-safe registry of target names already taken in this run."""

    def __init__(self):
        self._lock = threading.Lock()
        self._claimed: set[str] = set()

    def claim(self, op: RenameOp) -> None:
        """Reserve `op.target`; raises RenameFailed if another op already took it."""
        with self._lock:
            if op.target in self._claimed:
                raise RenameFailed(op, "target name collides with another file in this batch")
            self._claimed.add(op.target)


def apply_rename(op: RenameOp, fs, claims: TargetClaims | None = None) -> RenameOutcome:
    """Claim and apply a single rename, logging and returning its outcome."""
    try:
        if claims is not None:
            claims.claim(op)
        op.apply(fs)
    except RenameFailed as e:
        logger.log("rename.fail", LogLevel.ERROR, source=op.source, target=op.target, reason=e.reason)
        return RenameOutcome(file_name=op.source, op=op, error=e)

    logger.log("rename.ok", LogLevel.INFO, source=op.source, target=op.target)
    return RenameOutcome(file_name=op.source, op=op)


def rename_files(ops: Iterable[RenameOp], fs, claims: TargetClaims | None = None) -> list[RenameOutcome]:
    """
    Apply renames concurrently, one task per op, and wait for all of them.

    Failures are collected in the returned outcomes; they never stop the
    remaining renames. Outcomes are in input order.
    """
    claims = claims if claims is not None else TargetClaims()
    return scatter_gather(lambda op: apply_rename(op, fs, claims), ops, Ordering.INPUT)
