"""
Undo journal for the last rename run.

The journal is a JSON list of `{"source": ..., "target": ...}` objects written
once per run, after every rename task has finished. It only ever lists
renames that actually happened. `undo` replays it backwards and removes it so
the same run cannot be undone twice.
"""
import json
from pathlib import Path
from typing import Iterable

from telenamer.rename.batch import apply_rename
from telenamer.rename.models import RenameOp, RenameOutcome
from telenamer.utils import LogLevel, UNDO_JOURNAL_PATH, logger
from telenamer.utils.errors import JournalUnavailable


def write_journal(ops: Iterable[RenameOp], path: Path = UNDO_JOURNAL_PATH) -> Path:
    """Overwrite the journal at `path` with `ops`."""
    ops = list(ops)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps([op.to_dict() for op in ops], ensure_ascii=False, indent=2), encoding="utf-8")
    logger.log("journal.write", LogLevel.DEBUG, path=str(path), entries=len(ops))
    return path


def read_journal(path: Path = UNDO_JOURNAL_PATH) -> list[RenameOp]:
    """Load the journal at `path`; raises JournalUnavailable if it is missing or malformed."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return [RenameOp.from_dict(entry) for entry in data]
    except OSError as e:
        raise JournalUnavailable(path, e.strerror or str(e)) from e
    except (ValueError, TypeError, KeyError) as e:
        raise JournalUnavailable(path, f"Malformed journal: {e}") from e


def undo(fs, path: Path = UNDO_JOURNAL_PATH) -> list[RenameOutcome]:
    """
    Reverse every rename recorded in the journal, newest first.

    The journal is deleted once all reversals have been attempted; failed
    reversals are logged and returned in the outcomes. When not a single
    entry could be reversed (typically `fs` points at the wrong directory)
    the journal is kept so undo can be retried.

    Raises:
        JournalUnavailable: When there is no readable journal to undo.
    """
    ops = read_journal(path)
    logger.log("undo.start", LogLevel.INFO, path=str(path), entries=len(ops))

    outcomes = [apply_rename(op.reversed(), fs) for op in reversed(ops)]
    restored = sum(1 for outcome in outcomes if outcome.ok)

    if ops and not restored:
        logger.log("undo.kept", LogLevel.WARN, path=str(path), msg="No rename could be reversed, journal kept")
    else:
        Path(path).unlink(missing_ok=True)

    logger.log("undo.done", LogLevel.INFO, restored=restored, failed=len(outcomes) - restored)
    return outcomes
