"""
End-to-end renaming pipeline: parse, enrich, template, rename, journal.

Two policies are supported:

- Automated: every file is handled start to finish by its own task
  (lookup, templating and rename). Outcomes are gathered in completion order
  and log lines from different files may interleave.
- Interactive: lookups still run concurrently, bounded by `WORKERS`, but the
  operator then confirms each rename one at a time, in the order the files
  were listed.

Whatever the policy, the run ends by writing every rename that succeeded to
the undo journal, even when some files failed.
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable

from telenamer.rename import batch, core, formatter, journal
from telenamer.rename.batch import Ordering, TargetClaims
from telenamer.rename.models import RawIdentity, RenameOp, RenameOutcome
from telenamer.utils import CONFIRM_YES, DEFAULT_FORMAT, LogLevel, UNDO_JOURNAL_PATH, WORKERS, logger
from telenamer.utils.config import TVDBLogin
from telenamer.utils.errors import EnrichmentError, TaskFailed
from telenamer.utils.tvdb import TVDBClient


class PipelineState(Enum):
    INIT = "init"
    INFERRING = "inferring"
    AUTOMATED = "automated"
    INTERACTIVE = "interactive"
    JOURNALING = "journaling"
    DONE = "done"


@dataclass
class PipelineResult:
    """Summary of one run."""
    renamed: list[RenameOp] = field(default_factory=list)
    failed: list[RenameOutcome] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    rejected: int = 0


class Pipeline:
    """Runs one batch of renames against a filesystem handle."""

    def __init__(
            self,
            fs,
            login: TVDBLogin,
            template: str = DEFAULT_FORMAT,
            series: str | None = None,
            journal_path: Path = UNDO_JOURNAL_PATH,
            client_factory: Callable[[TVDBLogin], TVDBClient] | None = None,
            ask: Callable[[str], str] = input,
            workers: int = WORKERS,
    ):
        self.fs = fs
        self.login = login
        self.template = template
        self.series = series
        self.journal_path = Path(journal_path)
        self.client_factory = client_factory or TVDBClient
        self.ask = ask
        self.workers = workers
        self.state = PipelineState.INIT

    def run(self, file_names: Iterable[str] | None = None, confirm: bool = False) -> PipelineResult:
        """
        Rename the given files (default: every file in the working directory).

        Args:
            file_names: Names to process; listed from the filesystem when omitted.
            confirm: Ask the operator before each rename (interactive policy).

        Returns:
            PipelineResult: Renames performed, failures, skipped files and the
            number of names that were not recognized as episodes.
        """
        file_names = list(file_names) if file_names is not None else self.fs.list_files()
        result = PipelineResult()
        claims = TargetClaims()

        try:
            self.state = PipelineState.INFERRING
            if confirm:
                identities = batch.parse_files_in_order(file_names, self.series)
            else:
                identities = batch.parse_files_fastest(file_names, self.series)
            result.rejected = len(file_names) - len(identities)

            if confirm:
                self.state = PipelineState.INTERACTIVE
                self._run_interactive(identities, claims, result)
            else:
                self.state = PipelineState.AUTOMATED
                self._run_automated(identities, claims, result)
        finally:
            self.state = PipelineState.JOURNALING
            journal.write_journal(result.renamed, self.journal_path)
            self.state = PipelineState.DONE

        return result

    def _rename_one(self, raw: RawIdentity, claims: TargetClaims) -> RenameOutcome:
        """Automated task for one file: lookup, template and rename."""
        try:
            op = core.enrich_and_build(raw, self.login, self.template, self.client_factory)
            return batch.apply_rename(op, self.fs, claims)
        except EnrichmentError as e:
            logger.log("enrich.fail", LogLevel.WARN, file=raw.file_name, error=e.__class__.__name__, msg=e.message)
            return RenameOutcome(file_name=raw.file_name, error=e)
        except Exception as e:
            # Sibling tasks keep renaming; their outcomes must still reach the journal.
            logger.log("task.fail", LogLevel.ERROR, file=raw.file_name, error=e.__class__.__name__, msg=str(e))
            return RenameOutcome(file_name=raw.file_name, error=TaskFailed(raw.file_name, e))

    def _run_automated(self, identities: list[RawIdentity], claims: TargetClaims, result: PipelineResult) -> None:
        outcomes = batch.scatter_gather(
            lambda raw: self._rename_one(raw, claims),
            identities,
            Ordering.COMPLETION,
            desc="Renaming files",
        )
        for outcome in outcomes:
            if outcome.ok:
                result.renamed.append(outcome.op)
            else:
                result.failed.append(outcome)

    def _run_interactive(self, identities: list[RawIdentity], claims: TargetClaims, result: PipelineResult) -> None:
        # Only the lookups run concurrently; confirmation and renames stay sequential.
        enrichments = batch.scatter_gather(
            lambda raw: core.try_enrich(raw, self.login, self.client_factory),
            identities,
            Ordering.INPUT,
            max_workers=self.workers,
            desc="Looking up episodes",
        )

        for enrichment in enrichments:
            if not enrichment.ok:
                result.failed.append(RenameOutcome(file_name=enrichment.raw.file_name, error=enrichment.error))
                continue

            op = formatter.build_rename(enrichment.identity, self.template)
            logger.safe_print(f"Old: {op.source}")
            logger.safe_print(f"New: {op.target}")
            answer = self.ask("Are you sure? y/n | ")

            if answer.strip() in CONFIRM_YES:
                outcome = batch.apply_rename(op, self.fs, claims)
                if outcome.ok:
                    result.renamed.append(op)
                else:
                    result.failed.append(outcome)
            else:
                logger.log("rename.skip", LogLevel.DEBUG, source=op.source)
                result.skipped.append(op.source)

            logger.safe_print("------------")
