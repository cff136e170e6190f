"""Data models passed between the renaming stages."""
from __future__ import annotations

from dataclasses import dataclass

from telenamer.utils.errors import EnrichmentError, RenameFailed, TaskFailed


@dataclass(frozen=True)
class RawIdentity:
    """Season/episode/series guess inferred from a file name."""
    file_name: str
    container: str
    season: int
    episode: int
    series: str


@dataclass(frozen=True)
class Rejected:
    """A file name that could not be classified; never processed further."""
    file_name: str
    reason: str


@dataclass(frozen=True)
class EnrichedIdentity:
    """Identity confirmed against TheTVDB, with canonical series name and episode title."""
    file_name: str
    container: str
    season: int
    episode: int
    episode_title: str
    series: str


@dataclass(frozen=True)
class Enrichment:
    """Result of enriching one RawIdentity: either `identity` or `error` is set."""
    raw: RawIdentity
    identity: EnrichedIdentity | None = None
    error: EnrichmentError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.identity is not None


@dataclass(frozen=True)
class RenameOp:
    """One file rename within the working directory."""
    source: str
    target: str

    def reversed(self) -> RenameOp:
        return RenameOp(source=self.target, target=self.source)

    def apply(self, fs) -> None:
        """
        Rename `source` to `target` on the given filesystem handle.

        Refuses to replace an existing file other than the source itself; a
        target that resolves to the source (case-only rename on a
        case-insensitive filesystem) is allowed.
        Raises RenameFailed on any I/O or permission error; never retries.
        """
        if self.source != self.target and fs.exists(self.target) and not fs.same_file(self.source, self.target):
            raise RenameFailed(self, "target already exists")
        try:
            fs.rename(self.source, self.target)
        except OSError as e:
            raise RenameFailed(self, e.strerror or str(e)) from e

    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target}

    @classmethod
    def from_dict(cls, data: dict) -> RenameOp:
        return cls(source=data["source"], target=data["target"])


@dataclass(frozen=True)
class RenameOutcome:
    """Observed result of one rename task; `op` is None when no target could be computed."""
    file_name: str
    op: RenameOp | None = None
    error: EnrichmentError | RenameFailed | TaskFailed | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.op is not None
