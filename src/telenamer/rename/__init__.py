"""
Episode renaming functionality.

This package contains utilities to parse episode file names, enrich them with
TheTVDB metadata, build new names from a template and apply the renames with
an undo journal.

Package organization:
- models: Data passed between stages (identities, rename operations, outcomes).
- parser: Identity extraction from a single file name.
- core: TheTVDB enrichment of a parsed identity.
- formatter: Template expansion and file name sanitization.
- batch: Scatter-gather helpers for parsing and renaming many files.
- journal: Persisting and undoing the renames of the last run.
- pipeline: The automated and interactive end-to-end policies.

Public API (top-level exports)
- Parsing:
  - `extract_identity`: Parse one file name (returns RawIdentity or Rejected).
  - `parse_files`, `parse_files_in_order`, `parse_files_fastest`: Batch parsing.
- Enrichment:
  - `enrich`: Resolve a RawIdentity against TheTVDB (raises on failure).
  - `try_enrich`: Same lookup, returning an Enrichment that carries any error.
- Formatting:
  - `new_file_name`, `build_rename`: Template expansion.
- Renaming:
  - `rename_files`: Concurrent batch rename.
  - `write_journal`, `read_journal`, `undo`: Undo journal handling.
  - `Pipeline`: End-to-end run.

Example:
    from telenamer.rename import Pipeline
    from telenamer.utils.config import resolve_login
    from telenamer.utils.file_util import LocalFileSystem

    Pipeline(LocalFileSystem("."), resolve_login()).run(confirm=True)
"""
from .models import (
    EnrichedIdentity,
    Enrichment,
    RawIdentity,
    Rejected,
    RenameOp,
    RenameOutcome,
)

# Parsing
from .parser import extract_identity

# Enrichment
from .core import enrich, try_enrich

# Formatting
from .formatter import build_rename, new_file_name

# Batch processing
from .batch import (
    Ordering,
    parse_files,
    parse_files_fastest,
    parse_files_in_order,
    rename_files,
    scatter_gather,
)

# Journal
from .journal import read_journal, undo, write_journal

# Pipeline
from .pipeline import Pipeline, PipelineResult, PipelineState

__all__ = [
    # Models
    "RawIdentity",
    "Rejected",
    "EnrichedIdentity",
    "Enrichment",
    "RenameOp",
    "RenameOutcome",
    # Parsing
    "extract_identity",
    "parse_files",
    "parse_files_in_order",
    "parse_files_fastest",
    # Enrichment
    "enrich",
    "try_enrich",
    # Formatting
    "new_file_name",
    "build_rename",
    # Batch processing
    "Ordering",
    "scatter_gather",
    "rename_files",
    # Journal
    "write_journal",
    "read_journal",
    "undo",
    # Pipeline
    "Pipeline",
    "PipelineResult",
    "PipelineState",
]
