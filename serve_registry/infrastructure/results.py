"""
Result contracts for catalog persistence.

Save and load never raise to their caller; they report the outcome through a
CatalogResult so the CLI (or any other caller) can react programmatically.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


class CatalogStatus(str, enum.Enum):
    SUCCESS = "success"
    IO_ERROR = "io_error"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True)
class CatalogResult:
    """
    Outcome of a catalog save or load.

    Attributes
    ----------
    status : CatalogStatus
        SUCCESS, IO_ERROR or PARSE_ERROR.
    path : Path
        Catalog file the operation targeted.
    players : int
        Players written (save) or appended to the registry (load) before the
        operation finished or aborted.
    skipped : int
        Rows a load ignored because they did not have exactly five fields.
    error : str | None
        Diagnostic message for failed operations.
    line : int | None
        1-based line number of the row that failed to parse.
    """

    status: CatalogStatus
    path: Path
    players: int = field(default=0)
    skipped: int = field(default=0)
    error: Optional[str] = field(default=None)
    line: Optional[int] = field(default=None)

    @property
    def ok(self) -> bool:
        return self.status is CatalogStatus.SUCCESS

    def __bool__(self) -> bool:
        return self.ok


__all__ = ["CatalogResult", "CatalogStatus"]
