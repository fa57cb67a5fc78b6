"""
Plain-text catalog store: one player per line, comma separated, no header.

Row layout is ``name,country,error_count,ace_count,total_serves``. Fields are
neither quoted nor escaped, so the format round-trips only when names and
countries contain no commas.

Usage:
    from serve_registry.infrastructure.csv_store import load_catalog, save_catalog

    result = save_catalog("jugadores.csv", players)
    result = load_catalog("jugadores.csv", sink=registry.add)
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Iterator, Tuple

from pydantic import ValidationError

from serve_registry.domain.models import FIELD_DELIMITER, FIELD_ORDER, Player
from serve_registry.infrastructure.results import CatalogResult, CatalogStatus
from serve_registry.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_ENCODING = "utf-8"


def _split_row(line: str) -> list[str]:
    fields = line.rstrip("\r\n").split(FIELD_DELIMITER)
    # Trailing empty fields are dropped: "a,b,1,2," has four fields, "a,b,1,2,3," has five.
    while fields and not fields[-1]:
        fields.pop()
    return fields


def _iter_rows(path: Path, encoding: str) -> Iterator[Tuple[int, list[str]]]:
    """Yield (line_number, fields) for every line of the catalog."""
    with path.open("r", encoding=encoding) as f:
        for line_number, line in enumerate(f, start=1):
            yield line_number, _split_row(line)


def save_catalog(
    path: Path | str,
    players: Iterable[Player],
    encoding: str = DEFAULT_ENCODING,
) -> CatalogResult:
    """
    Write players to ``path``, truncating any existing file.

    Lines end with the platform line terminator (text-mode newline translation).
    An I/O failure is logged and returned as IO_ERROR; nothing is raised.
    """
    target = Path(path)
    written = 0
    try:
        with target.open("w", encoding=encoding) as f:
            for player in players:
                f.write(player.to_delimited_text())
                f.write("\n")
                written += 1
    except (OSError, UnicodeEncodeError) as exc:
        log.exception("Catalog save failed", extra={"path": str(target)})
        return CatalogResult(CatalogStatus.IO_ERROR, target, players=written, error=str(exc))

    log.info("Catalog saved", extra={"path": str(target), "players": written})
    return CatalogResult(CatalogStatus.SUCCESS, target, players=written)


def load_catalog(
    path: Path | str,
    sink: Callable[[Player], None],
    encoding: str = DEFAULT_ENCODING,
) -> CatalogResult:
    """
    Read players from ``path`` and hand each one to ``sink`` in file order.

    Blank lines are ignored. Rows without exactly five fields are skipped and
    counted in the result. The first row whose counters do not parse as
    integers aborts the load; players already handed to ``sink`` stay there.
    Failures are logged and returned, never raised.
    """
    source = Path(path)
    loaded = 0
    skipped = 0
    line_number = 0
    try:
        for line_number, fields in _iter_rows(source, encoding):
            if not fields:
                continue
            if len(fields) != len(FIELD_ORDER):
                skipped += 1
                continue
            sink(Player.from_fields(fields))
            loaded += 1
    except ValidationError as exc:
        log.error(
            "Catalog row has a non-integer counter; load aborted",
            extra={"path": str(source), "line": line_number, "loaded": loaded},
        )
        return CatalogResult(
            CatalogStatus.PARSE_ERROR,
            source,
            players=loaded,
            skipped=skipped,
            error=f"line {line_number}: {exc.error_count()} invalid field(s)",
            line=line_number,
        )
    except (OSError, UnicodeDecodeError) as exc:
        log.exception("Catalog load failed", extra={"path": str(source), "loaded": loaded})
        return CatalogResult(
            CatalogStatus.IO_ERROR, source, players=loaded, skipped=skipped, error=str(exc)
        )

    log.info(
        "Catalog loaded", extra={"path": str(source), "players": loaded, "skipped": skipped}
    )
    return CatalogResult(CatalogStatus.SUCCESS, source, players=loaded, skipped=skipped)


__all__ = ["DEFAULT_ENCODING", "load_catalog", "save_catalog"]
