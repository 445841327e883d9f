from __future__ import annotations

import csv
import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

from match_analyzer.consolidation.games import build_game_table
from match_analyzer.core.errors import MatchDataLoadError
from match_analyzer.domain.records import GameTable, PlayerRow

logger = logging.getLogger(__name__)

HeaderLegend = dict[str, int]


def _decodes_cleanly(record: Sequence[str], encoding: str) -> bool:
    # Undecodable bytes survive as lone surrogates, which do not re-encode.
    try:
        "".join(record).encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def header_legend(header: Sequence[str]) -> HeaderLegend:
    """Map each header name to its column index."""

    return {attribute: index for index, attribute in enumerate(header)}


def player_row_from_record(record: Sequence[str], legend: HeaderLegend) -> PlayerRow:
    row: PlayerRow = {}
    for attribute, index in legend.items():
        if index >= len(record):
            continue
        row[attribute] = record[index]
    return row


def read_match_rows(
    path: Path,
    *,
    encoding: str = "utf-8",
    delimiter: str = ",",
) -> Iterator[PlayerRow]:
    """Stream player rows from a match export CSV.

    The header row supplies the legend. Records that fail to parse, hold bytes
    that do not decode, or whose field count differs from the header are skipped.
    """

    try:
        f = path.open("r", encoding=encoding, errors="surrogateescape", newline="")
    except (OSError, LookupError) as exc:
        raise MatchDataLoadError(path, str(exc)) from exc

    with f:
        reader = csv.reader(f, delimiter=delimiter)
        try:
            header = next(reader)
        except StopIteration:
            raise MatchDataLoadError(path, "no header row") from None
        except csv.Error as exc:
            raise MatchDataLoadError(path, f"unreadable header row: {exc}") from exc

        if not _decodes_cleanly(header, encoding):
            raise MatchDataLoadError(path, f"header row is not valid {encoding}")

        legend = header_legend(header)
        skipped = 0

        while True:
            try:
                record = next(reader)
            except StopIteration:
                break
            except csv.Error as exc:
                skipped += 1
                logger.warning("Skipping unparseable record line=%d: %s", reader.line_num, exc)
                continue

            if not record:
                continue

            if not _decodes_cleanly(record, encoding):
                skipped += 1
                logger.warning("Skipping record line=%d: not valid %s", reader.line_num, encoding)
                continue

            if len(record) != len(header):
                skipped += 1
                logger.warning(
                    "Skipping record line=%d: expected %d fields, found %d",
                    reader.line_num,
                    len(header),
                    len(record),
                )
                continue

            yield player_row_from_record(record, legend)

    if skipped:
        logger.info("Skipped %d malformed records in %s", skipped, path)


def load_game_table(
    path: Path,
    *,
    encoding: str = "utf-8",
    delimiter: str = ",",
) -> GameTable:
    return build_game_table(read_match_rows(path, encoding=encoding, delimiter=delimiter))
