"""Semicolon delimited sheet reader."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from eventarchive.domain.model import RawRecord

log = logging.getLogger(__name__)

DELIMITER: Final[str] = ";"
ENCODING: Final[str] = "utf-8-sig"


@dataclass(frozen=True, slots=True)
class Sheet:
    """Lazy, restartable view over one exported sheet.

    Each iteration reopens the file. A missing file or one holding only
    whitespace yields no records.
    """

    path: Path

    def __iter__(self) -> Iterator[RawRecord]:
        if not self.path.is_file():
            log.debug("Sheet %s not found, treating as empty", self.path)
            return
        with self.path.open(encoding=ENCODING, newline="") as handle:
            reader = csv.DictReader(handle, delimiter=DELIMITER)
            for row in reader:
                if _is_blank(row):
                    continue
                yield {key: value for key, value in row.items() if key is not None}

    @property
    def name(self) -> str:
        return self.path.name


def read_sheet(path: Path) -> Sheet:
    return Sheet(path)


def _is_blank(row: dict[str | None, str | None]) -> bool:
    return not any(isinstance(value, str) and value.strip() for value in row.values())
