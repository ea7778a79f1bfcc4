import logging
from dataclasses import asdict, dataclass, field

import pandas as pd

logger = logging.getLogger(__name__)


class TimetableError(Exception):
    """Base class for schedule file failures."""


class TableReadError(TimetableError):
    pass


class TableParseError(TimetableError):
    pass


class EmptyTableError(TimetableError):
    def __init__(self, message: str = "CSV is empty"):
        super().__init__(message)


class TableWriteError(TimetableError):
    pass


def _read_records(path) -> list[list[str]]:
    try:
        df = pd.read_csv(
            path,
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError as exc:
        raise EmptyTableError() from exc
    except pd.errors.ParserError as exc:
        raise TableParseError(f"Cannot parse {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise TableParseError(f"Cannot parse {path}: {exc}") from exc
    except OSError as exc:
        raise TableReadError(f"Cannot read {path}: {exc}") from exc

    records = []
    width = df.shape[1]
    for line_no, row in enumerate(df.itertuples(index=False, name=None), start=1):
        # empty fields read as "", fields missing from a short record as NaN
        missing = sum(1 for value in row if pd.isna(value))
        if missing == width:
            continue
        if missing:
            present = width - missing
            raise TableParseError(
                f"Cannot parse {path}: record {line_no} has {present} fields, expected {width}"
            )
        records.append([str(value) for value in row])

    if not records:
        raise EmptyTableError()
    return records


def _write_records(path, records: list[list[str]]) -> None:
    try:
        pd.DataFrame(records).to_csv(
            path, header=False, index=False, lineterminator="\n"
        )
    except OSError as exc:
        raise TableWriteError(f"Cannot write {path}: {exc}") from exc


@dataclass
class TimetableData:
    headers: list[str] = field(default_factory=list)
    time_slots: list[str] = field(default_factory=list)
    grid: list[list[str]] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_records(cls, records: list[list[str]]) -> "TimetableData":
        if not records:
            raise EmptyTableError()
        data = cls(headers=list(records[0][1:]))
        for record in records[1:]:
            if not record:
                continue
            data.time_slots.append(record[0])
            data.grid.append(list(record[1:]))
        return data

    @classmethod
    def load(cls, path) -> "TimetableData":
        return cls.from_records(_read_records(path))

    @staticmethod
    def save(path, row: int, col: int, value: str) -> bool:
        """Overwrite one grid cell and rewrite the whole file.

        ``row``/``col`` address the grid, so the raw record is offset by one
        for the header row and the time slot column. Out-of-range targets
        leave the file untouched and return False.
        """
        if row < 0 or col < 0:
            raise ValueError("row and col must be non-negative")

        records = _read_records(path)
        r, c = row + 1, col + 1
        if r >= len(records) or c >= len(records[r]):
            logger.warning(
                "Skipping write to %s: cell (%d, %d) is outside the grid", path, row, col
            )
            return False

        records[r][c] = value
        _write_records(path, records)
        logger.debug("Wrote cell (%d, %d) to %s", row, col, path)
        return True
