"""Record sinks: a CSV table plus a bare prefix list, written row by row."""
from __future__ import annotations

import csv
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Protocol, runtime_checkable

from asn_cidr.cidr import AddressFamily
from asn_cidr.models.prefix import PrefixRecord


@runtime_checkable
class OutputSink(Protocol):
    """Anything that accepts a header row and then records, in order."""

    def open(self) -> None:
        ...

    def write_header(self, header: tuple[str, ...]) -> None:
        ...

    def write(self, record: PrefixRecord, columns: tuple[str, ...]) -> None:
        ...

    def close(self) -> None:
        ...


def output_paths(output_dir: Path, asn: int, family: AddressFamily) -> tuple[Path, Path]:
    """``{dir}/AS{asn}_v{4|6}.csv`` and the matching ``.txt``."""
    stem = f"AS{asn}_v{int(family)}"
    return output_dir / f"{stem}.csv", output_dir / f"{stem}.txt"


class PrefixFileSink:
    """Writes a CSV table and a one-prefix-per-line text file.

    Nothing touches the filesystem until :meth:`open`, so a run that fails
    before opening the sink leaves no files behind. Parent directories are
    created on open.
    """

    def __init__(self, csv_path: Path, txt_path: Path) -> None:
        self.csv_path = Path(csv_path)
        self.txt_path = Path(txt_path)
        self._csv_file: IO[str] | None = None
        self._txt_file: IO[str] | None = None
        self._writer = None

    def open(self) -> None:
        self.csv_path.parent.mkdir(parents=True, exist_ok=True)
        self.txt_path.parent.mkdir(parents=True, exist_ok=True)
        self._csv_file = self.csv_path.open("w", newline="", encoding="utf-8")
        try:
            self._txt_file = self.txt_path.open("w", encoding="utf-8")
        except OSError:
            self.close()
            raise
        self._writer = csv.writer(self._csv_file)

    def write_header(self, header: tuple[str, ...]) -> None:
        self._require_open()
        self._writer.writerow(header)

    def write(self, record: PrefixRecord, columns: tuple[str, ...]) -> None:
        self._require_open()
        self._writer.writerow(record.to_row(columns))
        self._txt_file.write(record.prefix + "\n")

    def close(self) -> None:
        for f in (self._csv_file, self._txt_file):
            if f is not None:
                f.close()
        self._csv_file = None
        self._txt_file = None
        self._writer = None

    def _require_open(self) -> None:
        if self._writer is None:
            raise RuntimeError("sink is not open")

    def __enter__(self) -> PrefixFileSink:
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False


@dataclass
class MemorySink:
    """Keeps rows in memory; used for previews and tests."""

    header: tuple[str, ...] | None = None
    rows: list[list[str]] = field(default_factory=list)
    prefixes: list[str] = field(default_factory=list)
    opened: bool = False
    closed: bool = False

    def open(self) -> None:
        self.opened = True

    def write_header(self, header: tuple[str, ...]) -> None:
        self.header = tuple(header)

    def write(self, record: PrefixRecord, columns: tuple[str, ...]) -> None:
        self.rows.append(record.to_row(columns))
        self.prefixes.append(record.prefix)

    def close(self) -> None:
        self.closed = True
