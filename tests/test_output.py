"""Tests for the CSV/TXT record sinks."""
from __future__ import annotations

import csv
from pathlib import Path

import pytest

from asn_cidr.cidr import AddressFamily
from asn_cidr.models.prefix import PrefixRecord
from asn_cidr.output import MemorySink, OutputSink, PrefixFileSink, output_paths

COLUMNS = ("prefix", "country_code", "description")


def test_output_paths(tmp_path: Path) -> None:
    csv_path, txt_path = output_paths(tmp_path, 13335, AddressFamily.V6)
    assert csv_path == tmp_path / "AS13335_v6.csv"
    assert txt_path == tmp_path / "AS13335_v6.txt"


def test_file_sink_writes_header_and_rows(tmp_path: Path) -> None:
    csv_path, txt_path = output_paths(tmp_path / "bgp.tools", 13335, AddressFamily.V4)
    records = [
        PrefixRecord(prefix="1.1.1.0/24", country_code="US", description="Cloudflare, Inc."),
        PrefixRecord(prefix="104.16.0.0/13", country_code="AU"),
    ]

    with PrefixFileSink(csv_path, txt_path) as sink:
        sink.write_header(COLUMNS)
        for record in records:
            sink.write(record, COLUMNS)

    with csv_path.open(newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows == [
        list(COLUMNS),
        ["1.1.1.0/24", "US", "Cloudflare, Inc."],
        ["104.16.0.0/13", "AU", ""],
    ]
    assert txt_path.read_text(encoding="utf-8") == "1.1.1.0/24\n104.16.0.0/13\n"


def test_file_sink_creates_nothing_until_opened(tmp_path: Path) -> None:
    csv_path, txt_path = output_paths(tmp_path / "out", 1, AddressFamily.V4)
    PrefixFileSink(csv_path, txt_path)
    assert not (tmp_path / "out").exists()


def test_file_sink_requires_open(tmp_path: Path) -> None:
    sink = PrefixFileSink(tmp_path / "a.csv", tmp_path / "a.txt")
    with pytest.raises(RuntimeError):
        sink.write_header(COLUMNS)


def test_sinks_satisfy_protocol(tmp_path: Path) -> None:
    assert isinstance(MemorySink(), OutputSink)
    assert isinstance(PrefixFileSink(tmp_path / "a.csv", tmp_path / "a.txt"), OutputSink)


def test_memory_sink() -> None:
    sink = MemorySink()
    sink.open()
    sink.write_header(COLUMNS)
    sink.write(PrefixRecord(prefix="2001:db8::/32", country_code="JP"), COLUMNS)
    sink.close()
    assert sink.header == COLUMNS
    assert sink.rows == [["2001:db8::/32", "JP", ""]]
    assert sink.prefixes == ["2001:db8::/32"]
    assert sink.opened and sink.closed


def test_file_sink_releases_csv_when_txt_cannot_open(tmp_path: Path) -> None:
    txt_path = tmp_path / "AS1_v4.txt"
    txt_path.mkdir()
    sink = PrefixFileSink(tmp_path / "AS1_v4.csv", txt_path)

    with pytest.raises(OSError):
        sink.open()

    assert sink._csv_file is None
    with pytest.raises(RuntimeError):
        sink.write_header(COLUMNS)
