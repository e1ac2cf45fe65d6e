"""CSV sink for streaming monitor rows to disk."""

from __future__ import annotations

import csv
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import TracebackType
from typing import Any


class CsvSink:
    """Write CSV rows under a fixed header, flushing every ``flush_every`` rows."""

    def __init__(
        self,
        path: str | Path,
        *,
        fieldnames: Iterable[str],
        flush_every: int = 1,
        append: bool = False,
    ) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._flush_every = max(1, flush_every)
        write_header = True
        if append and self._path.exists():
            try:
                write_header = self._path.stat().st_size == 0
            except OSError:
                write_header = True
        self._file = self._path.open("a" if append else "w", newline="", encoding="utf-8")
        self._fieldnames = list(fieldnames)
        self._writer: csv.DictWriter[str] | None = csv.DictWriter(
            self._file, fieldnames=self._fieldnames
        )
        if write_header:
            self._writer.writeheader()
        self._write_count = 0

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._writer is None

    def write_row(self, row: Mapping[str, Any]) -> None:
        if self._writer is None:
            raise RuntimeError(f"CsvSink for {self._path} is closed")
        self._writer.writerow(row)
        self._write_count += 1
        if self._write_count % self._flush_every == 0:
            self._file.flush()

    def write_rows(self, rows: Iterable[Mapping[str, Any]]) -> None:
        for row in rows:
            self.write_row(row)

    def flush(self) -> None:
        if self._writer is not None:
            self._file.flush()

    def close(self) -> None:
        if self._writer is None:
            return
        self._file.flush()
        self._file.close()
        self._writer = None

    def __enter__(self) -> CsvSink:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["CsvSink"]
