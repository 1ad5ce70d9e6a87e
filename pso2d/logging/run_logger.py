"""CSV log of a swarm run: one row per completed step."""

from __future__ import annotations

import csv
import datetime as dt
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .progress import ProgressRecord

STEP_COLUMNS = ("step", "best_value", "best_x", "best_y")


def _utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


@dataclass
class RunLogger:
    """
    Run observer that keeps every ProgressRecord it sees and writes them as CSV.

    Each row is a UTC timestamp, the current metadata (run settings such as
    the function name or seed) and the step columns. Metadata can change
    mid-run; rows logged earlier keep what they were logged with and leave
    later keys blank. `field_order` restricts and orders the written columns.
    """

    base_dir: Path
    filename: Optional[str] = None
    metadata: Optional[Dict[str, object]] = None
    field_order: Optional[Iterable[str]] = None

    _rows: List[Dict[str, object]] = field(default_factory=list, init=False)
    _path: Optional[Path] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.base_dir = Path(self.base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self.metadata = dict(self.metadata or {})

    def __call__(self, record: ProgressRecord) -> None:
        self.observe(record)

    def observe(self, record: ProgressRecord) -> None:
        self.log_step(**record.as_row())

    def log_step(self, **values: object) -> None:
        row: Dict[str, object] = {"timestamp": _utc_now().isoformat(timespec="milliseconds")}
        row.update(self.metadata)
        row.update(values)
        self._rows.append(row)

    def update_metadata(self, **extra: object) -> None:
        self.metadata.update(extra)

    @property
    def records(self) -> List[Dict[str, object]]:
        return [dict(row) for row in self._rows]

    @property
    def path(self) -> Path:
        if self._path is None:
            name = self.filename or f"swarm_{_utc_now():%Y%m%dT%H%M%S}.csv"
            self._path = self.base_dir / name
        return self._path

    def columns(self) -> List[str]:
        if self.field_order:
            return list(self.field_order)
        # timestamp, then metadata keys in first-seen order, then the step columns
        seen = {"timestamp": None}
        for row in self._rows:
            seen.update((key, None) for key in row if key not in STEP_COLUMNS)
        seen.update((key, None) for key in STEP_COLUMNS)
        return list(seen)

    def flush(self) -> Path:
        """Write all rows logged so far and return the CSV path."""
        if not self._rows:
            raise RuntimeError("No records to write; did the swarm run with this logger attached?")

        with self.path.open("w", newline="") as handle:
            writer = csv.DictWriter(handle, fieldnames=self.columns(), extrasaction="ignore")
            writer.writeheader()
            writer.writerows(self._rows)
        return self.path
