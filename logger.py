"""Structured logging helpers for player snapshots."""

from __future__ import annotations

import csv
import json
from typing import Optional

from player import Player


CSV_FIELDS = ["player_id", "name", "hand", "captured", "score", "cards_won"]


class GameLogger:
    def __init__(self, path: str, *, fmt: str = "jsonl") -> None:
        self.path = path
        self.format = fmt.lower()
        if self.format not in ("jsonl", "csv"):
            raise ValueError(f"Unsupported log format: {self.format}")
        newline = "" if self.format == "csv" else "\n"
        self._handle = open(path, "w", encoding="utf-8", newline=newline)
        self._writer: Optional[csv.DictWriter] = None
        if self.format == "csv":
            self._writer = csv.DictWriter(self._handle, fieldnames=CSV_FIELDS)
            self._writer.writeheader()

    def __enter__(self) -> "GameLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def log(self, player: Player) -> None:
        record = player.to_dict()
        if self.format == "jsonl":
            json.dump(record, self._handle, ensure_ascii=False)
            self._handle.write("\n")
        else:
            assert self._writer is not None
            self._writer.writerow(self._as_csv_row(record))
        self._handle.flush()

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()

    def _as_csv_row(self, record: dict) -> dict:
        row = dict(record)
        row["hand"] = " ".join(record["hand"])
        row["captured"] = " ".join(record["captured"])
        return row


__all__ = ["GameLogger"]
