"""Streaming JSONL output for response descriptors."""

import json
from pathlib import Path
from typing import TextIO

from .core import HTTPResponseDescriptor


class StreamingOutputWriter:
    """Writes descriptors to JSONL format one at a time."""

    def __init__(self, output_path: str | Path):
        self.output_path = Path(output_path)
        self._file: TextIO | None = None
        self._count = 0

    def __enter__(self) -> "StreamingOutputWriter":
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.output_path, "w", encoding="utf-8")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._file is not None:
            self._file.close()
            self._file = None

    def write_one(self, record: HTTPResponseDescriptor | dict):
        """Write a single descriptor or dict to the output file."""
        if self._file is None:
            raise RuntimeError("StreamingOutputWriter must be used as context manager")

        if isinstance(record, HTTPResponseDescriptor):
            record = record.to_dict()

        self._file.write(json.dumps(record, ensure_ascii=False) + "\n")
        self._file.flush()
        self._count += 1

    @property
    def count(self) -> int:
        """Number of records written."""
        return self._count
