"""
JSON file persistence for company records.

The whole collection lives in a single file holding a JSON array.
Every read loads the complete array and every write replaces the
complete file; there is no indexing or incremental update.  Writes go
through a temporary file in the same directory followed by
``os.replace`` so readers never observe a truncated document.

Read failures are not fatal: a missing or unreadable file is reported
on the logger and treated as an empty collection.  Write failures are
always propagated to the caller.
"""

import json
import logging
import os
import tempfile
from typing import Any, Dict, List, Optional

Company = Dict[str, Any]


class CompanyStore:
    """Reads and writes the full list of companies from one JSON file."""

    def __init__(self, file_path: str, logger: Optional[logging.Logger] = None) -> None:
        self._path = file_path
        self._log = logger or logging.getLogger(__name__)

    @property
    def path(self) -> str:
        return self._path

    def read_all(self) -> List[Company]:
        """Return every stored company.

        Creates the data directory and an empty ``[]`` file when they do
        not exist yet.  If the file cannot be read or does not contain a
        JSON array, the problem is logged and an empty list is returned.
        """
        try:
            dir_name = os.path.dirname(os.path.abspath(self._path))
            os.makedirs(dir_name, exist_ok=True)

            if not os.path.exists(self._path):
                self.write_all([])
                return []

            with open(self._path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            return data
        except (OSError, ValueError) as exc:
            # json.JSONDecodeError is a ValueError subclass.
            self._log.error("Error reading companies from %s: %s", self._path, exc)
            return []

    def write_all(self, records: List[Company]) -> None:
        """Atomically replace the data file with *records*.

        Raises whatever the filesystem raised; the temporary file is
        removed on failure and the previous file is left untouched.
        """
        dir_name = os.path.dirname(os.path.abspath(self._path))
        try:
            os.makedirs(dir_name, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=dir_name, suffix=".tmp")
        except OSError as exc:
            self._log.error("Error writing companies to %s: %s", self._path, exc)
            raise
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(records, fh, indent=2)
            os.replace(tmp_path, self._path)
        except Exception as exc:
            self._log.error("Error writing companies to %s: %s", self._path, exc)
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise
        self._log.info(
            "Companies data written to file. Total companies: %d", len(records)
        )
