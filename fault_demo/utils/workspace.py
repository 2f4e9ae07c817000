"""
Scratch directory holding the files the I/O scenarios need.

The missing-file scenarios only demonstrate anything when their file is
absent, and the end-of-stream scenario needs a record file with at least one
record in it. A Workspace guarantees both before the catalogue runs.
"""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from .records import SAMPLE_RECORDS, read_all_records, write_records

logger = logging.getLogger(__name__)


class Workspace:
    """Directory holding the deliberately-missing file and the record file."""

    def __init__(
        self,
        root: Optional[str] = None,
        missing_file: str = "nonexistent.txt",
        records_file: str = "test.txt",
    ):
        self._requested_root = root
        self._missing_name = missing_file
        self._records_name = records_file
        self._root: Optional[Path] = Path(root) if root else None
        self._owned = False

    @property
    def root(self) -> Path:
        if self._root is None:
            raise RuntimeError("Workspace has not been prepared")
        return self._root

    @property
    def missing_path(self) -> Path:
        return self.root / self._missing_name

    @property
    def records_path(self) -> Path:
        return self.root / self._records_name

    @property
    def prepared(self) -> bool:
        return self._root is not None and self._root.is_dir()

    def prepare(self) -> Path:
        """
        Create the directory if needed and write the sample record file.

        An existing record file is left untouched, and reported when it holds
        no readable record. A file sitting at the missing path is reported
        but never deleted.

        Returns:
            The workspace root
        """
        if self._requested_root is None and self._root is None:
            self._root = Path(tempfile.mkdtemp(prefix="fault-demo-"))
            self._owned = True
            logger.debug("Created scratch workspace %s", self._root)
        else:
            self.root.mkdir(parents=True, exist_ok=True)

        if not self.records_path.exists():
            with open(self.records_path, "wb") as stream:
                count = write_records(stream, SAMPLE_RECORDS)
            logger.debug("Wrote %d records to %s", count, self.records_path)
        elif self.count_records() == 0:
            logger.warning(
                "%s holds no readable records; read-past-end will hit end of file on the first read",
                self.records_path,
            )

        if self.missing_path.exists():
            logger.warning(
                "%s exists; the missing-file scenarios will not observe a fault",
                self.missing_path,
            )

        return self.root

    def release(self):
        """Remove the directory if this workspace created it."""
        if self._owned and self._root is not None:
            shutil.rmtree(self._root, ignore_errors=True)
            logger.debug("Removed scratch workspace %s", self._root)
            self._root = None
            self._owned = False

    def count_records(self) -> int:
        """Number of complete, decodable records in the record file."""
        try:
            with open(self.records_path, "rb") as stream:
                return len(read_all_records(stream))
        except UnicodeDecodeError:
            return 0
