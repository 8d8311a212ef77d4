"""
Progress Store
Append-only record log that tells a re-run which pairs are already done
"""

import os
import csv
import io
import logging
from pathlib import Path
from typing import Set, Union

from models.page_pair import OutputRecord
from utils.errors import ProgressStoreError


class ProgressStore:
    """
    Tracks completed pairs by the output file name column of the record log.

    Record log format (no header, one record per line):
        index,leftPath,rightPath,outputFileName,leftStatus,rightStatus
    """

    def __init__(self, log_path: Union[str, Path] = "output.csv"):
        """
        Initialize progress store

        Args:
            log_path: Path of the record log
        """
        self.log_path = Path(log_path)
        self.logger = logging.getLogger(__name__)
        self.completed: Set[str] = set()
        self._needs_newline = False

    def load(self) -> Set[str]:
        """
        Rebuild the set of completed output file names from the record log

        A missing log means nothing has been completed yet. A trailing line
        without newline is a record torn by a crash and is ignored.

        Returns:
            Set[str]: Completed output file names

        Raises:
            ProgressStoreError: If the log exists but cannot be read
        """
        self.completed = set()
        self._needs_newline = False

        try:
            content = self.log_path.read_text(encoding='utf-8')
        except FileNotFoundError:
            self.logger.info(f"No record log at {self.log_path}, starting fresh")
            return self.completed
        except (OSError, UnicodeDecodeError) as e:
            raise ProgressStoreError(f"Cannot read record log {self.log_path}: {e}") from e

        lines = content.splitlines(keepends=True)
        if lines and not lines[-1].endswith('\n'):
            self.logger.warning(f"Ignoring incomplete last record in {self.log_path}: {lines[-1]!r}")
            lines = lines[:-1]
            self._needs_newline = True

        for line_number, row in enumerate(csv.reader(lines), 1):
            if not row or not any(cell.strip() for cell in row):
                continue
            try:
                record = OutputRecord.from_row(row)
            except ValueError as e:
                self.logger.warning(f"Ignoring malformed record on line {line_number} of {self.log_path}: {e}")
                continue
            self.completed.add(record.output_file_name)

        self.logger.info(f"Loaded {len(self.completed)} completed pairs from {self.log_path}")
        return self.completed

    def is_completed(self, output_file_name: str) -> bool:
        return output_file_name in self.completed

    def append(self, record: OutputRecord) -> None:
        """
        Durably append one record

        The record is serialized first and written with a single write,
        then flushed and synced before returning.

        Raises:
            ProgressStoreError: If the record cannot be written
        """
        buffer = io.StringIO()
        csv.writer(buffer, lineterminator='\n').writerow(record.to_row())
        line = buffer.getvalue()
        if self._needs_newline:
            line = '\n' + line

        try:
            with open(self.log_path, 'a', encoding='utf-8', newline='') as log_file:
                log_file.write(line)
                log_file.flush()
                os.fsync(log_file.fileno())
        except OSError as e:
            raise ProgressStoreError(f"Cannot append to record log {self.log_path}: {e}") from e

        self._needs_newline = False
        self.completed.add(record.output_file_name)
