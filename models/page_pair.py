"""Data models used throughout the paired capture pipeline."""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from utils.errors import InputError

DEFAULT_HTTP_STATUS = 200

RECORD_COLUMNS = (
    'index',
    'left_path',
    'right_path',
    'output_file_name',
    'left_status',
    'right_status',
)


@dataclass(frozen=True)
class PagePair:
    """One logical page compared across the left and right environments."""

    index: int
    left_path: str
    right_path: str


@dataclass(frozen=True)
class Captured:
    """Successful capture of one side of a pair."""

    image: bytes
    status: int


@dataclass(frozen=True)
class Failed:
    """Failed capture of one side of a pair."""

    status: int
    reason: str


CaptureResult = Union[Captured, Failed]


@dataclass(frozen=True)
class CaptureOutcome:
    """
    Image and status for one side of a pair, always present.

    On failure ``image`` holds a placeholder and ``succeeded`` is False.
    """

    image: bytes
    http_status: int
    succeeded: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class OutputRecord:
    """One line of the append-only record log."""

    index: int
    left_path: str
    right_path: str
    output_file_name: str
    left_status: int
    right_status: int

    def to_row(self) -> List[str]:
        return [
            str(self.index),
            self.left_path,
            self.right_path,
            self.output_file_name,
            str(self.left_status),
            str(self.right_status),
        ]

    @classmethod
    def from_row(cls, row: List[str]) -> 'OutputRecord':
        """
        Parse a record log row

        Raises:
            ValueError: If the row does not match the record schema
        """
        if len(row) != len(RECORD_COLUMNS):
            raise ValueError(f"expected {len(RECORD_COLUMNS)} columns, got {len(row)}")
        index, left_path, right_path, output_file_name, left_status, right_status = row
        if not output_file_name.strip():
            raise ValueError("empty output file name")
        return cls(
            index=int(index),
            left_path=left_path,
            right_path=right_path,
            output_file_name=output_file_name.strip(),
            left_status=int(left_status),
            right_status=int(right_status),
        )


@dataclass
class RunSummary:
    """Counters reported at the end of a run."""

    total: int = 0
    processed: int = 0
    skipped: int = 0
    failed_captures: int = 0


def parse_page_pairs(content: str) -> List[PagePair]:
    """
    Parse the input page list

    One pair per line as ``leftPath[,rightPath]``; blank lines are ignored
    and do not consume an index. A missing or empty right path defaults to
    the left path.

    Args:
        content: Text of the input file

    Returns:
        List[PagePair]: Pairs indexed from 1 in input order
    """
    pairs = []
    for line in content.splitlines():
        if not line.strip():
            continue
        parts = [part.strip() for part in line.split(',')]
        left_path = parts[0]
        right_path = parts[1] if len(parts) > 1 and parts[1] else left_path
        pairs.append(PagePair(index=len(pairs) + 1, left_path=left_path, right_path=right_path))
    return pairs


def load_page_pairs(input_file: Union[str, Path]) -> List[PagePair]:
    """
    Read and parse the input page list

    Raises:
        InputError: If the file is missing or cannot be read as UTF-8 text
    """
    path = Path(input_file)
    try:
        content = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read input file {path}: {e}") from e
    return parse_page_pairs(content)
