"""
Path Manager for paired comparison output
Computes deterministic output file names and owns the output directory
"""

import re
import logging
from pathlib import Path

from utils.errors import ConfigurationError

MIN_PADDING_LENGTH = 3
OUTPUT_EXTENSION = '.png'
TEMP_SUFFIX = '.tmp'

_NON_ALPHANUMERIC = re.compile(r'[^a-z0-9]+')


def get_padding_length(total_pairs: int) -> int:
    """
    Digit width used to zero-pad pair indexes

    Equivalent to max(3, floor(log10(total_pairs)) + 1), computed on the
    decimal string so large counts are not subject to float rounding.

    Args:
        total_pairs: Number of pairs in the input list

    Returns:
        int: Padding length (never less than 3)
    """
    if total_pairs < 1:
        return MIN_PADDING_LENGTH
    return max(MIN_PADDING_LENGTH, len(str(total_pairs)))


def slugify_url(url: str) -> str:
    """
    Convert a URL or page path to a lowercase, dash-separated slug

    Args:
        url: URL or page path

    Returns:
        str: Slug (may be empty for paths like "/")
    """
    return _NON_ALPHANUMERIC.sub('-', url.lower()).strip('-')


def normalize_file_name(index: int, url: str, padding_length: int) -> str:
    """
    Build the output file name for a pair

    Args:
        index: 1-based pair index
        url: Left page path of the pair
        padding_length: Digit width from get_padding_length()

    Returns:
        str: File name like "001-about.png"
    """
    padded_number = str(index).zfill(padding_length)
    return f"{padded_number}-{slugify_url(url)}{OUTPUT_EXTENSION}"


class PathManager:
    """
    Resolves comparison image paths below a single output directory:

    /output/
      001-about.png
      002-contact.png
      ...
    """

    def __init__(self, output_dir: str = "output"):
        """
        Initialize path manager

        Args:
            output_dir: Directory holding one comparison image per pair
        """
        self.output_dir = Path(output_dir)
        self.logger = logging.getLogger(__name__)

    def ensure_output_directory(self) -> Path:
        """
        Create the output directory if it is missing

        Returns:
            Path: The output directory

        Raises:
            ConfigurationError: If the directory cannot be created
        """
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot create output directory {self.output_dir}: {e}"
            ) from e
        self.logger.debug(f"Output directory ready: {self.output_dir}")
        return self.output_dir

    def get_output_path(self, file_name: str) -> Path:
        """Get the full path for an output file name"""
        return self.output_dir / file_name

    def remove_stale_temp_files(self) -> int:
        """
        Delete half-written comparison images left behind by an interrupted run

        Returns:
            int: Number of files removed
        """
        removed = 0
        for temp_path in self.output_dir.glob(f"*{OUTPUT_EXTENSION}{TEMP_SUFFIX}"):
            try:
                temp_path.unlink()
            except FileNotFoundError:
                continue
            removed += 1
            self.logger.warning(f"Removed incomplete output file: {temp_path}")
        return removed
