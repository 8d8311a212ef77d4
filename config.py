import os
from typing import Optional
from urllib.parse import urljoin, urlparse

from dotenv import load_dotenv

from utils.errors import ConfigurationError

load_dotenv()


class CompareConfig:
    """Run configuration, built once at startup and passed to every component."""

    def __init__(self, left_base_url: Optional[str] = None, right_base_url: Optional[str] = None,
                 input_file: Optional[str] = None, output_file: Optional[str] = None,
                 output_dir: Optional[str] = None):
        self.left_base_url = left_base_url or os.getenv('PAIRSHOT_LEFT_BASE_URL', '')
        self.right_base_url = right_base_url or os.getenv('PAIRSHOT_RIGHT_BASE_URL', '')
        self.input_file = input_file or os.getenv('PAIRSHOT_INPUT_FILE', 'input.csv')
        self.output_file = output_file or os.getenv('PAIRSHOT_OUTPUT_FILE', 'output.csv')
        self.output_dir = output_dir or os.getenv('PAIRSHOT_OUTPUT_DIR', 'output')

    def validate(self) -> 'CompareConfig':
        """Raise ConfigurationError unless both base URLs are absolute http(s) URLs."""
        for name, value in (('left', self.left_base_url), ('right', self.right_base_url)):
            if not value:
                raise ConfigurationError(
                    f"Missing {name} base URL (set PAIRSHOT_{name.upper()}_BASE_URL)"
                )
            parsed = urlparse(value)
            if parsed.scheme not in ('http', 'https') or not parsed.netloc:
                raise ConfigurationError(f"Invalid {name} base URL: {value}")
        return self

    def resolve_left(self, path: str) -> str:
        return urljoin(self.left_base_url, path)

    def resolve_right(self, path: str) -> str:
        return urljoin(self.right_base_url, path)

    def __repr__(self):
        return f'<CompareConfig {self.left_base_url} vs {self.right_base_url}>'
