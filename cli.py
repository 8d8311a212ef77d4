"""
Paired visual regression capture
Screenshots every listed page on two environments and saves them side by side
"""

import os
import sys
import asyncio
import logging
import argparse
from typing import List, Optional

from config import CompareConfig
from services.compare_service import CompareService
from utils.errors import PairshotError

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Capture every page in the input list on two environments and combine them side by side',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pairshot --left-base-url https://example.com --right-base-url https://staging.example.com
  pairshot --input pages.csv --output-dir shots --dry-run
        """
    )

    # Environments
    parser.add_argument('--left-base-url', type=str, help='Base URL of the left environment')
    parser.add_argument('--right-base-url', type=str, help='Base URL of the right environment')

    # Files
    parser.add_argument('--input', dest='input_file', type=str, help='Input page list (default: input.csv)')
    parser.add_argument('--output', dest='output_file', type=str, help='Record log (default: output.csv)')
    parser.add_argument('--output-dir', type=str, help='Directory for comparison images (default: output)')

    # Options
    parser.add_argument('--log-level', type=str.upper, default=os.getenv('PAIRSHOT_LOG_LEVEL', 'INFO'),
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging level (default: INFO)')
    parser.add_argument('--dry-run', action='store_true',
                        help='Show which pages would be processed without capturing anything')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    try:
        config = CompareConfig(
            left_base_url=args.left_base_url,
            right_base_url=args.right_base_url,
            input_file=args.input_file,
            output_file=args.output_file,
            output_dir=args.output_dir,
        ).validate()

        asyncio.run(CompareService(config).run(dry_run=args.dry_run))

    except PairshotError as e:
        logger.error(f"ERROR: {e}")
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted, completed pages are recorded and will be skipped on the next run")
        return 130

    return 0


if __name__ == '__main__':
    sys.exit(main())
