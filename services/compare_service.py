"""
Compare Service
Handles the complete workflow per pair: check progress → capture both sides → composite → record
"""

import asyncio
import logging
from typing import List, Optional, Tuple

from config import CompareConfig
from composite.compositor import Compositor
from models.page_pair import OutputRecord, PagePair, RunSummary, load_page_pairs
from screenshot.screenshot_service import ScreenshotService
from services.progress_store import ProgressStore
from utils.path_manager import PathManager, get_padding_length, normalize_file_name


class CompareService:
    def __init__(self, config: CompareConfig, screenshot_service: Optional[ScreenshotService] = None,
                 compositor: Optional[Compositor] = None, progress_store: Optional[ProgressStore] = None):
        """Initialize the compare service from a run configuration"""
        self.logger = logging.getLogger(__name__)
        self.config = config
        self.screenshot_service = screenshot_service or ScreenshotService()
        self.compositor = compositor or Compositor()
        self.progress_store = progress_store or ProgressStore(config.output_file)
        self.path_manager = PathManager(config.output_dir)

    def plan(self) -> List[PagePair]:
        """
        Load the input list and the record log

        Returns:
            List[PagePair]: All pairs in input order

        Raises:
            InputError: If the input file cannot be read
            ProgressStoreError: If the record log cannot be read
        """
        pairs = load_page_pairs(self.config.input_file)
        self.progress_store.load()
        return pairs

    async def process_pair(self, pair: PagePair, output_file_name: str) -> Tuple[OutputRecord, int]:
        """
        Capture both sides of a pair concurrently and write the comparison image

        A failed side is replaced by a placeholder and never aborts the pair.

        Args:
            pair: Pair to process
            output_file_name: Precomputed output file name for the pair

        Returns:
            Tuple[OutputRecord, int]: (record to append, number of failed sides)

        Raises:
            CompositeError: If the comparison image cannot be built or written
        """
        left_url = self.config.resolve_left(pair.left_path)
        right_url = self.config.resolve_right(pair.right_path)

        left, right = await asyncio.gather(
            self.screenshot_service.capture(left_url),
            self.screenshot_service.capture(right_url),
        )

        output_path = self.path_manager.get_output_path(output_file_name)
        await self.compositor.combine_images(left.image, right.image, output_path)

        return OutputRecord(
            index=pair.index,
            left_path=pair.left_path,
            right_path=pair.right_path,
            output_file_name=output_file_name,
            left_status=left.http_status,
            right_status=right.http_status,
        ), int(not left.succeeded) + int(not right.succeeded)

    async def run(self, dry_run: bool = False) -> RunSummary:
        """
        Process every pair in input order, skipping pairs already recorded

        Pairs run strictly one after another; each record is appended only
        after its comparison image has been written.

        Args:
            dry_run: Only report what would be processed

        Returns:
            RunSummary: Counters for the run
        """
        if not dry_run:
            self.path_manager.ensure_output_directory()
            self.path_manager.remove_stale_temp_files()
        pairs = self.plan()
        summary = RunSummary(total=len(pairs))

        if not pairs:
            self.logger.info(f"No pages listed in {self.config.input_file}, nothing to do")
            return summary

        padding_length = get_padding_length(len(pairs))
        self.logger.info(f"Comparing {len(pairs)} pages: {self.config.left_base_url} vs {self.config.right_base_url}")

        for pair in pairs:
            label = str(pair.index).zfill(padding_length)
            output_file_name = normalize_file_name(pair.index, pair.left_path, padding_length)

            if self.progress_store.is_completed(output_file_name):
                self.logger.info(f"Skipping already processed page {label}: {pair.left_path}")
                summary.skipped += 1
                continue

            if dry_run:
                self.logger.info(f"Would process {label}: {pair.left_path} -> {output_file_name}")
                continue

            self.logger.info(f"Processing {label}: {pair.left_path}")
            record, failed_sides = await self.process_pair(pair, output_file_name)
            self.progress_store.append(record)

            summary.processed += 1
            summary.failed_captures += failed_sides
            if failed_sides:
                self.logger.warning(f"Page {label} recorded with {failed_sides} failed capture(s) "
                                    f"(HTTP {record.left_status} / {record.right_status})")

        self.logger.info(
            f"All pages processed. Results saved in {self.config.output_dir}. "
            f"Processed: {summary.processed}, Skipped: {summary.skipped}, "
            f"Failed captures: {summary.failed_captures}"
        )

        return summary
