"""
Data models for paired page comparison
"""

from .page_pair import (
    PagePair,
    Captured,
    Failed,
    CaptureResult,
    CaptureOutcome,
    OutputRecord,
    RunSummary,
    parse_page_pairs,
    load_page_pairs,
)

__all__ = [
    'PagePair',
    'Captured',
    'Failed',
    'CaptureResult',
    'CaptureOutcome',
    'OutputRecord',
    'RunSummary',
    'parse_page_pairs',
    'load_page_pairs',
]
