"""
Browser screenshot capture for paired comparison
"""

from .screenshot_service import ScreenshotService, NavigationStatus
from .placeholder import create_placeholder_image

__all__ = ['ScreenshotService', 'NavigationStatus', 'create_placeholder_image']
