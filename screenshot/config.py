"""
Configuration settings for browser screenshot capture
"""

import os
from typing import Dict, Any


class ScreenshotConfig:
    """Configuration class for screenshot capture settings"""

    @staticmethod
    def get_browser_config() -> Dict[str, Any]:
        """
        Get browser configuration settings

        Returns:
            Dict with browser settings
        """
        return {
            'headless': os.getenv('SCREENSHOT_HEADLESS', 'true').lower() == 'true',
            'timeout': int(os.getenv('SCREENSHOT_TIMEOUT', '30000')),  # 30 seconds
            'settle_delay': int(os.getenv('SCREENSHOT_SETTLE_DELAY', '2000')),  # after scroll to bottom
            'viewport_width': int(os.getenv('SCREENSHOT_VIEWPORT_WIDTH', '1920')),
            'viewport_height': int(os.getenv('SCREENSHOT_VIEWPORT_HEIGHT', '1080')),
            'browser_args': [
                '--no-sandbox',
                '--disable-setuid-sandbox',
                '--disable-dev-shm-usage',
                '--disable-accelerated-2d-canvas',
                '--no-first-run',
                '--no-zygote',
                '--disable-gpu'
            ]
        }

    @staticmethod
    def get_placeholder_config() -> Dict[str, Any]:
        """
        Get settings for the panel drawn when a capture fails

        Returns:
            Dict with placeholder settings
        """
        return {
            'width': int(os.getenv('SCREENSHOT_PLACEHOLDER_WIDTH', '400')),
            'height': int(os.getenv('SCREENSHOT_PLACEHOLDER_HEIGHT', '300')),
            'color': '#ffffff',
            'text_color': '#ff0000',
        }
