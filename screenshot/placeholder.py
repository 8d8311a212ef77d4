"""
Placeholder panel substituted for a failed capture
"""

from io import BytesIO
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from .config import ScreenshotConfig


def _load_fonts():
    try:
        return ImageFont.truetype("arial.ttf", 48), ImageFont.truetype("arial.ttf", 16)
    except OSError:
        return ImageFont.load_default(size=48), ImageFont.load_default(size=16)


def create_placeholder_image(status: int, reason: Optional[str] = None, config: dict = None) -> bytes:
    """
    Create a white PNG panel with the HTTP status in red

    Args:
        status: Observed (or default) HTTP status of the failed navigation
        reason: Optional short failure description drawn under the status
        config: Placeholder settings, defaults to ScreenshotConfig

    Returns:
        bytes: Encoded PNG image
    """
    settings = ScreenshotConfig.get_placeholder_config()
    if config:
        settings.update(config)

    width, height = settings['width'], settings['height']
    img = Image.new('RGB', (width, height), color=settings['color'])
    draw = ImageDraw.Draw(img)
    font, small_font = _load_fonts()

    lines = [(str(status), font), ("Capture failed", small_font)]
    if reason:
        # First line only, playwright errors carry a multi-line call log
        lines.append((reason.splitlines()[0][:60], small_font))

    y_offset = height // 3
    for line, current_font in lines:
        bbox = draw.textbbox((0, 0), line, font=current_font)
        text_width = bbox[2] - bbox[0]
        x = max(0, (width - text_width) // 2)
        draw.text((x, y_offset), line, fill=settings['text_color'], font=current_font)
        y_offset += (bbox[3] - bbox[1]) + 20

    buffer = BytesIO()
    img.save(buffer, 'PNG')
    return buffer.getvalue()
