"""
Side-by-side compositor for paired screenshots
Places the left capture and the right capture on one white canvas
"""

import os
import asyncio
import logging
from io import BytesIO
from pathlib import Path
from typing import Tuple, Union

from PIL import Image, UnidentifiedImageError

from utils.errors import CompositeError
from utils.path_manager import TEMP_SUFFIX

BACKGROUND_COLOR = (255, 255, 255, 255)


class Compositor:
    """Combines two screenshots into one comparison image"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def decode(self, image_bytes: bytes, label: str) -> Image.Image:
        """
        Decode raster bytes into an RGBA image

        Raises:
            CompositeError: If the bytes are not a readable image
        """
        try:
            img = Image.open(BytesIO(image_bytes))
            img.load()
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise CompositeError(f"Cannot decode {label} image: {e}") from e
        if img.mode != 'RGBA':
            img = img.convert('RGBA')
        return img

    def get_canvas_size(self, size1: Tuple[int, int], size2: Tuple[int, int]) -> Tuple[int, int]:
        """
        Canvas size for two images: twice the widest width, tallest height
        """
        max_width = max(size1[0], size2[0])
        max_height = max(size1[1], size2[1])
        return max_width * 2, max_height

    def combine(self, img1: Image.Image, img2: Image.Image) -> Image.Image:
        """
        Place img1 at (0, 0) and img2 at (max width, 0) on a white canvas

        Args:
            img1: Left image
            img2: Right image

        Returns:
            Image.Image: RGB comparison image
        """
        if img1.mode != 'RGBA':
            img1 = img1.convert('RGBA')
        if img2.mode != 'RGBA':
            img2 = img2.convert('RGBA')

        canvas_width, canvas_height = self.get_canvas_size(img1.size, img2.size)
        self.logger.debug(f"Combining {img1.size[0]}x{img1.size[1]} and {img2.size[0]}x{img2.size[1]} "
                          f"-> {canvas_width}x{canvas_height}")

        combined = Image.new('RGBA', (canvas_width, canvas_height), BACKGROUND_COLOR)
        combined.alpha_composite(img1, dest=(0, 0))
        combined.alpha_composite(img2, dest=(canvas_width // 2, 0))

        return combined.convert('RGB')

    def combine_to_file(self, image1: bytes, image2: bytes, output_path: Union[str, Path]) -> Path:
        """
        Decode, combine and write the comparison image as PNG

        The image is written to a temporary file next to the target and
        moved into place, so the final name only ever holds a complete file.

        Raises:
            CompositeError: On any decode, encode or write failure
        """
        output_path = Path(output_path)
        combined = self.combine(self.decode(image1, 'left'), self.decode(image2, 'right'))

        temp_path = output_path.with_name(output_path.name + TEMP_SUFFIX)
        try:
            combined.save(temp_path, 'PNG')
            os.replace(temp_path, output_path)
        except (OSError, ValueError) as e:
            temp_path.unlink(missing_ok=True)
            raise CompositeError(f"Cannot write comparison image {output_path}: {e}") from e

        self.logger.info(f"Comparison image saved: {output_path}")
        return output_path

    async def combine_images(self, image1: bytes, image2: bytes, output_path: Union[str, Path]) -> Path:
        """Run combine_to_file off the event loop"""
        return await asyncio.to_thread(self.combine_to_file, image1, image2, output_path)
