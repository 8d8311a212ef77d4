"""
Side-by-side comparison image generation
"""

from .compositor import Compositor, BACKGROUND_COLOR

__all__ = ['Compositor', 'BACKGROUND_COLOR']
