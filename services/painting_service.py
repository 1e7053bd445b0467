from __future__ import annotations
from typing import Tuple
import logging
import numpy as np

from models.color import Color
from models.image import Image
from models.region import Region
from services.region_finder_service import RegionFinderService

logger = logging.getLogger(__name__)

DEFAULT_BRUSH = Color(0, 0, 255)  # blue


class PaintingService:
    """
    A canvas onto which tracked regions are painted frame after frame.
    Starts out fully transparent (RGBA zeros).
    """

    def __init__(self, height: int, width: int):
        self.shape: Tuple[int, int] = (height, width)
        self._canvas = self._blank()

    def _blank(self) -> np.ndarray:
        return np.zeros((*self.shape, 4), dtype=np.uint8)

    @property
    def painting(self) -> Image:
        return Image(pixels=self._canvas)

    def clear(self) -> None:
        """Reset the painting to a blank canvas."""
        self._canvas = self._blank()

    def paint_region(self, region: Region, color: Color = DEFAULT_BRUSH) -> None:
        xs = [p.x for p in region]
        ys = [p.y for p in region]
        self._canvas[ys, xs] = (*color.as_rgb(), 255)

    def paint_largest(self, finder: RegionFinderService, brush_color: Color = DEFAULT_BRUSH) -> bool:
        """
        Paint the finder's largest region, if it has one.
        Returns True when something was painted.
        """
        region = finder.largest_region()
        if region is None:
            return False
        self.paint_region(region, brush_color)
        logger.debug(f"Painted {region.size} px starting at {region.first_point}")
        return True
