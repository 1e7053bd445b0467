from __future__ import annotations

from typing import Optional
import logging
import os

import numpy as np
from dotenv import load_dotenv

from models.color import Color
from models.color_matcher import ColorMatcher
from models.errors import InvalidStateError
from models.image import Image
from models.region import Region, RegionCollection
from services.recolor_service import Recolorer
from services.region_grower import RegionGrower

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class RegionFinderService:
    """
    Finds and holds the color regions of one image.

    Each call to ``find_regions`` is a fresh segmentation pass whose
    collection replaces the previous one.
    """

    def __init__(self,
                 image: Image | None = None,
                 threshold: float | None = None,
                 min_region: int | None = None):
        """
        Args:
            image: image to segment (can be set later with set_image)
            threshold: per-channel color match threshold (defaults to env var)
            min_region: smallest region worth keeping (defaults to env var)
        """
        if threshold is None:
            threshold = float(os.getenv("COLOR_MATCH_THRESHOLD", "20"))
        if min_region is None:
            min_region = int(os.getenv("MIN_REGION_SIZE", "50"))

        self.image = image
        self.color_matcher = ColorMatcher(threshold)
        self.grower = RegionGrower(self.color_matcher, min_region=min_region)
        self.recolorer = Recolorer()
        self.regions = RegionCollection()
        self.recolored_image: Image | None = None

    def set_image(self, image: Image) -> None:
        self.image = image

    def get_image(self) -> Image | None:
        return self.image

    def get_recolored_image(self) -> Image | None:
        return self.recolored_image

    # ─── Public API ────────────────────────────────────────────────
    def find_regions(self, target_color: Color) -> RegionCollection:
        """
        Run a new segmentation pass on the current image.

        The previous collection is dropped first, so a pass that raises
        (e.g. InvalidStateError with no image set) leaves no stale regions.
        """
        self.regions = RegionCollection()
        self.regions = self.grower.find_regions(self.image, target_color)
        return self.regions

    def count(self) -> int:
        return self.regions.count()

    def largest_region(self) -> Optional[Region]:
        return self.regions.largest_region()

    def recolor_image(self, rng: np.random.Generator | None = None) -> Image:
        """
        Copy of the image with each found region in its own random color.
        """
        if self.image is None:
            raise InvalidStateError("No image set: cannot recolor")
        self.recolored_image = self.recolorer.recolor(self.image, self.regions, rng)
        return self.recolored_image
