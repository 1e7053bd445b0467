from __future__ import annotations
from typing import Iterable, Optional
import logging
import numpy as np

from models.image import Image
from models.region import Region

logger = logging.getLogger(__name__)


class Recolorer:
    """
    Paints every region of a collection with its own random color.
    Works on a copy; the source image is never touched.
    """

    def recolor(
        self,
        image: Image,
        regions: Iterable[Region],
        rng: Optional[np.random.Generator] = None,
    ) -> Image:
        """
        Args
        ----
        image   : source image (left unmodified)
        regions : regions to paint, e.g. a RegionCollection
        rng     : random source; seed it for reproducible colors

        Returns
        -------
        A new Image, identical to ``image`` outside the regions.
        """
        rng = rng if rng is not None else np.random.default_rng()
        pixels = image.pixels.copy()

        painted = 0
        for region in regions:
            # one draw per region, uniform over the 24-bit RGB cube
            color = rng.integers(0, 256, size=3, dtype=np.uint8)
            xs = [p.x for p in region]
            ys = [p.y for p in region]
            pixels[ys, xs, :3] = color
            painted += 1

        logger.debug(f"Recolored {painted} region(s)")
        return Image(pixels=pixels, path=None)
