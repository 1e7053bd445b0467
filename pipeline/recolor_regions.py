# pipeline/recolor_regions.py
from pathlib import Path
import os
from typing import Optional, Tuple

import numpy as np
from dotenv import load_dotenv

from models.color import Color
from models.image import Image
from models.region import RegionCollection
from services.image_service import ImageService
from services.region_finder_service import RegionFinderService

# ------------------------------------------------------------------
# env‑vars
load_dotenv()
OUTPUT_EXT = os.getenv("OUTPUT_IMG_EXT", ".png")

# ------------------------------------------------------------------
def recolor_regions(
    image: Image,
    target_color: Color,
    *,
    finder: Optional[RegionFinderService] = None,
    image_service: Optional[ImageService] = None,
    rng: Optional[np.random.Generator] = None,
    out_path: str | Path | None = None,
) -> Tuple[RegionCollection, Image]:
    """
    One segmentation pass over *image*:
        • find the regions matching *target_color*
        • paint each one a random color on a copy
        • optionally save that copy to *out_path*
    Returns the region collection and the recolored image.
    """
    finder = finder or RegionFinderService()
    image_service = image_service or ImageService()

    finder.set_image(image)
    regions = finder.find_regions(target_color)
    recolored = finder.recolor_image(rng)

    if out_path is not None:
        out_path = Path(out_path)
        if not out_path.suffix:
            out_path = out_path.with_suffix(OUTPUT_EXT)
        image_service.save_as(recolored, out_path)

    return regions, recolored
