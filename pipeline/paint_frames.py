# pipeline/paint_frames.py
import logging
from typing import Iterable, Optional

from models.color import Color
from models.image import Image
from services.painting_service import DEFAULT_BRUSH, PaintingService
from services.region_finder_service import RegionFinderService

logger = logging.getLogger(__name__)


def paint_frames(
    frames: Iterable[Image],
    target_color: Color,
    *,
    finder: Optional[RegionFinderService] = None,
    painting_service: Optional[PaintingService] = None,
    brush_color: Color = DEFAULT_BRUSH,
) -> Image:
    """
    For every frame: run a fresh segmentation pass and paint the largest
    matching region onto one shared canvas.  The canvas is sized from the
    first frame unless *painting_service* is given; frames of any other
    size are skipped with a warning.
    Returns the final painting.
    """
    finder = finder or RegionFinderService()

    n_frames = 0
    n_painted = 0
    for index, frame in enumerate(frames):
        height, width = frame.pixels.shape[:2]
        if painting_service is None:
            painting_service = PaintingService(height, width)
        elif (height, width) != painting_service.shape:
            name = frame.path.name if frame.path else f"#{index}"
            logger.warning(
                f"Skipping frame {name}: {width}x{height} does not match "
                f"the {painting_service.shape[1]}x{painting_service.shape[0]} canvas"
            )
            continue

        finder.set_image(frame)
        finder.find_regions(target_color)
        if painting_service.paint_largest(finder, brush_color):
            n_painted += 1
        n_frames += 1

    if painting_service is None:
        raise ValueError("No frames to paint")

    logger.info(f"Painted the largest region in {n_painted}/{n_frames} frame(s)")
    return painting_service.painting
