import os
import sys
import logging
import argparse
from pathlib import Path

import numpy as np
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from models.color import Color
from pipeline.paint_frames import paint_frames
from pipeline.recolor_regions import recolor_regions
from services.image_service import ImageService
from services.region_finder_service import RegionFinderService

logger = logging.getLogger("region-finder")

LOG_FORMAT = '%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s'


def _parse_point(text: str):
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected 'X,Y', got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected integers in 'X,Y', got {text!r}")


def _parse_color(text: str) -> Color:
    try:
        return Color.parse(text)
    except ValueError as err:
        raise argparse.ArgumentTypeError(str(err))


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="region-finder",
        description="Find regions of a target color in an image and recolor them.",
    )
    ap.add_argument("source", help="image file, image folder or video file")
    target = ap.add_mutually_exclusive_group(required=True)
    target.add_argument("--target", type=_parse_color, help="target color as R,G,B")
    target.add_argument("--pick", type=_parse_point,
                        help="take the target color from pixel X,Y of the first frame")
    ap.add_argument("--threshold", type=float, default=None,
                    help="per-channel match threshold (env COLOR_MATCH_THRESHOLD, default 20)")
    ap.add_argument("--min-region", type=int, default=None,
                    help="smallest region to keep (env MIN_REGION_SIZE, default 50)")
    ap.add_argument("--seed", type=int, default=None,
                    help="seed for the recolor palette (env RANDOM_SEED)")
    ap.add_argument("--recolored-out", default=None, help="where to save the recolored first frame")
    ap.add_argument("--painting-out", default=None, help="where to save the painting over all frames")
    ap.add_argument("--brush", type=_parse_color, default=None,
                    help="painting color as R,G,B (env BRUSH_COLOR, default 0,0,255)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt='%H:%M:%S'
    )

    seed = args.seed
    if seed is None and os.getenv("RANDOM_SEED"):
        seed = int(os.getenv("RANDOM_SEED"))
    rng = np.random.default_rng(seed)
    brush = args.brush or Color.parse(os.getenv("BRUSH_COLOR", "0,0,255"))

    image_service = ImageService()
    try:
        frames = iter(image_service.stream_frames(args.source))
        first = next(frames, None)
    except (FileNotFoundError, NotADirectoryError, TimeoutError) as err:
        logger.error(f"Cannot read {args.source}: {err}")
        return 1
    if first is None:
        logger.error(f"No frames found in {args.source}")
        return 1

    if args.pick is not None:
        try:
            target_color = image_service.pick_color(first, *args.pick)
        except IndexError as err:
            logger.error(str(err))
            return 1
    else:
        target_color = args.target
    logger.info(f"Target color: {target_color.as_rgb()}")

    finder = RegionFinderService(threshold=args.threshold, min_region=args.min_region)
    try:
        regions, _ = recolor_regions(
            first, target_color,
            finder=finder,
            image_service=image_service,
            rng=rng,
            out_path=args.recolored_out,
        )
        largest = regions.largest_region()
        logger.info(f"{regions.count()} region(s); largest has {largest.size if largest else 0} px")

        if args.painting_out:
            painting = paint_frames(_chain(first, frames), target_color, finder=finder, brush_color=brush)
            image_service.save_as(painting, Path(args.painting_out))
            logger.info(f"Painting saved to {args.painting_out}")
    except (OSError, ValueError) as err:
        # unwritable destination or a format Pillow cannot encode
        logger.error(f"Cannot produce output: {err}")
        return 1

    return 0


def _chain(first, rest):
    yield first
    yield from rest


if __name__ == "__main__":
    sys.exit(main())
