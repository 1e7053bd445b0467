# services/region_grower.py
"""
Breadth-first flood fill over a whole image.

• Every pixel matching the target color ends up in at most one region.
• Regions are 8-connected (Moore neighbourhood).
• Regions smaller than ``min_region`` are dropped, but their pixels stay
  visited and can never seed or join another region.
"""
from __future__ import annotations

from collections import deque
from typing import List, Optional
import logging

import numpy as np

from models.color import Color, Point
from models.color_matcher import ColorMatcher
from models.errors import InvalidStateError
from models.image import Image
from models.region import Region, RegionCollection

logger = logging.getLogger(__name__)

# (dx, dy) of the 8 Moore neighbours
NEIGHBOUR_OFFSETS = [
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if (dx, dy) != (0, 0)
]


class RegionGrower:
    def __init__(self, color_matcher: Optional[ColorMatcher] = None, min_region: int = 50):
        if min_region < 1:
            raise ValueError(f"min_region must be >= 1, got {min_region}")
        self.color_matcher = color_matcher or ColorMatcher()
        self.min_region = min_region

    # ---------- public API ----------
    def find_regions(self, image: Optional[Image], target_color: Color) -> RegionCollection:
        """
        Partition the pixels matching ``target_color`` into maximal regions.

        Pixels are scanned row by row; each unvisited matching pixel seeds a
        new region that is grown with a FIFO frontier.

        Raises:
            InvalidStateError: if no image is given.
        """
        if image is None:
            raise InvalidStateError("No image set: cannot find regions")

        height, width = image.pixels.shape[:2]
        collection = RegionCollection()
        if height == 0 or width == 0:
            return collection

        matching = self.color_matcher.match_mask(image.pixels, target_color)
        visited = np.zeros((height, width), dtype=bool)
        discarded = 0

        # flat indices of matching pixels, row-major
        for flat in np.flatnonzero(matching):
            y, x = divmod(int(flat), width)
            if visited[y, x]:
                continue
            points = self._grow(x, y, matching, visited)
            if len(points) >= self.min_region:
                collection.append(Region(tuple(points)))
            else:
                discarded += 1
                logger.debug(f"Discarded region of {len(points)} px seeded at ({x}, {y})")

        logger.info(
            f"Found {collection.count()} region(s) for {target_color.as_rgb()} "
            f"({discarded} under {self.min_region} px discarded)"
        )
        return collection

    # ---------- private helpers ----------
    @staticmethod
    def _grow(x: int, y: int, matching: np.ndarray, visited: np.ndarray) -> List[Point]:
        height, width = matching.shape
        visited[y, x] = True
        points = [Point(x, y)]
        frontier = deque([(x, y)])

        while frontier:
            cx, cy = frontier.popleft()
            for dx, dy in NEIGHBOUR_OFFSETS:
                nx, ny = cx + dx, cy + dy
                # off-grid neighbours are skipped, never clamped
                if nx < 0 or ny < 0 or nx >= width or ny >= height:
                    continue
                if visited[ny, nx] or not matching[ny, nx]:
                    continue
                visited[ny, nx] = True
                points.append(Point(nx, ny))
                frontier.append((nx, ny))

        return points
