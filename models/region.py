from __future__ import annotations
from dataclasses import dataclass, field
from functools import cached_property
from typing import Iterator, List, Optional, Tuple
import numpy as np

from models.color import Point


@dataclass(frozen=True)
class Region:
    """
    A finalized, non-empty set of 8-connected points in discovery order.
    Immutable once built by the grower.
    """
    points: Tuple[Point, ...]

    def __post_init__(self):
        if not self.points:
            raise ValueError("A region must contain at least one point")

    @property
    def first_point(self) -> Point:
        return self.points[0]

    @property
    def size(self) -> int:
        return len(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __contains__(self, point: object) -> bool:
        return point in self.point_set

    @cached_property
    def point_set(self) -> frozenset:
        return frozenset(self.points)

    def as_mask(self, height: int, width: int) -> np.ndarray:
        """Boolean (H, W) mask with True on the region's points."""
        mask = np.zeros((height, width), dtype=bool)
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        mask[ys, xs] = True
        return mask


@dataclass
class RegionCollection:
    """
    Regions accepted by one segmentation pass, in discovery order.
    Point sets of any two regions are disjoint.
    """
    regions: List[Region] = field(default_factory=list)

    def append(self, region: Region) -> None:
        self.regions.append(region)

    def count(self) -> int:
        return len(self.regions)

    def largest_region(self) -> Optional[Region]:
        """
        Returns the first region with the maximal number of points,
        or None when nothing was found.  Ties keep the earliest one.
        """
        if not self.regions:
            return None
        largest = self.regions[0]
        for region in self.regions:
            if region.size > largest.size:
                largest = region
        return largest

    def __len__(self) -> int:
        return len(self.regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(self.regions)

    def __getitem__(self, index: int) -> Region:
        return self.regions[index]
