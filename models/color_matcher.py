from __future__ import annotations
from dataclasses import dataclass
import numpy as np

from models.color import Color


@dataclass(frozen=True)
class ColorMatcher:
    """
    Decides whether two colors are "close enough".

    Each of red / green / blue must differ by strictly less than
    ``threshold``.  Channels are checked independently (no distance
    metric) and alpha is ignored.
    """
    threshold: float = 20

    def __post_init__(self):
        if self.threshold < 0:
            raise ValueError(f"threshold must be non-negative, got {self.threshold}")

    def matches(self, a: Color, b: Color) -> bool:
        return (
            abs(a.red - b.red) < self.threshold
            and abs(a.green - b.green) < self.threshold
            and abs(a.blue - b.blue) < self.threshold
        )

    def match_mask(self, pixels: np.ndarray, color: Color) -> np.ndarray:
        """
        Same predicate, evaluated for a whole (H, W, 3|4) array.

        Returns
        -------
        mask : np.ndarray  (H, W)  bool
        """
        # int16 so uint8 subtraction cannot wrap around
        rgb = pixels[..., :3].astype(np.int16)
        target = np.array(color.as_rgb(), dtype=np.int16)
        return np.all(np.abs(rgb - target) < self.threshold, axis=-1)
