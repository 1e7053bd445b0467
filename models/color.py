from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Color:
    """
    Value-object holding one 8-bit RGB(A) pixel value.
    Alpha is carried along but never compared.
    """
    red: int
    green: int
    blue: int
    alpha: int = 255

    @classmethod
    def from_pixel(cls, pixel) -> "Color":
        """Build a Color from an RGB or RGBA array row."""
        alpha = int(pixel[3]) if len(pixel) > 3 else 255
        return cls(int(pixel[0]), int(pixel[1]), int(pixel[2]), alpha)

    @classmethod
    def parse(cls, text: str) -> "Color":
        """'R,G,B' → Color.  Used for env-vars and CLI flags."""
        parts = [p.strip() for p in text.split(",")]
        if len(parts) != 3:
            raise ValueError(f"Expected 'R,G,B', got {text!r}")
        values = [int(p) for p in parts]
        if any(v < 0 or v > 255 for v in values):
            raise ValueError(f"Color channels must be in [0, 255]: {text!r}")
        return cls(*values)

    def as_rgb(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue


@dataclass(frozen=True)
class Point:
    x: int  # column
    y: int  # row
