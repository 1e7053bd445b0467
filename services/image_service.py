from pathlib import Path
from typing import Union, Iterator
import numpy as np
from models.color import Color, Point
from models.image import Image
from repositories.image_repository import ImageRepository
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class ImageService:
    """I/O and pixel helpers.  No segmentation logic."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: str | Path) -> Image:
        """Load a single image from disk into an Image object."""
        return self.image_repository.load(path)

    def stream_frames(self, source: Union[str, Path]) -> Iterator[Image]:
        """
        Yield frames lazily from a video file or an image folder.
        """
        return self.image_repository.iter_frames(source)

    def save(self, image: Image) -> None:
        """
        Business-level method to save the image to its path.
        """
        self.image_repository.save(image)

    def save_as(self, image: Image, path: Union[str, Path]) -> None:
        image.path = Path(path)
        self.save(image)

    def copy(self, img: Image) -> Image:
        return self.image_repository.copy(img)

    def pick_color(self, img: Image, x: int, y: int) -> Color:
        """
        Color under pixel (x, y) - what a click on the displayed frame selects.

        Raises:
            IndexError: if (x, y) is outside the image.
        """
        return self.image_repository.get_pixel(img, Point(x, y))

    def get_image_dimensions(self, img: Image):
        """(height, width) of the image."""
        return self.image_repository.retrieve_image_dimensions(img)
