from pathlib import Path
from typing import Union, Iterable, Iterator, Tuple
import logging
import numpy as np
import cv2
from PIL import Image as PILImage
from dotenv import load_dotenv
import os
import signal
from models.color import Color, Point
from models.image import Image

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

VIDEO_EXTS = {".mp4", ".avi", ".mov", ".mkv"}
NO_ALPHA_EXTS = {".jpg", ".jpeg"}


class ImageRepository:
    """
    Handles file I/O and pixel access for Image entities.
    """
    def __init__(self):
        exts = os.getenv("VALID_IMAGE_EXTENSIONS", ".png,.jpg,.jpeg,.bmp")
        self.VALID_EXTS = {ext.strip().lower() for ext in exts.split(",") if ext.strip()}

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    @staticmethod
    def retrieve_image_dimensions(img: Image) -> Tuple[int, int]:
        return img.pixels.shape[:2]

    @staticmethod
    def get_pixel(img: Image, point: Point) -> Color:
        height, width = img.pixels.shape[:2]
        if not (0 <= point.x < width and 0 <= point.y < height):
            raise IndexError(f"Point ({point.x}, {point.y}) outside {width}x{height} image")
        return Color.from_pixel(img.pixels[point.y, point.x])

    @staticmethod
    def set_pixel(img: Image, point: Point, color: Color) -> None:
        height, width = img.pixels.shape[:2]
        if not (0 <= point.x < width and 0 <= point.y < height):
            raise IndexError(f"Point ({point.x}, {point.y}) outside {width}x{height} image")
        img.pixels[point.y, point.x, :3] = color.as_rgb()

    @staticmethod
    def copy(img: Image) -> Image:
        return Image(pixels=img.pixels.copy(), path=img.path)

    @staticmethod
    def load(path: Union[str, Path], rgb: bool = True, timeout: int = 5) -> Image:
        path = Path(path)

        # ─── timeout wrapper (5 s default) ────────────────────────────────
        def _handler(signum, frame):
            raise TimeoutError(f"cv2.imread timed-out after {timeout}s: {path}")

        signal.signal(signal.SIGALRM, _handler)
        signal.alarm(timeout)
        try:
            arr_bgr = cv2.imread(str(path))
        finally:
            signal.alarm(0)  # always disarm
        # ──────────────────────────────────────────────────────────────────

        if arr_bgr is None:
            raise FileNotFoundError(f"Image not found or unreadable: {path}")

        arr = np.ascontiguousarray(arr_bgr[:, :, ::-1]) if rgb else arr_bgr
        return Image(pixels=arr, path=path)

    @staticmethod
    def save(image: Image) -> None:
        if image.path is None:
            raise ValueError("Cannot save an image without a path")
        path = Path(image.path)
        pil_img = PILImage.fromarray(image.pixels)
        # JPEG has no alpha channel
        if pil_img.mode == "RGBA" and path.suffix.lower() in NO_ALPHA_EXTS:
            pil_img = pil_img.convert("RGB")
        path.parent.mkdir(parents=True, exist_ok=True)
        pil_img.save(path)

    @staticmethod
    def iter_video(path: Union[str, Path]) -> Iterator[Image]:
        """
        Yield RGB frames of a video file one at a time.
        """
        path = Path(path)
        capture = cv2.VideoCapture(str(path))
        if not capture.isOpened():
            raise FileNotFoundError(f"Video not found or unreadable: {path}")
        try:
            index = 0
            while True:
                ok, frame_bgr = capture.read()
                if not ok:
                    break
                logger.debug(f"Read frame {index} from {path.name}")
                yield Image(pixels=np.ascontiguousarray(frame_bgr[:, :, ::-1]))
                index += 1
        finally:
            capture.release()

    def iter_dir(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
        exts: Iterable[str] | None = None,
    ) -> Iterator[Image]:
        """
        Yield Image objects one at a time, in file-name order.
        """
        folder = Path(folder)
        if not folder.is_dir():
            raise NotADirectoryError(folder)

        allowed = {e.lower() for e in (exts or self.VALID_EXTS)}
        pattern = "**/*" if recursive else "*"

        for p in sorted(folder.glob(pattern)):
            if p.suffix.lower() not in allowed:
                logger.debug(f"Skipping due to extension: {p}")
                continue
            if not p.is_file():
                logger.debug(f"Skipping because not file: {p}")
                continue
            try:
                yield self.load(p)
            except (FileNotFoundError, TimeoutError) as err:
                logger.warning(f"Skipping {p.name}: {err}")

    def iter_frames(self, source: Union[str, Path]) -> Iterator[Image]:
        """
        Frames from a video file, an image directory, or a single image.
        """
        source = Path(source)
        if source.is_dir():
            return self.iter_dir(source)
        if source.suffix.lower() in VIDEO_EXTS:
            return self.iter_video(source)
        return iter([self.load(source)])
