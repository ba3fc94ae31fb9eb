from pathlib import Path
from typing import Union
import logging
import numpy as np
import cv2
from PIL import Image as PILImage

from .. import config
from ..models import color_codec
from ..models.raster import Raster

logger = logging.getLogger(__name__)

# Pillow format names keyed by file suffix.
FORMATS_BY_SUFFIX = {
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".png": "PNG",
    ".bmp": "BMP",
    ".tif": "TIFF",
    ".tiff": "TIFF",
    ".webp": "WEBP",
}


class RasterRepository:
    """
    Handles file I/O for Raster entities. The only place that touches disk.
    """

    @staticmethod
    def create_raster(pixels: np.ndarray, path: Union[str, Path] = None) -> Raster:
        if path is None:
            return Raster(pixels)
        return Raster(pixels=pixels, path=Path(path))

    @staticmethod
    def create_blank(width: int, height: int, path: Union[str, Path] = None) -> Raster:
        pixels = np.zeros((height, width), dtype=np.uint32)
        return RasterRepository.create_raster(pixels, path)

    def retrieve_raster_dimensions(self, raster: Raster):
        return raster.width, raster.height

    @staticmethod
    def load(path: Union[str, Path]) -> Raster:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Image not found: {path}")

        # IMREAD_COLOR always yields 3 channels (gray expanded, alpha dropped).
        # EXIF orientation is ignored so the output keeps the stored dimensions.
        arr_bgr = cv2.imread(str(path), cv2.IMREAD_COLOR | cv2.IMREAD_IGNORE_ORIENTATION)
        if arr_bgr is None:
            raise FileNotFoundError(f"Image unreadable or unsupported format: {path}")

        arr_rgb = np.ascontiguousarray(arr_bgr[:, :, ::-1])
        logger.debug("Loaded %s (%dx%d)", path, arr_rgb.shape[1], arr_rgb.shape[0])
        return Raster(pixels=color_codec.pack_array(arr_rgb), path=path)

    @staticmethod
    def resolve_format(path: Path, fmt: str | None = None) -> str:
        if fmt:
            return fmt.upper()
        try:
            return FORMATS_BY_SUFFIX[path.suffix.lower()]
        except KeyError:
            raise OSError(f"Cannot infer image format from file name: {path}") from None

    @staticmethod
    def save(raster: Raster, path: Union[str, Path] = None, fmt: str | None = None) -> Path:
        target = Path(path) if path is not None else raster.path
        if target is None:
            raise OSError("Raster has no destination path")
        pil_format = RasterRepository.resolve_format(target, fmt)

        rgb = color_codec.unpack_array(raster.pixels)
        options = {"quality": config.JPEG_QUALITY} if pil_format == "JPEG" else {}
        try:
            PILImage.fromarray(rgb).save(target, format=pil_format, **options)
        except (KeyError, ValueError) as err:
            # Pillow reports unknown format names as KeyError / ValueError.
            raise OSError(f"Cannot write {target} as {pil_format}: {err}") from err

        logger.debug("Saved %s as %s", target, pil_format)
        return target
