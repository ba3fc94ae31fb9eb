from pathlib import Path
from typing import Union

from ..models.raster import Raster
from ..repositories.raster_repository import RasterRepository


class RasterService:
    """I/O helpers.  No transform logic, no threading."""

    def __init__(self):
        self.raster_repository = RasterRepository()

    def create_output_for(self, source: Raster, path: Union[str, Path] = None) -> Raster:
        """
        Blank raster with the same dimensions as *source*. Created once,
        before any worker starts.
        """
        width, height = self.get_raster_dimensions(source)
        return self.raster_repository.create_blank(width, height, path)

    def load(self, path: Union[str, Path]) -> Raster:
        """Load a single image from disk into a Raster object."""
        return self.raster_repository.load(path)

    def save(self, raster: Raster, path: Union[str, Path] = None, fmt: str | None = None) -> Path:
        """
        Business-level method to save the raster to *path* (or its own path).
        """
        return self.raster_repository.save(raster, path, fmt)

    def get_raster_dimensions(self, raster: Raster):
        return self.raster_repository.retrieve_raster_dimensions(raster)
