"""Immutable pixel grid: the decoded raster handed to the ranker.

Cells are packed 0xAARRGGBB uint32 values in a read-only numpy array of
shape (height, width). Images without an alpha band get alpha 0xFF.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np
from PIL import Image

from swatch_tool.core.palette import pack
from swatch_tool.core.types import InvalidInput


class PixelGrid:
    """Width x height grid of packed colours. Read-only once built."""

    __slots__ = ('_pixels',)

    def __init__(self, pixels: np.ndarray):
        arr = np.asarray(pixels)
        if arr.ndim != 2:
            raise InvalidInput(f'Pixel grid must be 2-dimensional, got shape {arr.shape}')
        if arr.size and (arr.min() < 0 or arr.max() > 0xFFFFFFFF):
            raise InvalidInput('Pixel values must fit in 32 bits')
        arr = arr.astype(np.uint32, copy=True)
        arr.flags.writeable = False
        self._pixels = arr

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def size(self) -> int:
        return int(self._pixels.size)

    @property
    def pixels(self) -> np.ndarray:
        """Read-only (height, width) uint32 view."""
        return self._pixels

    def get(self, x: int, y: int) -> int:
        """Packed colour at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f'({x}, {y}) outside {self.width}x{self.height} grid')
        return int(self._pixels[y, x])

    def __repr__(self) -> str:
        return f'PixelGrid({self.width}x{self.height})'

    @classmethod
    def empty(cls, width: int = 0, height: int = 0) -> PixelGrid:
        return cls(np.zeros((height, width), dtype=np.uint32))

    @classmethod
    def from_image(cls, image: Image.Image) -> PixelGrid:
        """Decode a Pillow image of any mode into packed ARGB cells."""
        if not isinstance(image, Image.Image):
            raise InvalidInput(f'Expected a PIL image, got {type(image).__name__}')
        arr = np.array(image.convert('RGBA'), dtype=np.uint32)
        if arr.size == 0:
            return cls.empty(image.width, image.height)
        packed = (arr[..., 3] << 24) | (arr[..., 0] << 16) | (arr[..., 1] << 8) | arr[..., 2]
        return cls(packed)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int | Iterable[int]]]) -> PixelGrid:
        """Build from nested rows of packed ints or (r, g, b[, a]) tuples.

        All rows must share one length.
        """
        if rows is None:
            raise InvalidInput('rows is None')
        packed_rows = []
        for y, row in enumerate(rows):
            packed_rows.append([_pack_cell(cell, y) for cell in row])
        widths = {len(r) for r in packed_rows}
        if len(widths) > 1:
            raise InvalidInput(f'Ragged rows: widths {sorted(widths)}')
        if not packed_rows or not packed_rows[0]:
            return cls.empty(0, len(packed_rows))
        return cls(np.array(packed_rows, dtype=np.int64))


def _pack_cell(cell, y: int) -> int:
    if isinstance(cell, (int, np.integer)):
        if not 0 <= cell <= 0xFFFFFFFF:
            raise InvalidInput(f'Row {y}: pixel value out of 32-bit range: {cell}')
        return int(cell)
    if isinstance(cell, (str, bytes)):
        raise InvalidInput(f'Row {y}: unreadable pixel {cell!r}')
    try:
        channels = [int(c) for c in cell]
    except (TypeError, ValueError) as e:
        raise InvalidInput(f'Row {y}: unreadable pixel {cell!r}') from e
    if len(channels) not in (3, 4):
        raise InvalidInput(f'Row {y}: pixel needs 3 or 4 channels, got {len(channels)}')
    try:
        return pack(*channels)
    except ValueError as e:
        raise InvalidInput(f'Row {y}: {e}') from e
