"""Shared types for geomedian: PixelGrid, Point, Technique, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NamedTuple

import numpy as np
from PIL import Image

from geomedian.core.colour import MAX_16, RGBA, premultiply_array

# Pillow modes holding one wide integer channel (16-bit grey PNGs open as these)
WIDE_GREY_MODES = {'I', 'I;16', 'I;16B', 'I;16L', 'I;16N'}


class Point(NamedTuple):
    """Integer coordinates in a grid's own coordinate space."""

    x: int
    y: int


class PixelGrid:
    """Read-only view over an image, placed at an arbitrary origin.

    The image's top-left pixel sits at `origin`. All coordinates passed to
    `colour_at` / `rgba_at` are grid coordinates, not image-local ones.

    Two views of every pixel are kept:
      - samples (`colour_at`, `to_array`): 16-bit alpha-premultiplied RGBA,
        used for exact comparisons. 16-bit grey images keep their full
        value in each colour channel.
      - display RGBA (`rgba_at`, `to_image`): straight 8-bit RGBA, used for
        drawing and reporting. Wide grey values keep their high byte.

    Raises ValueError for a zero-area image: the median core assumes a
    non-empty grid and never checks again.
    """

    def __init__(self, image: Image.Image, origin: tuple[int, int] = (0, 0)):
        if image.width < 1 or image.height < 1:
            raise ValueError(f'empty image: {image.width}x{image.height}')

        if image.mode in WIDE_GREY_MODES:
            grey = np.asarray(image).astype(np.int64)
            samples = np.stack([grey, grey, grey, np.full_like(grey, MAX_16)], axis=-1)
            high_byte = np.clip(grey >> 8, 0, 255).astype(np.uint8)
            self._image = Image.fromarray(high_byte).convert('RGBA')
        else:
            self._image = image.convert('RGBA')
            samples = premultiply_array(np.asarray(self._image))

        self._samples = samples
        self._samples.flags.writeable = False
        self._pixels = np.array(self._image)
        self._pixels.flags.writeable = False
        self.origin = (int(origin[0]), int(origin[1]))

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """(min_x, min_y, max_x, max_y), max exclusive."""
        x0, y0 = self.origin
        return (x0, y0, x0 + self.width, y0 + self.height)

    def contains(self, x: int, y: int) -> bool:
        min_x, min_y, max_x, max_y = self.bounds
        return min_x <= x < max_x and min_y <= y < max_y

    def _local(self, x: int, y: int) -> tuple[int, int]:
        if not self.contains(x, y):
            raise IndexError(f'({x}, {y}) outside grid bounds {self.bounds}')
        return (y - self.origin[1], x - self.origin[0])

    def colour_at(self, x: int, y: int) -> RGBA:
        """Comparison sample at grid coordinates (x, y)."""
        px = self._samples[self._local(x, y)]
        return (int(px[0]), int(px[1]), int(px[2]), int(px[3]))

    def rgba_at(self, x: int, y: int) -> RGBA:
        """Straight 8-bit RGBA at grid coordinates (x, y)."""
        px = self._pixels[self._local(x, y)]
        return (int(px[0]), int(px[1]), int(px[2]), int(px[3]))

    def to_array(self) -> np.ndarray:
        """H x W x 4 int64 array of comparison samples, read-only."""
        return self._samples

    def to_image(self) -> Image.Image:
        """A fresh straight RGBA copy of the image."""
        return self._image.copy()


class Technique:
    """A self-registering geomedian subcommand.

    Usage in a technique module:

        technique = Technique(name='point', help='Compute the median point')

        @technique.run
        def run(grid, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, grid: PixelGrid, report: Report, args: Any) -> None:
        """Execute the technique's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Technique {self.name} has no run function')
        self._run_fn(grid, report, args)


@dataclass
class Report:
    """Accumulates results from techniques for text/JSON output."""

    image_path: str = ''
    image_width: int = 0
    image_height: int = 0
    origin: tuple[int, int] = (0, 0)
    results: dict[str, dict[str, Any]] = field(default_factory=dict)

    def add(self, technique_name: str, data: dict[str, Any]) -> None:
        """Add (or replace) the results of a technique."""
        self.results[technique_name] = data

    @property
    def errors(self) -> dict[str, str]:
        """Technique name -> error message, for every technique that failed."""
        return {name: data['error'] for name, data in self.results.items() if 'error' in data}
