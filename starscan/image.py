"""Grayscale image buffers, rectangles and a point-marking image view."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Protocol

import numpy as np

MAX_POINT = 100_000
DEFAULT_IMAGE_SIZE = 4096 * 8
VIEW_WIDTH = 640
VIEW_HEIGHT = 480
WHITE = 255
COLOR_RED = (0xFF, 0x00, 0x00)
COLOR_GREEN = (0x00, 0xFF, 0x00)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle; ``right`` and ``bottom`` are exclusive."""

    left: int
    top: int
    right: int
    bottom: int

    @classmethod
    def from_point(cls, x: int, y: int) -> Rect:
        """An empty rectangle located at a single point."""
        return cls(x, y, x, y)

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def offset(self, dx: int, dy: int) -> Rect:
        """Return the rectangle moved by ``(dx, dy)``."""
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)

    def inflate(self, dx: int, dy: int) -> Rect:
        """Return the rectangle grown by ``dx`` on each side horizontally and ``dy`` vertically."""
        return Rect(self.left - dx, self.top - dy, self.right + dx, self.bottom + dy)


def _pixel_value(value: int) -> int:
    value = int(value)
    if not 0 <= value <= 255:
        raise ValueError(f"pixel value {value} is outside 0..255")
    return value


class GrayImage:
    """An 8-bit grayscale image stored row-major as a ``(height, width)`` array."""

    def __init__(self, width: int, height: int, fill: int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.pixels = np.full((height, width), _pixel_value(fill), dtype=np.uint8)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def bounds(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def fill(self, value: int) -> None:
        """Set every pixel to ``value``."""
        self.pixels.fill(_pixel_value(value))

    def region(self, rect: Rect) -> np.ndarray:
        """Return a writable view of the pixels inside ``rect``."""
        if not (
            0 <= rect.left <= rect.right <= self.width
            and 0 <= rect.top <= rect.bottom <= self.height
        ):
            raise ValueError(f"{rect} does not lie within a {self.width}x{self.height} image")
        return self.pixels[rect.top:rect.bottom, rect.left:rect.right]


class _Parent(Protocol):
    def call_func(self, n: int) -> None: ...


class ImageView:
    """A white image canvas with a list of marked points and a fixed-size viewport."""

    _notify_counter = itertools.count(MAX_POINT)

    def __init__(
        self,
        parent: _Parent | None = None,
        width: int = DEFAULT_IMAGE_SIZE,
        height: int = DEFAULT_IMAGE_SIZE,
        view_size: tuple[int, int] = (VIEW_WIDTH, VIEW_HEIGHT),
    ) -> None:
        self.parent = parent
        self.view_size = view_size
        self._size = (width, height)
        self.points: list[tuple[int, int]] = []
        self.image = GrayImage(width, height, fill=WHITE)

    def reset(self) -> None:
        """Replace the image with a fresh all-white one of the same size."""
        self.image = GrayImage(*self._size, fill=WHITE)

    def add_point(self, x: int, y: int) -> bool:
        """Mark a point; returns False once MAX_POINT points are held."""
        if len(self.points) >= MAX_POINT:
            return False
        self.points.append((x, y))
        return True

    def clear_points(self) -> None:
        self.points.clear()

    def render(self) -> np.ndarray:
        """Draw the visible part of the image as RGB with red markers at the points."""
        view_w, view_h = self.view_size
        w = min(view_w, self.image.width)
        h = min(view_h, self.image.height)
        canvas = np.repeat(self.image.pixels[:h, :w, np.newaxis], 3, axis=2)
        for x, y in self.points:
            box = Rect.from_point(x, y).inflate(1, 1)
            left, top = max(box.left, 0), max(box.top, 0)
            right, bottom = min(box.right + 1, w), min(box.bottom + 1, h)
            if left < right and top < bottom:
                canvas[top:bottom, left:right] = COLOR_RED
        return canvas

    def notify_parent(self) -> int:
        """Pass the next value of a shared counter, starting at MAX_POINT, to the parent."""
        if self.parent is None:
            raise RuntimeError("this view has no parent to notify")
        n = next(ImageView._notify_counter)
        self.parent.call_func(n)
        return n