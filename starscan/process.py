"""Threshold statistics over grayscale images."""

from __future__ import annotations

import math

import numpy as np

from starscan.image import GrayImage, Rect

DEFAULT_THRESHOLD = 100


def count_above(image: GrayImage, threshold: int = DEFAULT_THRESHOLD) -> int:
    """Count the pixels strictly brighter than ``threshold``."""
    return int(np.count_nonzero(image.pixels > threshold))


def count_above_in_rect(image: GrayImage, threshold: int, rect: Rect) -> int:
    """Count the pixels inside ``rect`` strictly brighter than ``threshold``."""
    return int(np.count_nonzero(image.region(rect) > threshold))


def centroid(image: GrayImage, threshold: int) -> tuple[float, float]:
    """Mean ``(x, y)`` of pixels brighter than ``threshold``; NaNs when there are none."""
    ys, xs = np.nonzero(image.pixels > threshold)
    if xs.size == 0:
        return math.nan, math.nan
    return float(xs.sum()) / xs.size, float(ys.sum()) / ys.size