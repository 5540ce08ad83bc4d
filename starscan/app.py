"""Workbench driving image generation and analysis, with a command-line entry point."""

from __future__ import annotations

import argparse
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from typing import TextIO

import numpy as np

from starscan.image import DEFAULT_IMAGE_SIZE, MAX_POINT, ImageView, Rect
from starscan.process import centroid, count_above, count_above_in_rect

STAR_THRESHOLD = 100
CENTROID_THRESHOLD = 0x80
PATTERN_RECT = Rect(100, 100, 200, 200)
THREAD_TILE_SIZE = 4090 * 4


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _quadrants(tile: int) -> list[Rect]:
    base = Rect(0, 0, tile, tile)
    return [base.offset(tile * (k % 2), tile * (k // 2)) for k in range(4)]


class Workbench:
    """A source image view and a result view, with the operations run on them."""

    def __init__(
        self,
        size: int = DEFAULT_IMAGE_SIZE,
        *,
        seed: int | None = None,
        out: TextIO | None = None,
        tile_size: int = THREAD_TILE_SIZE,
    ) -> None:
        self.rng = np.random.default_rng(seed)
        self.out = out
        self.tile_size = tile_size
        self.image_view = ImageView(self, size, size)
        self.result_view = ImageView(self, size, size)

    @property
    def image(self):
        return self.image_view.image

    def _emit(self, line: str) -> None:
        print(line, file=self.out if self.out is not None else sys.stdout)

    def call_func(self, n: int) -> None:
        self._emit(str(n))

    def scatter_random(self) -> int:
        """Scatter random pixels on black and record bright ones as result points."""
        img = self.image
        img.fill(0)
        xs = self.rng.integers(0, img.width, MAX_POINT)
        ys = self.rng.integers(0, img.height, MAX_POINT)
        img.pixels[ys, xs] = self.rng.integers(0, 0xFF, MAX_POINT, dtype=np.uint8)

        self.result_view.clear_points()
        for y, x in np.argwhere(img.pixels > STAR_THRESHOLD):
            if not self.result_view.add_point(int(x), int(y)):
                break
        return len(self.result_view.points)

    def count_stars(self) -> int:
        """Count bright pixels and report the count with the time taken."""
        start = time.perf_counter()
        n = count_above(self.image, STAR_THRESHOLD)
        self._emit(f"{n}\t{_elapsed_ms(start)}ms")
        return n

    def make_pattern(self) -> Rect:
        """Black out the image and fill a fixed square with random values."""
        self.image.fill(0)
        region = self.image.region(PATTERN_RECT)
        region[...] = self.rng.integers(0, 0xFF, region.shape, dtype=np.uint8)
        return PATTERN_RECT

    def print_centroid(self) -> tuple[float, float]:
        cx, cy = centroid(self.image, CENTROID_THRESHOLD)
        self._emit(f"{cx:g}\t{cy:g}")
        return cx, cy

    def run_threaded(self) -> int:
        """Process the first quadrant tile on a worker thread and report timings."""
        start = time.perf_counter()
        tiles = _quadrants(self.tile_size)
        with ThreadPoolExecutor(max_workers=1) as pool:
            n = pool.submit(self.process_region, tiles[0]).result()
        self._emit(f"th0 : {n}")
        self._emit(f"total : {_elapsed_ms(start)}")
        return n

    def process_region(self, rect: Rect) -> int:
        return count_above_in_rect(self.image, 0, rect)


_ACTIONS = {
    "scatter": Workbench.scatter_random,
    "count": Workbench.count_stars,
    "pattern": Workbench.make_pattern,
    "centroid": Workbench.print_centroid,
    "thread": Workbench.run_threaded,
    "notify": lambda bench: bench.image_view.notify_parent(),
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="starscan", description="Generate grayscale test images and analyse bright pixels."
    )
    parser.add_argument("--size", type=int, default=DEFAULT_IMAGE_SIZE, help="image side length")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--tile", type=int, default=THREAD_TILE_SIZE, help="tile side for 'thread'")
    parser.add_argument("actions", nargs="+", choices=sorted(_ACTIONS), help="actions to run in order")
    args = parser.parse_args(argv)

    try:
        bench = Workbench(args.size, seed=args.seed, tile_size=args.tile)
        for action in args.actions:
            _ACTIONS[action](bench)
    except ValueError as exc:
        print(f"starscan: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())