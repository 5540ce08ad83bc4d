# starscan

A small workbench for 8-bit grayscale images. It fills an image with
scattered random points or a noisy square patch, then measures it: how many
pixels lie above a threshold, either in the whole image or inside a
rectangle, and where the bright pixels' centroid is.

## Install

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

`starscan` takes one or more actions and runs them in order on the same
image:

```
starscan --size 1024 --seed 1 --tile 512 pattern count centroid thread
```

Actions:

- `scatter` – blacks out the image, writes 100 000 random pixel values at
  random positions, and records every pixel above 100 as a marked point on
  the result view.
- `pattern` – blacks out the image and fills the square from (100, 100) to
  (200, 200) with random values.
- `count` – prints the number of pixels above 100, a tab, and the time taken,
  e.g. `5081	0ms`.
- `centroid` – prints the mean x and y of the pixels above 128, separated by
  a tab (`nan	nan` when there are none).
- `thread` – counts the non-zero pixels in the top-left tile of side `--tile`
  on a worker thread, then prints `th0 : <count>` and `total : <ms>`.
- `notify` – prints the next value of a counter that starts at 100000.

Options:

- `--size` – side length of the square image (default 32768). At the default
  each image takes 1 GiB of memory, and two are made, so a smaller size is
  usually wanted.
- `--seed` – seed for the random generator.
- `--tile` – tile side used by `thread` (default 16360). The tile must fit in
  the image; otherwise `starscan` prints an error and exits with status 1.

## Library

```python
from starscan.image import GrayImage, Rect
from starscan.process import count_above, count_above_in_rect, centroid

image = GrayImage(640, 480)
image.region(Rect(100, 100, 200, 200))[:] = 200

print(count_above(image, 100))                                # 10000
print(count_above_in_rect(image, 100, Rect(0, 0, 150, 150)))  # 2500
print(centroid(image, 0x80))                                  # (149.5, 149.5)
```

### `starscan.image`

- `Rect(left, top, right, bottom)` – a frozen rectangle; `right` and `bottom`
  are excluded. `width` and `height` are properties; `offset(dx, dy)` and
  `inflate(dx, dy)` return new rectangles; `Rect.from_point(x, y)` makes an
  empty one at a point.
- `GrayImage(width, height, fill=0)` – pixels in a `(height, width)` `uint8`
  numpy array at `.pixels`. `fill(value)` sets every pixel; `region(rect)`
  returns a writable view of a rectangle and raises `ValueError` if it does
  not lie within the image. Pixel values outside 0..255 raise `ValueError`.
- `ImageView(parent=None, width=32768, height=32768, view_size=(640, 480))` –
  an all-white image plus a list of marked points. `add_point(x, y)` returns
  `False` once 100 000 points are held; `clear_points()` empties the list;
  `reset()` replaces the image with a fresh white one. `render()` returns an
  RGB array of the visible `view_size` part of the image with each point
  marked by a 3×3 red square. `notify_parent()` passes the next value of a
  counter shared by all views, starting at 100000, to the parent's
  `call_func` and returns it; it raises `RuntimeError` without a parent.

### `starscan.process`

- `count_above(image, threshold=100)` – pixels strictly above `threshold`.
- `count_above_in_rect(image, threshold, rect)` – the same inside `rect`.
- `centroid(image, threshold)` – mean `(x, y)` of pixels above `threshold`,
  or two NaNs when there are none.

### `starscan.app`

`Workbench(size=32768, *, seed=None, out=None, tile_size=16360)` holds a
source view (`image_view`) and a result view (`result_view`). Its methods
`scatter_random()`, `make_pattern()`, `count_stars()`, `print_centroid()`
and `run_threaded()` are the actions above, and `process_region(rect)`
counts the non-zero pixels inside a rectangle. Output lines go to `out`, or
to standard output when it is `None`.

## What it does not do

There is no window or on-screen display: `ImageView.render()` only returns
the picture as an array, and images are not loaded from or saved to files.