# radar2d/canvas.py
import numpy as np

from .errors import EmptyInputError


def canvas_radius(sweeps):
    """Longest echo length over all sweeps; the canvas is 2*radius square."""
    if not sweeps:
        raise EmptyInputError("No radar sweeps in CSV")
    radius = max(len(s.echo) for s in sweeps)
    if radius <= 0:
        raise EmptyInputError("Radar sweeps have zero length")
    return radius


class PixelBuffer:
    """Row-major RGBA canvas, grey written to RGB, opacity always 255."""
    channels = 4

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas must be non-empty, got {width}x{height}")
        self.pixels = np.zeros((height, width, self.channels), dtype=np.uint8)
        self.pixels[..., 3] = 255

    @property
    def width(self):
        return self.pixels.shape[1]

    @property
    def height(self):
        return self.pixels.shape[0]

    def put_many(self, xs, ys, values):
        xs, ys = np.asarray(xs), np.asarray(ys)
        if xs.size:
            assert xs.min() >= 0 and xs.max() < self.width, "x outside canvas"
            assert ys.min() >= 0 and ys.max() < self.height, "y outside canvas"
        self.pixels[ys, xs, :3] = np.asarray(values, dtype=np.uint8)[:, None]
