# radar2d/projections/polar.py
import numpy as np
from .base import Projection
from ..registry import register
from ..io_sweeps import ANGLE_UNITS

def round_half_away(a):
    # C lround: ties go away from zero, not to even
    return (np.sign(a) * np.floor(np.abs(a) + 0.5)).astype(np.int64)

@register("proj", "polar")
class Polar(Projection):
    def project(self, sweeps, out_hw):
        H, W = out_hw
        cx, cy = W // 2, H // 2
        lens = np.array([len(s.echo) for s in sweeps], dtype=np.int64)
        ang = np.array([s.angle for s in sweeps], dtype=np.float64)
        ang = ang / ANGLE_UNITS * (2 * np.pi)
        cos_a = np.repeat(np.cos(ang), lens)
        sin_a = np.repeat(np.sin(ang), lens)
        # range index restarts at 0 for every sweep
        r = np.arange(lens.sum()) - np.repeat(np.cumsum(lens) - lens, lens)
        u = round_half_away(cx + r * cos_a)
        v = round_half_away(cy + r * sin_a)
        vals = np.fromiter((e for s in sweeps for e in s.echo), dtype=np.uint8, count=int(lens.sum()))
        return {"uv": np.stack([u, v], 1), "v": vals}
