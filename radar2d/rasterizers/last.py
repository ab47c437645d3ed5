# radar2d/rasterizers/last.py
import numpy as np
from .base import Rasterizer
from ..registry import register
from ..canvas import PixelBuffer

@register("rast", "last")
class LastWrite(Rasterizer):
    def rasterize(self, uv, values, out_hw):
        H, W = out_hw
        buf = PixelBuffer(W, H)
        v = np.asarray(values["v"], dtype=np.uint8)
        u, w = uv[:, 0], uv[:, 1]
        m = (u >= 0) & (u < W) & (w >= 0) & (w < H)
        u, w, v = u[m], w[m], v[m]
        # keep only the last sample per pixel; fancy assignment order is unspecified
        idx = w * W + u
        _, first_rev = np.unique(idx[::-1], return_index=True)
        keep = len(idx) - 1 - first_rev
        buf.put_many(u[keep], w[keep], v[keep])
        return buf
