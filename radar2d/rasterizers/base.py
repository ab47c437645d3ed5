# radar2d/rasterizers/base.py
class Rasterizer:
    def rasterize(self, uv, values, out_hw):
        """
        uv: (M,2) integer pixels, possibly outside the canvas
        values: dict of arrays with same length M (e.g. {'v':...})
        out_hw: (H,W)
        Returns: PixelBuffer of size (H,W)
        """
        raise NotImplementedError
