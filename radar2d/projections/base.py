# radar2d/projections/base.py
class Projection:
    def project(self, sweeps, out_hw):
        """
        sweeps: sequence of SweepRecord, in acquisition order
        out_hw: (H,W) canvas size; the sweep origin is the canvas center
        Returns: dict with keys:
          'uv': (M,2) integer pixel coords, may fall outside the canvas
          'v':  (M,) uint8 echo intensity
        Points are ordered by sweep, then by range index.
        """
        raise NotImplementedError
