# radar2d/pipeline.py
from dataclasses import dataclass
from pathlib import Path

from .canvas import canvas_radius
from .io_sweeps import read_sweeps
from .writer import write_png


@dataclass
class RenderResult:
    sweeps: int
    radius: int
    width: int
    height: int
    samples: int
    out_path: Path


class Radar2D:
    def __init__(self, proj, rast, enc, progress=False):
        self.proj = proj
        self.rast = rast
        self.enc = enc
        self.progress = progress

    def render(self, sweeps):
        radius = canvas_radius(sweeps)
        out_hw = (2 * radius, 2 * radius)
        P = self.proj.project(sweeps, out_hw)
        vals = self.enc.encode(P["v"])
        return self.rast.rasterize(P["uv"], {"v": vals}, out_hw)

    def process_one(self, csv_path, out_path):
        sweeps = read_sweeps(csv_path, progress=self.progress)
        buf = self.render(sweeps)
        out = write_png(out_path, buf)
        return RenderResult(
            sweeps=len(sweeps),
            radius=buf.width // 2,
            width=buf.width,
            height=buf.height,
            samples=sum(len(s.echo) for s in sweeps),
            out_path=out,
        )
