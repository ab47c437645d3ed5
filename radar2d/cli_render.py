import argparse
import datetime
import json
import sys
from pathlib import Path

# --- bootstrap when run as a file (no PYTHONPATH needed) ---
try:
    from radar2d.registry import build  # noqa: F401
except ModuleNotFoundError:
    import pathlib
    sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

from radar2d.config import resolve_config
from radar2d.errors import EncodeError, Radar2DError
from radar2d.pipeline import Radar2D
from radar2d.registry import build


def parse_args(argv=None):
    ap = argparse.ArgumentParser(
        prog="radar2d-render",
        description="Render a radar sweep CSV log as a PPI-style greyscale PNG.",
    )
    ap.add_argument("input", help="Sweep CSV (status,scale,range,gain,angle,echo...)")
    ap.add_argument("output", help="PNG to write; missing parent folders are created")
    ap.add_argument("--cfg", default=None, help="Optional YAML file with proj/rast/enc/progress/meta keys")
    ap.add_argument("--proj", default=None, help="Projection (default: polar)")
    ap.add_argument("--rast", default=None, help="Rasterizer (default: last)")
    ap.add_argument("--enc", default=None, help="Sample encoder: grey or invgrey (default: grey)")
    ap.add_argument("--progress", action="store_true", help="Show a progress bar while decoding")
    ap.add_argument("--meta", action="store_true", help="Write <output stem>.meta.json with settings and counts")
    return ap.parse_args(argv)


def write_meta(args, cfg, res):
    meta = {
        "created": datetime.datetime.now().isoformat(timespec="seconds"),
        "input": str(Path(args.input).resolve()),
        "output": str(res.out_path.resolve()),
        "sweeps": res.sweeps,
        "samples": res.samples,
        "radius": res.radius,
        "W": res.width,
        "H": res.height,
        **cfg.to_dict(),
    }
    meta_path = res.out_path.with_name(res.out_path.stem + ".meta.json")
    try:
        meta_path.write_text(json.dumps(meta, indent=2))
    except OSError as e:
        raise EncodeError(meta_path, e.strerror or str(e)) from e
    return meta_path


def run(args):
    cfg = resolve_config(
        args.cfg,
        proj=args.proj,
        rast=args.rast,
        enc=args.enc,
        progress=True if args.progress else None,
        meta=True if args.meta else None,
    )
    pipe = Radar2D(build("proj", cfg.proj), build("rast", cfg.rast), build("enc", cfg.enc),
                   progress=cfg.progress)
    print(f"[INFO] {args.input} → {args.output} | proj={cfg.proj} rast={cfg.rast} enc={cfg.enc}")
    res = pipe.process_one(args.input, args.output)
    if cfg.meta:
        print(f"[INFO] meta → {write_meta(args, cfg, res)}")
    print(f"[DONE] Out: {res.out_path} | sweeps={res.sweeps} samples={res.samples} | HxW={res.height}x{res.width}")
    return 0


def main(argv=None):
    args = parse_args(argv)
    try:
        return run(args)
    except Radar2DError as e:
        print(f"[ERR] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
