# radar2d/writer.py
from pathlib import Path

import cv2

from .errors import EncodeError


def ensure_parent_dir(p: Path):
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


def write_png(out_path, buf):
    """Encode an RGBA PixelBuffer as PNG at out_path, whatever its extension."""
    out_path = Path(out_path)
    try:
        ensure_parent_dir(out_path)
        # OpenCV expects BGRA channel order
        bgra = cv2.cvtColor(buf.pixels, cv2.COLOR_RGBA2BGRA)
        ok, png = cv2.imencode(".png", bgra)
        if not ok:
            raise EncodeError(out_path, "PNG encoder failed")
        out_path.write_bytes(png.tobytes())
    except OSError as e:
        raise EncodeError(out_path, e.strerror or str(e)) from e
    except cv2.error as e:
        raise EncodeError(out_path, str(e)) from e
    return out_path
