# radar2d/io_sweeps.py
"""
Decoder for radar sweep logs.

One sweep per line, comma separated:
    status, scale, range, gain, angle, echo0, echo1, ..., echoN
An optional first line whose first field is exactly ``Status`` is a header.
Blank lines, lines with fewer than 6 fields and sweeps without any echo sample
are skipped; non-numeric text in any numeric field aborts the decode.
"""
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple

from tqdm import tqdm

from .errors import FieldParseError, StreamOpenError

ANGLE_UNITS = 8196          # angle ticks per full revolution
META_FIELDS = 5             # status, scale, range, gain, angle
HEADER_TAG = "Status"
_INT_RE = re.compile(r"[+-]?[0-9]+")
INT_MIN, INT_MAX = -2**31, 2**31 - 1  # 32-bit signed


@dataclass(frozen=True)
class SweepRecord:
    status: int
    scale: int
    range: int
    gain: int
    angle: int              # 0..ANGLE_UNITS
    echo: Tuple[int, ...]   # radial samples, 0..255


def split_fields(line: str) -> List[str]:
    return [cell.strip(" \t\r") for cell in line.split(",")]


def parse_int(text: str, bounded: bool = True) -> int:
    if not _INT_RE.fullmatch(text):
        raise FieldParseError(text)
    if len(text.lstrip("+-").lstrip("0")) > 12:
        # saturate instead of converting thousands of digits
        value = -(INT_MAX + 1) * 2 if text.startswith("-") else (INT_MAX + 1) * 2
    else:
        value = int(text)
    if bounded and not INT_MIN <= value <= INT_MAX:
        raise FieldParseError(text)
    return value


def parse_row(cols: List[str]):
    """Build a SweepRecord from split fields, or None if it carries no echo."""
    status, scale, rng, gain, angle = (parse_int(c) for c in cols[:META_FIELDS])
    echo = tuple(min(max(parse_int(c, bounded=False), 0), 255) for c in cols[META_FIELDS:] if c)
    if not echo:
        return None
    return SweepRecord(status, scale, rng, gain, angle, echo)


def parse_sweeps(lines: Iterable[str], progress: bool = False) -> List[SweepRecord]:
    rows = []
    first = True
    for line in tqdm(lines, desc="Decoding sweeps", unit="line", disable=not progress):
        line = line.rstrip("\n")
        if first:
            first = False
            if split_fields(line)[0] == HEADER_TAG:
                continue
        if not line:
            continue
        cols = split_fields(line)
        if len(cols) < META_FIELDS + 1:  # need metadata + at least one echo
            continue
        row = parse_row(cols)
        if row is not None:
            rows.append(row)
    return rows


def read_sweeps(csv_path: Path, progress: bool = False) -> List[SweepRecord]:
    try:
        f = open(csv_path, "r", encoding="utf-8", errors="replace", newline="\n")
    except OSError as e:
        raise StreamOpenError(csv_path, e.strerror or str(e)) from e
    with f:
        return parse_sweeps(f, progress=progress)
