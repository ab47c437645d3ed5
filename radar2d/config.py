# radar2d/config.py
from dataclasses import asdict, dataclass, fields
from pathlib import Path

import yaml

from .errors import UsageError
from .registry import names

STAGE_KINDS = ("proj", "rast", "enc")


@dataclass
class RenderConfig:
    proj: str = "polar"
    rast: str = "last"
    enc: str = "grey"
    progress: bool = False
    meta: bool = False

    def to_dict(self):
        return asdict(self)


def load_yaml_cfg(p):
    if not p:
        return {}
    path = Path(p)
    if not path.exists():
        raise UsageError(f"--cfg file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise UsageError(f"--cfg is not valid YAML: {path} ({e})") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise UsageError(f"--cfg must hold a mapping, got {type(data).__name__}: {path}")
    return data


def overlay_cfg(base: dict, override: dict) -> dict:
    """Return a new dict = base, with any non-None values from override applied."""
    out = dict(base or {})
    for k, v in (override or {}).items():
        if v is not None:
            out[k] = v
    return out


def resolve_config(cfg_path=None, **cli_overrides) -> RenderConfig:
    merged = overlay_cfg(RenderConfig().to_dict(), load_yaml_cfg(cfg_path))
    merged = overlay_cfg(merged, cli_overrides)
    known = {f.name for f in fields(RenderConfig)}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise UsageError(f"unknown config keys: {', '.join(unknown)}")
    for kind in STAGE_KINDS:
        if merged[kind] not in names(kind):
            raise UsageError(f"unknown {kind} '{merged[kind]}' (choices: {', '.join(names(kind))})")
    return RenderConfig(**merged)
