# radar2d/registry.py
from importlib import import_module

REGISTRY = {"proj": {}, "rast": {}, "enc": {}}
PACKAGES = {"proj": "projections", "rast": "rasterizers", "enc": "encoders"}

def register(kind, name):
    def deco(cls):
        REGISTRY[kind][name] = cls
        return cls
    return deco

def names(kind):
    # stage modules register themselves on import
    import_module(f"radar2d.{PACKAGES[kind]}")
    return sorted(REGISTRY[kind])

def build(kind, name, **kwargs):
    if name not in names(kind):
        raise KeyError(f"unknown {kind} stage: {name!r}")
    return REGISTRY[kind][name](**kwargs)
