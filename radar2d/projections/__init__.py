from . import polar  # noqa: F401
