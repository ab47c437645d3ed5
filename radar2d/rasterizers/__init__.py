from . import last  # noqa: F401
