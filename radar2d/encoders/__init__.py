from . import grey, invgrey  # noqa: F401
