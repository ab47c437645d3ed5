# radar2d/errors.py
class Radar2DError(Exception):
    """Base class for every fatal condition of a render run."""


class UsageError(Radar2DError):
    pass


class StreamOpenError(Radar2DError):
    def __init__(self, path, reason=""):
        self.path = str(path)
        msg = f"Failed to open CSV: {self.path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class FieldParseError(Radar2DError):
    def __init__(self, text):
        self.text = text
        super().__init__(f"Invalid integer field: {text!r}")


class EmptyInputError(Radar2DError):
    pass


class EncodeError(Radar2DError):
    def __init__(self, path, reason=""):
        self.path = str(path)
        msg = f"Failed to write PNG: {self.path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
