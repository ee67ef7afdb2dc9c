class WinePathError(Exception):
    """Base class for every failure raised by winepath."""


class PrefixNotFoundError(WinePathError):
    def __init__(self, message: str = "could not determine wine prefix") -> None:
        super().__init__(message)


class NoDriveError(WinePathError):
    def __init__(self, path: str) -> None:
        super().__init__(f"path is not mapped to a wine drive: {path}")
        self.path = path


class InvalidWinePathError(WinePathError, ValueError):
    """Raised for wine paths that do not start with `<letter>:`."""

    def __init__(self, path: str) -> None:
        super().__init__(f"wine path must start with a drive letter and a colon: {path!r}")
        self.path = path


class UnencodablePathError(WinePathError, UnicodeError):
    def __init__(self, segment: str) -> None:
        super().__init__(f"path segment is not valid utf-8: {segment!r}")
        self.segment = segment
