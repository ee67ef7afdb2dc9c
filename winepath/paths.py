from dataclasses import dataclass
from pathlib import PurePosixPath

from winepath.errors import InvalidWinePathError, UnencodablePathError

DRIVE_COUNT = 26
SEPARATOR = "\\"


@dataclass(frozen=True)
class WinePath:
    """A file path within Wine, e.g. `C:\\windows\\system32\\ddraw.dll`."""

    value: str

    def __str__(self) -> str:
        return self.value

    def __fspath__(self) -> str:
        return self.value


def drive_to_index(letter: str) -> int:
    if len(letter) != 1 or not ("a" <= letter.lower() <= "z"):
        raise ValueError(f"not a drive letter: {letter!r}")
    return ord(letter.lower()) - ord("a")


def index_to_drive(index: int) -> str:
    if not 0 <= index < DRIVE_COUNT:
        raise ValueError(f"drive index out of range: {index}")
    return chr(ord("a") + index)


def _segment_text(part: str) -> str:
    # os paths carry undecodable bytes as lone surrogates
    try:
        part.encode("utf-8")
    except UnicodeEncodeError:
        raise UnencodablePathError(part) from None
    return part


def stringify_path(drive_prefix: str, path: PurePosixPath) -> str:
    """Render `path` Windows-style behind `drive_prefix`.

    The root marker becomes an empty segment, `.` and `..` are kept as-is.
    """
    parts = ["" if part == "/" else _segment_text(part) for part in path.parts]
    return SEPARATOR.join([drive_prefix, *parts])


def split_wine_path(path: str) -> tuple[str, list[str]]:
    """Split `c:\\a\\b` into the drive letter and its backslash segments."""
    if len(path) < 2 or not (path[0].isascii() and path[0].isalpha()) or path[1] != ":":
        raise InvalidWinePathError(path)
    return path[0], path[2:].split(SEPARATOR)
