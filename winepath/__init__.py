from winepath.errors import (
    WinePathError,
    PrefixNotFoundError,
    NoDriveError,
    InvalidWinePathError,
    UnencodablePathError,
)
from winepath.paths import WinePath
from winepath.drives import DriveCache, LinkResolver, resolve_link
from winepath.config import WineConfig, PrefixSettings, find_prefix

__version__ = "0.1.0"

__all__ = [
    "WinePathError",
    "PrefixNotFoundError",
    "NoDriveError",
    "InvalidWinePathError",
    "UnencodablePathError",
    "WinePath",
    "DriveCache",
    "LinkResolver",
    "resolve_link",
    "WineConfig",
    "PrefixSettings",
    "find_prefix",
]
