import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from winepath.drives import DOSDEVICES_DIR, DriveCache, LinkResolver
from winepath.errors import NoDriveError, PrefixNotFoundError
from winepath.paths import WinePath, split_wine_path, stringify_path

logger = logging.getLogger(__name__)


@dataclass
class PrefixSettings:
    prefix_var: str = "WINEPREFIX"
    home_var: str = "HOME"
    default_dir: str = ".wine"
    links_dir: str = DOSDEVICES_DIR


def find_prefix(
    environ: Mapping[str, str] | None = None,
    settings: PrefixSettings | None = None,
) -> Path:
    """Locate the wine prefix: `$WINEPREFIX`, else `$HOME/.wine`."""
    env = os.environ if environ is None else environ
    settings = settings or PrefixSettings()

    if prefix := env.get(settings.prefix_var):
        return Path(prefix)
    if home := env.get(settings.home_var):
        return Path(home) / settings.default_dir
    raise PrefixNotFoundError()


class WineConfig:
    """Converts paths for one wine prefix.

    The drive mappings are read once, when the config is created, and never
    refreshed. Create a new config to pick up changes in `dosdevices`.
    """

    def __init__(self, prefix: Path, drives: DriveCache) -> None:
        self._prefix = prefix
        self._drives = drives

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        resolver: LinkResolver | None = None,
        settings: PrefixSettings | None = None,
    ) -> "WineConfig":
        settings = settings or PrefixSettings()
        prefix = find_prefix(environ, settings)
        logger.debug("Using wine prefix %s", prefix)
        return cls.from_prefix(prefix, resolver=resolver, links_dir=settings.links_dir)

    @classmethod
    def from_prefix(
        cls,
        path: str | os.PathLike[str],
        resolver: LinkResolver | None = None,
        links_dir: str = DOSDEVICES_DIR,
    ) -> "WineConfig":
        """Create a config for `path` without checking that it is a wine prefix.

        A directory that is not a prefix simply yields no drive mappings.
        """
        prefix = Path(path)
        return cls(prefix, DriveCache.from_prefix(prefix, resolver=resolver, links_dir=links_dir))

    @property
    def prefix(self) -> Path:
        return self._prefix

    @property
    def drives(self) -> DriveCache:
        return self._drives

    def to_wine_path(self, path: str | os.PathLike[str]) -> WinePath:
        letter, remaining = self._drives.find_drive_root(path)
        return WinePath(stringify_path(f"{letter}:", remaining))

    def to_native_path(self, path: str | WinePath) -> Path:
        letter, segments = split_wine_path(str(path))
        root = self._drives.get(letter)
        if root is None:
            raise NoDriveError(str(path))

        native = root
        for segment in segments:
            native = native / segment
        return native

    def __repr__(self) -> str:
        return f"WineConfig(prefix={str(self._prefix)!r}, drives={self._drives!r})"
