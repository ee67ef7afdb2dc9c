import logging
import os
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path, PurePosixPath

from winepath.errors import NoDriveError
from winepath.paths import DRIVE_COUNT, drive_to_index, index_to_drive

logger = logging.getLogger(__name__)

DOSDEVICES_DIR = "dosdevices"

# (link directory, link name) -> canonical target, or None when unresolvable
LinkResolver = Callable[[Path, str], Path | None]


def resolve_link(drives_dir: Path, name: str) -> Path | None:
    link = drives_dir / name
    try:
        target = link.readlink()
        return (drives_dir / target).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        logger.debug("Skipping drive %s: %s", name, e)
        return None


class DriveCache:
    """Drive letter -> native directory table, one slot per letter a..z."""

    def __init__(self, drives: list[Path | None] | None = None) -> None:
        self._drives: list[Path | None] = list(drives) if drives is not None else [None] * DRIVE_COUNT
        if len(self._drives) != DRIVE_COUNT:
            raise ValueError(f"expected {DRIVE_COUNT} drive slots, got {len(self._drives)}")

    @classmethod
    def from_prefix(
        cls,
        prefix: Path,
        resolver: LinkResolver | None = None,
        links_dir: str = DOSDEVICES_DIR,
    ) -> "DriveCache":
        resolve = resolver or resolve_link
        drives_dir = Path(prefix) / links_dir
        drives: list[Path | None] = [None] * DRIVE_COUNT

        for index in range(DRIVE_COUNT):
            letter = index_to_drive(index)
            resolved = resolve(drives_dir, f"{letter}:")
            if resolved is not None:
                drives[index] = Path(resolved)
                logger.debug("Drive %s: -> %s", letter, resolved)

        cache = cls(drives)
        logger.debug("Loaded %d drive(s) from %s", len(cache), drives_dir)
        return cache

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str | os.PathLike[str]]) -> "DriveCache":
        drives: list[Path | None] = [None] * DRIVE_COUNT
        for letter, path in mapping.items():
            drives[drive_to_index(letter.rstrip(":"))] = Path(path)
        return cls(drives)

    def get(self, letter: str) -> Path | None:
        return self._drives[drive_to_index(letter)]

    def iter(self) -> Iterator[tuple[str, Path]]:
        for index, path in enumerate(self._drives):
            if path is not None:
                yield index_to_drive(index), path

    def __iter__(self) -> Iterator[tuple[str, Path]]:
        return self.iter()

    def __len__(self) -> int:
        return sum(1 for path in self._drives if path is not None)

    def __contains__(self, letter: object) -> bool:
        if not isinstance(letter, str):
            return False
        try:
            return self.get(letter) is not None
        except ValueError:
            return False

    def find_drive_root(self, path: str | os.PathLike[str]) -> tuple[str, PurePosixPath]:
        """Return the first drive (in letter order) whose directory contains `path`.

        This is first-match, not longest-match: with `c:` -> `/x` and `d:` -> `/x/y`,
        `/x/y/z` resolves to `c:` because `c` is scanned first. Wine behaves the same way.
        """
        native = PurePosixPath(path)
        for letter, root in self.iter():
            try:
                remaining = native.relative_to(root)
            except ValueError:
                continue
            return letter, remaining
        raise NoDriveError(str(native))

    def __repr__(self) -> str:
        fields = ", ".join(f"{letter}={str(path)!r}" for letter, path in self.iter())
        return f"DriveCache({fields})"
