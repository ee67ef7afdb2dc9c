from pathlib import Path

import pytest


def build_prefix(root: Path, links: dict[str, str | Path]) -> Path:
    """Create a fake wine prefix under `root` with `dosdevices/<name>` symlinks."""
    prefix = root / "prefix"
    dosdevices = prefix / "dosdevices"
    dosdevices.mkdir(parents=True)
    for name, target in links.items():
        (dosdevices / name).symlink_to(target)
    return prefix


@pytest.fixture
def wine_prefix(tmp_path: Path) -> Path:
    drive_c = tmp_path / "prefix" / "drive_c"
    (drive_c / "Program Files" / "CoolApp").mkdir(parents=True)
    (drive_c / "windows").mkdir()
    return build_prefix(tmp_path, {"c:": "../drive_c", "z:": "/"})


@pytest.fixture
def make_prefix():
    return build_prefix
