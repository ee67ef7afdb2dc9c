from pathlib import PurePosixPath

import pytest

from winepath.errors import InvalidWinePathError, UnencodablePathError
from winepath.paths import WinePath, drive_to_index, index_to_drive, split_wine_path, stringify_path


class TestDriveIndex:
    def test_letters_are_case_insensitive(self) -> None:
        assert drive_to_index("c") == drive_to_index("C") == 2

    def test_bounds(self) -> None:
        assert index_to_drive(0) == "a"
        assert index_to_drive(25) == "z"
        with pytest.raises(ValueError):
            index_to_drive(26)

    @pytest.mark.parametrize("letter", ["", "1", "ab", ":", "é"])
    def test_rejects_non_letters(self, letter: str) -> None:
        with pytest.raises(ValueError):
            drive_to_index(letter)


class TestStringifyPath:
    def test_relative_remainder(self) -> None:
        assert stringify_path("c:", PurePosixPath("Program Files/CoolApp")) == r"c:\Program Files\CoolApp"

    def test_empty_remainder_is_just_the_drive(self) -> None:
        assert stringify_path("c:", PurePosixPath("")) == "c:"

    def test_root_becomes_empty_segment(self) -> None:
        assert stringify_path("z:", PurePosixPath("/home/user")) == r"z:\\home\user"

    def test_parent_markers_pass_through(self) -> None:
        assert stringify_path("c:", PurePosixPath("a/../b")) == r"c:\a\..\b"

    def test_undecodable_segment(self) -> None:
        with pytest.raises(UnencodablePathError):
            stringify_path("c:", PurePosixPath("bad\udcff"))


class TestSplitWinePath:
    def test_segments(self) -> None:
        assert split_wine_path(r"C:\windows\system32") == ("C", ["", "windows", "system32"])

    def test_bare_drive(self) -> None:
        assert split_wine_path("d:") == ("d", [""])

    @pytest.mark.parametrize("path", ["", "c", r"\foo", "1:", "cc:", "é:"])
    def test_malformed(self, path: str) -> None:
        with pytest.raises(InvalidWinePathError):
            split_wine_path(path)

    def test_malformed_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            split_wine_path("x")


def test_wine_path_str() -> None:
    path = WinePath(r"C:\windows\system32\ddraw.dll")
    assert str(path) == r"C:\windows\system32\ddraw.dll"
    assert path == WinePath(r"C:\windows\system32\ddraw.dll")
