"""
Unit Tests — Absolute Path Resolver
===================================
Root detection, segment collapsing, working-directory anchoring and the
fatal working-directory error. Every test pins the separator and the
working directory so results do not depend on the host.
"""
import os
from pathlib import PurePosixPath

import pytest

from path_helper.core.errors import WorkingDirectoryError
from path_helper.resolver.absolute import absolute, collapse_segments, current_directory


def _failing_cwd():
    raise FileNotFoundError(2, "No such file or directory")


# ===================================================================
# UNIX-style roots
# ===================================================================
class TestUnixRoots:

    def test_collapses_parent_segments(self, home_cwd):
        assert absolute("/a/b/../../c", "/", cwd=home_cwd) == "/c"

    def test_parent_above_root_is_absorbed(self, home_cwd):
        assert absolute("/a/../../b", "/", cwd=home_cwd) == "/b"

    def test_only_parents_yield_root(self, home_cwd):
        assert absolute("/../..", "/", cwd=home_cwd) == "/"

    def test_current_dir_dropped(self, home_cwd):
        assert absolute("/a/./b/.", "/", cwd=home_cwd) == "/a/b"

    def test_empty_components_collapse(self, home_cwd):
        assert absolute("//a///b//", "/", cwd=home_cwd) == "/a/b"

    def test_root_alone(self, home_cwd):
        assert absolute("/", "/", cwd=home_cwd) == "/"

    def test_backslashes_normalised(self, home_cwd):
        assert absolute("\\a\\b", "/", cwd=home_cwd) == "/a/b"

    def test_dotted_names_are_plain_segments(self, home_cwd):
        assert absolute("/a/.../..b/b..", "/", cwd=home_cwd) == "/a/.../..b/b.."


# ===================================================================
# Windows drive roots
# ===================================================================
class TestDriveRoots:

    def test_already_absolute_unchanged(self, windows_cwd):
        assert absolute("C:\\foo\\bar", "\\", cwd=windows_cwd) == "C:\\foo\\bar"

    def test_drive_with_forward_slashes(self, home_cwd):
        assert absolute("c:/foo/../bar", "/", cwd=home_cwd) == "c:/bar"

    def test_parent_above_drive_absorbed(self, windows_cwd):
        assert absolute("C:\\..\\..", "\\", cwd=windows_cwd) == "C:\\"

    def test_mixed_input_to_windows_output(self, windows_cwd):
        assert absolute("D:/a\\b/./c", "\\", cwd=windows_cwd) == "D:\\a\\b\\c"

    def test_drive_without_separator_is_anchored(self, windows_cwd):
        assert absolute("C:foo", "\\", cwd=windows_cwd) == "C:\\Users\\me\\C:foo"


# ===================================================================
# Relative input anchored to the working directory
# ===================================================================
class TestAnchoring:

    def test_relative_path(self, home_cwd):
        assert absolute("a/./b", "/", cwd=home_cwd) == "/home/user/a/b"

    def test_relative_parents(self, home_cwd):
        assert absolute("../../../x", "/", cwd=home_cwd) == "/x"

    def test_empty_path_is_working_directory(self, home_cwd):
        assert absolute("", "/", cwd=home_cwd) == "/home/user"

    def test_none_path_is_working_directory(self, home_cwd):
        assert absolute(None, "/", cwd=home_cwd) == "/home/user"

    def test_windows_working_directory(self, windows_cwd):
        assert absolute("docs\\..\\x", "\\", cwd=windows_cwd) == "C:\\Users\\me\\x"

    def test_windows_working_directory_with_unix_separator(self, windows_cwd):
        assert absolute("a", "/", cwd=windows_cwd) == "C:/Users/me/a"

    def test_pathlike_input(self, home_cwd):
        assert absolute(PurePosixPath("/a/b/.."), "/", cwd=home_cwd) == "/a"

    def test_default_provider_reads_process_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        expected = os.getcwd().replace("\\", "/") + "/x"
        assert absolute("x", "/") == absolute(expected, "/")

    def test_default_separator(self, unix_default, home_cwd):
        assert absolute("a\\b", cwd=home_cwd) == "/home/user/a/b"

    def test_empty_separator_uses_default(self, unix_default, home_cwd):
        assert absolute("a", "", cwd=home_cwd) == "/home/user/a"


# ===================================================================
# Working-directory failures
# ===================================================================
class TestWorkingDirectoryErrors:

    def test_provider_failure_raises(self):
        with pytest.raises(WorkingDirectoryError) as exc_info:
            absolute("relative", "/", cwd=_failing_cwd)
        assert isinstance(exc_info.value.cause, FileNotFoundError)

    def test_absolute_input_never_reads_working_directory(self):
        assert absolute("/a/b", "/", cwd=_failing_cwd) == "/a/b"

    def test_relative_working_directory_raises(self):
        with pytest.raises(WorkingDirectoryError):
            absolute("x", "/", cwd=lambda: "not/rooted")

    def test_empty_working_directory_raises(self):
        with pytest.raises(WorkingDirectoryError):
            current_directory(lambda: "")

    def test_error_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            current_directory(_failing_cwd)


# ===================================================================
# Properties
# ===================================================================
@pytest.mark.parametrize("path", [
    "/a/b/../../c",
    "relative/./path/..",
    "",
    "/",
    "../../..",
    "x//y///z/",
])
def test_idempotent_unix(path, home_cwd):
    once = absolute(path, "/", cwd=home_cwd)
    assert absolute(once, "/", cwd=home_cwd) == once
    assert once.startswith("/")


@pytest.mark.parametrize("path", ["C:\\a\\..\\b", "d:/x/./y", "rel\\path", "C:\\"])
def test_idempotent_windows(path, windows_cwd):
    once = absolute(path, "\\", cwd=windows_cwd)
    assert absolute(once, "\\", cwd=windows_cwd) == once


def test_collapse_segments():
    assert collapse_segments("a/./b/../../../c/", "/") == ["c"]
