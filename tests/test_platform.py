"""Tests for per-OS capabilities."""

import pytest

from pairview.core import platform as platform_module
from pairview.core.platform import (
    LinuxPlatform,
    MacPlatform,
    Platform,
    WindowsPlatform,
    current_platform,
    detect_platform,
)


class TestDetectPlatform:
    @pytest.mark.parametrize(
        "name,expected",
        [("win32", WindowsPlatform), ("darwin", MacPlatform), ("linux", LinuxPlatform), ("freebsd13", Platform)],
    )
    def test_selection(self, name, expected):
        assert type(detect_platform(name)) is expected

    def test_current_platform_is_cached(self):
        assert current_platform() is current_platform()


class TestNormalizePath:
    def test_windows_strips_extended_length_prefix(self):
        assert WindowsPlatform().normalize_path("\\\\?\\C:\\Users\\me") == "C:\\Users\\me"

    def test_windows_leaves_plain_paths(self):
        assert WindowsPlatform().normalize_path("C:\\Users\\me") == "C:\\Users\\me"

    @pytest.mark.parametrize("platform", [LinuxPlatform(), MacPlatform(), Platform()])
    def test_posix_paths_unchanged(self, platform):
        assert platform.normalize_path("/home/me/../me") == "/home/me/../me"


class TestFileManagerCommand:
    def test_fixed_commands(self):
        assert WindowsPlatform().file_manager_command() == "explorer"
        assert MacPlatform().file_manager_command() == "open"

    def test_linux_prefers_first_installed(self, monkeypatch):
        installed = {"dolphin", "thunar"}
        monkeypatch.setattr(platform_module.shutil, "which", lambda cmd: f"/usr/bin/{cmd}" if cmd in installed else None)
        assert LinuxPlatform().file_manager_command() == "dolphin"

    def test_linux_falls_back_to_xdg_open(self, monkeypatch):
        monkeypatch.setattr(platform_module.shutil, "which", lambda cmd: None)
        assert LinuxPlatform().file_manager_command() == "xdg-open"
