import logging
import os

import pytest

from relpath import Config, Invalid, InvalidReason, RelPath, Resolved


RELATIVE_PATH_CASES = {
    'parent slash from subdir': ('/foo/bar/', '/foo/bar/baz/', '..'),
    'parent noslash from subdir': ('/foo/bar', '/foo/bar/baz/', '..'),
    'parent slash from file': ('/foo/bar/', '/foo/bar/baz.txt', '..'),
    'parent noslash from file': ('/foo/bar', '/foo/bar/baz.txt', '..'),
    'parent containing backslash': ('/foo\\bar/', '/foo\\bar/baz/', '..'),
    'root from subdir': ('/', '/foo/', '..'),
    'root from file': ('/', '/foo/bar.txt', '../..'),
    'root from nested file': ('/', '/foo/bar/baz.txt', '../../..'),
    'root from nested dir': ('/', '/foo/bar/bat', '../../..'),
    'sibling dir slash': ('/foo/bar/', '/foo/baz/', '../bar'),
    'sibling dir slash from file': ('/foo/bar/', '/foo/baz.txt', '../bar'),
    'subdir from parent slash': ('/foo/bar/baz/', '/foo/bar/', 'baz'),
    'subdir from parent noslash': ('/foo/bar/baz', '/foo/bar', 'baz'),
    'sibling dir file from dir': ('/foo/bar.txt', '/foo/baz/', '../bar.txt'),
    'sibling dir file from file': ('/foo/bar.txt', '/foo/baz.txt', '../bar.txt'),
    'sibling dir noslash': ('/foo/bar', '/foo/baz/', '../bar'),
    'sibling dir noslash from file': ('/foo/bar', '/foo/baz.txt', '../bar'),
    'via root deep from deep': ('/foo/bar/bat', '/x/y/z', '../../../foo/bar/bat'),
    'via root deep from sub': ('/foo/bar/bat', '/x', '../foo/bar/bat'),
    'via root sub from deep': ('/x', '/foo/bar/bat', '../../../x'),
    'nested from root': ('/foo/bar/bat', '/', 'foo/bar/bat'),
    'noop root': ('/', '/', '.'),
    'noop subdir': ('/a', '/a', '.'),
    'noop nested': ('/a/b', '/a/b', '.'),
    'intermediate two': ('/a/bat/cat/dog/boy/../../assets/img.png', '/a/bat/cat', 'assets/img.png'),
    'intermediate three': ('/a/bat/cat/dog/boy/../../../assets/x.txt', '/a/bat', 'assets/x.txt'),
    'intermediate overflow': ('/a/bat/cat/dog/../../../../eagle/x.txt', '/a/bat', '../../eagle/x.txt'),
    'intermediate back and forth': (
        '/a/bat/cat/dog/eagle/egg1/../egg2/../egg3/../../../assets/x.txt', '/a/bat', 'cat/assets/x.txt'
    ),
    'case sensitive': ('/Foo/bar', '/foo/bar', '../../Foo/bar'),
}


class TestRelativePathPosix:
    @pytest.mark.parametrize(
        "path, start, expected",
        list(RELATIVE_PATH_CASES.values()),
        ids=list(RELATIVE_PATH_CASES.keys()),
    )
    def test_relative_path(self, posix, path, start, expected):
        assert posix.get_relative_path(path, start) == Resolved(expected)

    def test_relative_path_invalid(self, posix):
        result = posix.get_relative_path('foo/bar', 'quux')
        assert isinstance(result, Invalid)
        assert result.reason is InvalidReason.RELATIVE_PATH

    def test_relative_start_invalid(self, posix):
        result = posix.get_relative_path('/foo/bar', 'quux')
        assert isinstance(result, Invalid)
        assert result.reason is InvalidReason.RELATIVE_START

    def test_drive_paths_are_relative_on_posix(self, posix):
        result = posix.get_relative_path('C:\\foo', '/')
        assert result == Invalid(InvalidReason.RELATIVE_PATH)

    def test_start_defaults_to_cwd_provider(self):
        rel = RelPath(Config.posix(cwd_provider=lambda: '/foo/bar'))
        assert rel.get_relative_path('/foo/baz/quux.js').unwrap() == '../baz/quux.js'
        assert rel.get_relative_path('/foo/bar').unwrap() == '.'

    def test_relative_cwd_is_rejected(self):
        rel = RelPath(Config.posix(cwd_provider=lambda: 'not/absolute'))
        assert rel.get_relative_path('/foo').reason is InvalidReason.RELATIVE_START

    @pytest.mark.skipif(os.sep != '/', reason="needs a POSIX working directory")
    def test_start_defaults_to_process_cwd(self, posix, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        cwd = os.getcwd()
        assert posix.get_relative_path(cwd + '/assets/img.png').unwrap() == 'assets/img.png'

    def test_invalid_result_is_logged(self, posix, caplog):
        with caplog.at_level(logging.DEBUG, logger="relpath.core.resolver"):
            posix.get_relative_path('foo', '/bar')
        assert "get_relative_path rejected" in caplog.text


class TestRelativePathWindows:
    def test_different_drives(self, windows):
        result = windows.get_relative_path('D:\\foo\\bar', 'C:\\foo\\bar')
        assert result == Invalid(InvalidReason.DRIVE_MISMATCH)

    def test_drive_relative_against_drive_anchored(self, windows):
        assert windows.get_relative_path('/foo/bar', 'C:\\foo').reason is InvalidReason.DRIVE_MISMATCH
        assert windows.get_relative_path('C:\\foo', '/foo/bar').reason is InvalidReason.DRIVE_MISMATCH

    def test_unicode_case_insensitive(self, windows):
        result = windows.get_relative_path('C:\\ΔΈΛΤΑ\\foo', 'c:\\δέλτα\\bar')
        assert result == Resolved('../foo')

    def test_keeps_target_case(self, windows):
        assert windows.get_relative_path('C:\\Foo\\Bar.TXT', 'c:\\foo').unwrap() == 'Bar.TXT'

    def test_identical_ignoring_case(self, windows):
        assert windows.get_relative_path('C:/Foo/', 'c:\\foo').unwrap() == '.'

    @pytest.mark.parametrize("path, start, expected", [
        ('C:\\foo\\bar', 'C:\\foo', 'bar'),
        ('C:\\foo', 'C:\\foo\\bar\\baz', '../..'),
        ('c:/foo/bar', 'C:\\foo\\baz', '../bar'),
        ('C:\\', 'C:\\foo', '..'),
        ('/foo/bar', '/foo/baz', '../bar'),
        ('/foo\\bar', '/foo', 'bar'),
        ('C:\\..\\..\\foo', 'C:\\', 'foo'),
    ])
    def test_windows_cases(self, windows, path, start, expected):
        assert windows.get_relative_path(path, start) == Resolved(expected)

    def test_relative_inputs(self, windows):
        assert windows.get_relative_path('foo\\bar', 'C:\\').reason is InvalidReason.RELATIVE_PATH
        assert windows.get_relative_path('C:\\foo', 'C:foo').reason is InvalidReason.RELATIVE_START

    def test_posix_mode_is_case_sensitive(self, posix):
        assert posix.get_relative_path('/ΔΈΛΤΑ/foo', '/δέλτα/bar').unwrap() == '../../ΔΈΛΤΑ/foo'
