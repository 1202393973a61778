# Copyright 2025 Canonical Ltd.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Unit tests for PathValue.read and PathValue.delete."""

from __future__ import annotations

import logging
import os
import shutil

import pytest

import utils
from charmlibs.pathvalue import PathValue


class TestRead:
    def test_returns_contents(self, root: PathValue):
        utils.make_files(root, 'data.bin', content=bytes(range(256)))
        assert (root / 'data.bin').read() == bytes(range(256))

    def test_empty_file_is_not_no_data(self, root: PathValue):
        utils.make_files(root, 'empty.bin')
        result = (root / 'empty.bin').read()
        assert result is not None
        assert result == b''

    def test_missing_file_gives_none(self, root: PathValue, errors: list[OSError]):
        assert (root / 'missing').read(on_error=errors.append) is None
        [error] = errors
        assert isinstance(error, FileNotFoundError)

    def test_directory_gives_none(self, root: PathValue, errors: list[OSError]):
        assert root.read(on_error=errors.append) is None
        [error] = errors
        assert isinstance(error, IsADirectoryError)

    def test_permission_error_gives_none(
        self,
        root: PathValue,
        errors: list[OSError],
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ):
        utils.make_files(root, 'data.bin', content=b'data')
        monkeypatch.setattr('builtins.open', utils.raise_permission_denied)
        with caplog.at_level(logging.DEBUG):
            result = (root / 'data.bin').read(on_error=errors.append)
        assert result is None
        [error] = errors
        assert isinstance(error, PermissionError)
        assert 'Error reading' in caplog.text


class TestDelete:
    def test_file(self, root: PathValue):
        utils.make_files(root, 'a/b.txt')
        path = root / 'a/b.txt'
        assert path.delete()
        assert not path.exists()
        assert (root / 'a').exists()

    def test_directory_tree(self, root: PathValue):
        utils.make_files(root, 'a/b/c.txt', 'a/d.txt')
        path = root / 'a'
        assert path.delete()
        assert not path.exists()
        assert root.exists()

    def test_is_idempotent(self, root: PathValue, errors: list[OSError]):
        root.create('a/b/c.txt')
        path = root / 'a'
        assert path.delete(on_error=errors.append)
        assert path.delete(on_error=errors.append)
        assert not path.exists()
        assert not errors

    def test_missing_path(self, root: PathValue):
        assert (root / 'missing').delete()

    def test_value_outlives_deletion(self, root: PathValue):
        path = root.create('a/b.txt')
        assert path.delete()
        assert str(path) == str(root / 'a/b.txt')
        assert path.name == 'b.txt'
        assert path.read() is None

    def test_symlink_to_directory_removes_link_only(self, root: PathValue):
        utils.make_files(root, 'target/keep.txt')
        os.symlink(root / 'target', root / 'link')
        assert (root / 'link').delete()
        assert not os.path.lexists(root / 'link')
        assert (root / 'target/keep.txt').exists()

    def test_directory_failure_gives_false(
        self,
        root: PathValue,
        errors: list[OSError],
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ):
        utils.make_files(root, 'a/b.txt')
        path = root / 'a'
        monkeypatch.setattr(shutil, 'rmtree', utils.raise_permission_denied)
        with caplog.at_level(logging.ERROR):
            assert not path.delete(on_error=errors.append)
        assert path.exists()
        [error] = errors
        assert isinstance(error, PermissionError)
        assert 'Error deleting' in caplog.text

    def test_file_failure_gives_false(self, root: PathValue, monkeypatch: pytest.MonkeyPatch):
        utils.make_files(root, 'a.txt')
        path = root / 'a.txt'
        monkeypatch.setattr(os, 'remove', utils.raise_unknown_os_error)
        assert not path.delete()
        assert path.exists()
