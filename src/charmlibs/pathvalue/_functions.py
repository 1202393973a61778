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

"""Public helper functions exported by this package."""

from __future__ import annotations

import os
import typing

from ops import pebble

from . import _constants
from ._path_value import PathValue

if typing.TYPE_CHECKING:
    from typing import BinaryIO, TextIO

    from ._types import StrPathLike


def get_fileinfo(path: StrPathLike | PathValue) -> pebble.FileInfo:
    """Return a :class:`ops.pebble.FileInfo` for path, following symlinks.

    Raises:
        FileNotFoundError: if the path does not exist.
    """
    return _as_path_value(path).info()


def ensure_contents(
    path: StrPathLike | PathValue,
    source: bytes | str | BinaryIO | TextIO,
    *,
    mode: int = _constants.DEFAULT_WRITE_MODE,
) -> bool:
    """Ensure source can be read from path. Return True if any changes were made.

    Ensure that path exists, contains source, and has the requested permissions.
    Missing parent directories are created with :meth:`PathValue.mkdir`.

    Returns:
        True if any changes were made, including chmod, otherwise False.

    Raises:
        CreateError: if a parent directory can't be created.
        IsADirectoryError: if path is a directory.
        PermissionError: if the user does not have permissions for the operation.
    """
    path = _as_path_value(path)
    source = _as_bytes(source)
    try:
        info = path.info()
    except FileNotFoundError:
        pass  # file doesn't exist, so writing is required
    else:  # check if metadata and contents already match
        if info.permissions == mode and path.read() == source:
            return False  # everything matches, so writing is not required
    path.parent.mkdir()
    _write_bytes(path, source, mode=mode)
    return True


def _as_path_value(path: StrPathLike | PathValue) -> PathValue:
    if isinstance(path, PathValue):
        return path
    return PathValue(path)


def _as_bytes(source: bytes | str | BinaryIO | TextIO) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, str):
        return source.encode()
    return _as_bytes(source.read())


def _write_bytes(path: PathValue, data: bytes, *, mode: int) -> None:
    with open(path, 'wb') as f:
        f.write(data)
    os.chmod(path, mode)
