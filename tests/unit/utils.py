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

"""Mocks and helpers for use in tests."""

from __future__ import annotations

import errno
import os
import typing

if typing.TYPE_CHECKING:
    from typing import Callable

    from charmlibs.pathvalue import PathValue


def raise_permission_denied(*args: object, **kwargs: object):
    raise PermissionError(errno.EACCES, os.strerror(errno.EACCES))


def raise_unknown_os_error(*args: object, **kwargs: object):
    raise OSError(9000, 'unknown-kind', 'unknown-message')


def make_files(root: PathValue, *relpaths: str, content: bytes = b'') -> None:
    """Create each file (and its parent directories) under root."""
    for relpath in relpaths:
        path = root / relpath
        os.makedirs(path.parent, exist_ok=True)
        with open(path, 'wb') as f:
            f.write(content)


def scandir_denied_for(*denied: str) -> Callable[..., typing.Any]:
    """Return an :func:`os.scandir` replacement that fails for the given directories."""
    real_scandir = os.scandir

    def scandir(path: typing.Any = '.'):
        if os.fspath(path) in denied:
            raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)
        return real_scandir(path)

    return scandir
