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

r"""Immutable, normalized filesystem path values with convenience operations.

:class:`PathValue` wraps a path string, normalized lexically with :func:`os.path.normpath`
when the value is created. Derived paths (:meth:`PathValue.joinpath`, :attr:`PathValue.parent`,
:meth:`PathValue.ancestor`) are pure string operations. The remaining methods are thin
wrappers over host filesystem calls:

- :meth:`PathValue.exists`, :meth:`PathValue.is_dir`, :meth:`PathValue.is_file` and
  :meth:`PathValue.info` query the filesystem.
- :meth:`PathValue.find` recursively finds files by shell-style pattern.
- :meth:`PathValue.mkdir`, :meth:`PathValue.touch` and :meth:`PathValue.create` make
  directories and empty files, raising :class:`CreateError` on failure.
- :meth:`PathValue.read` and :meth:`PathValue.delete` never raise :class:`OSError`. They return
  ``None`` and ``False`` respectively on failure, logging the cause and passing it to the
  optional ``on_error`` callback.

This library also provides the following functions:

- :func:`ensure_contents` ensures that the requested contents are available at a path,
  writing and setting permissions as needed.
- :func:`get_fileinfo` describes a path with an :class:`ops.pebble.FileInfo`.

.. note::
    ``StrPathLike`` is a type alias for :class:`str` | :class:`os.PathLike`\[:class:`str`].
    :class:`PathValue` is itself :class:`os.PathLike`.

The constants defining the default file and directory permissions are not exported by this package,
but are documented here to explain the otherwise opaque numbers appearing as default arguments.

.. autodata:: pathvalue._constants.DEFAULT_MKDIR_MODE
.. autodata:: pathvalue._constants.DEFAULT_WRITE_MODE
"""

from __future__ import annotations

from pathlib import Path as _Path  # for __version__

from ._errors import CreateError, PatternError
from ._functions import ensure_contents, get_fileinfo
from ._path_value import PathValue

__all__ = (
    'CreateError',
    'PathValue',
    'PatternError',
    'ensure_contents',
    'get_fileinfo',
)

__version__ = (_Path(__file__).parent / '_version.txt').read_text()
