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

"""Implementation of PathValue class."""

from __future__ import annotations

import fnmatch
import logging
import os
import shutil
import typing

from ops import pebble

from . import _constants, _errors, _fileinfo
from ._outcome import Outcome

if typing.TYPE_CHECKING:
    from typing import Iterable

    from typing_extensions import Self

    from ._types import ErrorHandler, StrPathLike

logger = logging.getLogger(__name__)

_CURRENT_DIRECTORY = os.curdir


def _normalize(path: str) -> str:
    normalized = os.path.normpath(path)
    # normpath keeps exactly two leading slashes (a POSIX special case), collapse to one
    if normalized.startswith(os.sep * 2):
        normalized = os.sep + normalized.lstrip(os.sep)
    return normalized


def _is_boundary(path: str) -> bool:
    return path == _CURRENT_DIRECTORY or path == os.sep


def _has_unclosed_bracket(pattern: str) -> bool:
    """Whether pattern has a ``[`` with no closing ``]``, scanning as :mod:`fnmatch` does.

    A ``]`` directly after ``[`` or ``[!`` is part of the set rather than its end.
    """
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        i += 1
        if c != '[':
            continue
        j = i
        if j < n and pattern[j] == '!':
            j += 1
        if j < n and pattern[j] == ']':
            j += 1
        while j < n and pattern[j] != ']':
            j += 1
        if j >= n:
            return True
        i = j + 1
    return False


def _split(pathname: str) -> tuple[str, str]:
    """Split pathname into (directory, file) on the last separator.

    A trailing separator means the whole pathname names a directory.
    """
    if pathname.endswith(os.sep):
        return pathname, ''
    directory, sep, file = pathname.rpartition(os.sep)
    if not sep:
        return '', pathname
    return directory, file


class PathValue:
    r"""An immutable, lexically normalized filesystem path with convenience operations.

    Args:
        \*pathsegments: :class:`str` or :class:`os.PathLike`. Empty segments are ignored and
            the rest are joined with :data:`os.sep`, then normalized with
            :func:`os.path.normpath`. With no (non-empty) segments, the path is ``'.'``.

    Normalization never touches the filesystem. Methods that do (:meth:`exists`, :meth:`find`,
    :meth:`mkdir`, :meth:`touch`, :meth:`create`, :meth:`read`, :meth:`delete`) never modify
    the instance, and the instance remains a valid value after the path is deleted.

    ::

        PathValue('/srv//app/./config/..')  # PathValue('/srv/app')
        PathValue('/srv', 'app') / 'data'  # PathValue('/srv/app/data')
    """

    def __init__(self, *pathsegments: StrPathLike) -> None:
        segments = [os.fspath(s) for s in pathsegments]
        self._path = _normalize(os.sep.join(s for s in segments if s))

    @classmethod
    def cwd(cls) -> Self:
        """Return a new PathValue for the process's current working directory.

        The working directory is read once, when this method is called. If it can't be
        determined (for example because it has been deleted), ``PathValue('.')`` is returned.
        """
        try:
            cwd = os.getcwd()
        except OSError as e:
            logger.debug('Could not get the current working directory, using %r: %s', '.', e)
            return cls(_CURRENT_DIRECTORY)
        return cls(cwd)

    def with_segments(self, *pathsegments: StrPathLike) -> Self:
        """Return a new PathValue of the same type from the given segments.

        All methods returning new instances do so by calling this method,
        so subclasses can customise them all by overriding it.
        """
        return type(self)(*pathsegments)

    ##################
    # string algebra #
    ##################

    def __str__(self) -> str:
        return self._path

    def __fspath__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._path!r})'

    def __hash__(self) -> int:
        return hash(self._path)

    def __eq__(self, other: object, /) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        return self._path == other._path

    def __lt__(self, other: PathValue) -> bool:
        """Compare by normalized path string, like :func:`sorted` on ``str(path)``."""
        if not isinstance(other, PathValue):
            return NotImplemented
        return self._path < other._path

    def __le__(self, other: PathValue) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        return self._path <= other._path

    def __gt__(self, other: PathValue) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        return self._path > other._path

    def __ge__(self, other: PathValue) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        return self._path >= other._path

    def __truediv__(self, key: StrPathLike) -> Self:
        return self.joinpath(key)

    @property
    def name(self) -> str:
        """The final path component. For the root path, the root itself."""
        return os.path.basename(self._path) or self._path

    def is_absolute(self) -> bool:
        return os.path.isabs(self._path)

    def joinpath(self, *other: StrPathLike) -> Self:
        r"""Return a new PathValue with \*other appended to this path, then normalized.

        .. warning::
            Unlike :meth:`pathlib.PurePath.joinpath`, an absolute segment does not replace
            the path so far: ``PathValue('/a').joinpath('/b')`` is ``PathValue('/a/b')``.
        """
        return self.with_segments(self._path, *other)

    @property
    def parent(self) -> Self:
        """The logical parent of this path.

        The parent of ``'.'`` is ``'.'``, and the parent of the root is the root.
        """
        return self.with_segments(os.path.dirname(self._path))

    def ancestor(self, depth: int) -> Self:
        """Return the ancestor reached by taking the parent ``depth + 1`` times.

        The walk stops early rather than stepping onto ``'.'`` or the root, returning the last
        ancestor reached before that point. The first step is always taken, so ``ancestor(0)``
        is :attr:`parent` even when the parent is ``'.'`` or the root.

        Raises:
            ValueError: if depth is negative.
        """
        if depth < 0:
            raise ValueError(f'depth must be non-negative, got {depth}')
        result = self.parent
        for _ in range(depth):
            if _is_boundary(result._path):
                break
            candidate = result.parent
            if _is_boundary(candidate._path):
                break
            result = candidate
        return result

    ###########
    # queries #
    ###########

    def exists(self) -> bool:
        """Whether this path exists. Any error, including permission denied, gives False."""
        return os.path.exists(self._path)

    def info(self) -> pebble.FileInfo:
        """Return a :class:`ops.pebble.FileInfo` describing this path, following symlinks.

        Raises:
            FileNotFoundError: if the path does not exist.
            PermissionError: if the path cannot be stat'ed.
        """
        return _fileinfo.from_path(self._path)

    def is_dir(self) -> bool:
        return self._exists_and_matches(pebble.FileType.DIRECTORY)

    def is_file(self) -> bool:
        return self._exists_and_matches(pebble.FileType.FILE)

    def _exists_and_matches(self, filetype: pebble.FileType) -> bool:
        try:
            info = self.info()
        except OSError:
            return False
        return info.type is filetype

    ########
    # find #
    ########

    def find(
        self, patterns: Iterable[str], *, on_error: ErrorHandler | None = None
    ) -> dict[str, list[Self]]:
        """Recursively find files under this path whose names match each of the patterns.

        Args:
            patterns: Shell-style patterns (``*``, ``?``, ``[seq]``) matched against the base
                name of each file, as with :func:`fnmatch.fnmatch`. ``'**'`` has no special
                meaning. Directories are never matched. Entries are visited in lexical
                order at each level, descending into a subdirectory where its name sorts.
            on_error: Called with the error that aborted a walk, if any: an :class:`OSError`,
                or a :class:`PatternError` if the pattern has an unclosed ``[``.

        Returns:
            A dict mapping every pattern to the list of matching paths, in walk order. Patterns
            without matches map to an empty list.

        If a walk fails, the error is logged (and passed to ``on_error``), and the matches
        found before the failure are returned for that pattern.
        """
        return {pattern: self.find_one(pattern, on_error=on_error) for pattern in patterns}

    def find_one(self, pattern: str, *, on_error: ErrorHandler | None = None) -> list[Self]:
        """Recursively find files under this path whose names match pattern.

        See :meth:`find` for details.
        """
        outcome = self._walk_matches(pattern)
        if outcome.error is not None:
            logger.warning(
                'Error during walk of %r for %r: %s', self._path, pattern, outcome.error
            )
            if on_error is not None:
                on_error(outcome.error)
        return outcome.value

    def _walk_matches(self, pattern: str) -> Outcome[list[Self]]:
        matches: list[Self] = []
        if _has_unclosed_bracket(pattern):
            error = _errors.PatternError(f'syntax error in pattern: {pattern!r}')
            return Outcome(matches, error=error)
        if os.path.isfile(self._path):
            if fnmatch.fnmatch(self.name, pattern):
                matches.append(self)
            return Outcome(matches)
        try:
            self._walk_directory(self._path, pattern, matches)
        except OSError as e:
            return Outcome(matches, error=e)
        return Outcome(matches)

    def _walk_directory(self, dirpath: str, pattern: str, matches: list[Self]) -> None:
        # files and subdirectories share one lexical order, and symlinks are never descended
        with os.scandir(dirpath) as it:
            entries = sorted(it, key=lambda entry: entry.name)
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                self._walk_directory(entry.path, pattern, matches)
            elif fnmatch.fnmatch(entry.name, pattern):
                matches.append(self.with_segments(entry.path))

    ############
    # creation #
    ############

    def mkdir(self, mode: int = _constants.DEFAULT_MKDIR_MODE) -> None:
        """Create this directory and any missing parents. Do nothing if it already exists.

        Raises:
            CreateError: if a directory can't be created, for example due to permissions, or
                because this path or one of its parents exists as a file.
        """
        try:
            os.makedirs(self._path, mode=mode, exist_ok=True)
        except OSError as e:
            _errors.raise_create_error('create directory', self._path, from_=e)

    def touch(self, name: StrPathLike, mode: int = _constants.DEFAULT_WRITE_MODE) -> Self:
        """Create an empty file at name under this directory, unless something exists there.

        If a file or directory already exists at the target, it is left untouched.

        Returns:
            The path of the (possibly pre-existing) target.

        Raises:
            CreateError: if checking for the target fails other than because it doesn't exist,
                or if creating the file fails.
        """
        target = self / name
        try:
            os.stat(target._path)
        except FileNotFoundError:
            pass  # doesn't exist, so create it below
        except OSError as e:
            _errors.raise_create_error('check file status', target._path, from_=e)
        else:
            return target
        try:
            fd = os.open(target._path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, mode)
        except FileExistsError:
            pass  # created concurrently
        except OSError as e:
            _errors.raise_create_error('create file', target._path, from_=e)
        else:
            os.close(fd)
        return target

    def create(self, pathname: str) -> Self:
        """Make pathname exist under this path, creating directories and an empty file.

        The text after the last separator in pathname names a file, and everything before it
        names a directory. If pathname ends with a separator, it names only a directory. If it
        has no separator, it names a file directly under this path. The directory is always
        created if missing, including this path itself.

        ::

            root.create('templates/base.json')  # makes root/templates, then the empty file
            root.create('templates/')  # makes root/templates only

        Returns:
            The file's path if pathname names a file, otherwise the directory's path.

        Raises:
            CreateError: if a directory or the file can't be created.
        """
        directory, file = _split(pathname)
        target = self / directory if directory else self
        if target._path != _CURRENT_DIRECTORY:
            target.mkdir()
        if file:
            return target.touch(file)
        return target

    ###################
    # read and delete #
    ###################

    def read(self, *, on_error: ErrorHandler | None = None) -> bytes | None:
        """Return the contents of this file, or None if it can't be read for any reason.

        An existing empty file gives ``b''``, which is distinct from None.
        Use ``on_error`` to receive the :class:`OSError` explaining a None result.
        """
        outcome = self._read_bytes()
        if outcome.error is not None:
            logger.debug('Error reading %r: %s', self._path, outcome.error)
            if on_error is not None:
                on_error(outcome.error)
        return outcome.value

    def _read_bytes(self) -> Outcome[bytes | None]:
        try:
            with open(self._path, 'rb') as f:
                return Outcome(f.read())
        except OSError as e:
            return Outcome(None, error=e)

    def delete(self, *, on_error: ErrorHandler | None = None) -> bool:
        """Remove this path, recursively if it is a directory.

        Returns:
            True if the path didn't exist or was removed, False if removal failed. The error
            is logged, and passed to ``on_error`` if provided.
        """
        outcome = self._remove()
        if outcome.error is not None:
            logger.error('Error deleting %r: %s', self._path, outcome.error)
            if on_error is not None:
                on_error(outcome.error)
        return outcome.value

    def _remove(self) -> Outcome[bool]:
        if not self.exists():
            return Outcome(True)
        try:
            if os.path.isdir(self._path) and not os.path.islink(self._path):
                shutil.rmtree(self._path)
            else:
                os.remove(self._path)
        except OSError as e:
            return Outcome(False, error=e)
        return Outcome(True)

