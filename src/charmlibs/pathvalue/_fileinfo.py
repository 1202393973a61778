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

"""Build :class:`ops.pebble.FileInfo` objects for local filesystem paths."""

from __future__ import annotations

import datetime
import grp
import os
import pwd
import stat
import typing

from ops import pebble

if typing.TYPE_CHECKING:
    from typing import Container

    from ._types import StrPathLike


_FT_MAP: dict[int, pebble.FileType] = {
    stat.S_IFREG: pebble.FileType.FILE,
    stat.S_IFDIR: pebble.FileType.DIRECTORY,
    stat.S_IFLNK: pebble.FileType.SYMLINK,
    stat.S_IFSOCK: pebble.FileType.SOCKET,
    stat.S_IFIFO: pebble.FileType.NAMED_PIPE,
    stat.S_IFBLK: pebble.FileType.DEVICE,  # block device
    stat.S_IFCHR: pebble.FileType.DEVICE,  # character device
}


def from_path(path: StrPathLike, follow_symlinks: bool = True) -> pebble.FileInfo:
    """Stat path and describe it the way Pebble describes files in a workload container.

    Raises:
        FileNotFoundError: if the path does not exist.
        PermissionError: if the path cannot be stat'ed.
    """
    path = os.fspath(path)
    stat_result = os.stat(path, follow_symlinks=follow_symlinks)
    utcoffset = datetime.datetime.now().astimezone().utcoffset()
    timezone = datetime.timezone(utcoffset) if utcoffset is not None else datetime.timezone.utc
    filetype = _FT_MAP.get(stat.S_IFMT(stat_result.st_mode), pebble.FileType.UNKNOWN)
    size = stat_result.st_size if filetype is pebble.FileType.FILE else None
    return pebble.FileInfo(
        path=path,
        name=os.path.basename(path),
        type=filetype,
        size=size,
        permissions=stat.S_IMODE(stat_result.st_mode),
        last_modified=datetime.datetime.fromtimestamp(int(stat_result.st_mtime), tz=timezone),
        user_id=stat_result.st_uid,
        user=_user_name(stat_result.st_uid),
        group_id=stat_result.st_gid,
        group=_group_name(stat_result.st_gid),
    )


def _user_name(uid: int) -> str | None:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:  # no passwd entry, e.g. files owned by a container's user
        return None


def _group_name(gid: int) -> str | None:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return None


def to_dict(info: pebble.FileInfo, exclude: Container[str] = ()) -> dict[str, object]:
    fields = (
        'path',
        'name',
        'type',
        'size',
        'permissions',
        'last_modified',
        'user_id',
        'user',
        'group_id',
        'group',
    )
    return {name: getattr(info, name) for name in fields if name not in exclude}
