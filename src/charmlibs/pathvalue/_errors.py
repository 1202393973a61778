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

"""Exception types raised by this package, and helpers for raising them."""

from __future__ import annotations

import typing


class CreateError(OSError):
    """A directory or file could not be created.

    Carries the ``errno`` and ``strerror`` of the underlying :class:`OSError`, which is also
    available as ``__cause__``. The ``filename`` attribute is the path that was being created.
    """


def raise_create_error(action: str, path: str, from_: OSError) -> typing.NoReturn:
    msg = f'failed to {action}: {from_.strerror or from_}'
    raise CreateError(from_.errno, msg, path) from from_


class PatternError(ValueError):
    """A pattern passed to :meth:`PathValue.find` is malformed, such as an unclosed ``[``."""
