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

"""Result of an effectful operation that may have failed part way through."""

from __future__ import annotations

import dataclasses
import typing

T = typing.TypeVar('T')


@dataclasses.dataclass(frozen=True)
class Outcome(typing.Generic[T]):
    """A value together with the error that interrupted its computation, if any.

    On failure, ``value`` is whatever was produced before the error occurred,
    which may be a partial result or a sentinel such as ``None``.
    """

    value: T
    error: Exception | None = None
