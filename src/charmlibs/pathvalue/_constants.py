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

"""Default permissions used when creating files and directories."""

DEFAULT_MKDIR_MODE = 0o755
"""Used by :meth:`PathValue.mkdir`, matching the mode Pebble uses for ``make_dir``."""

DEFAULT_WRITE_MODE = 0o644
"""Used by :meth:`PathValue.touch` and :func:`ensure_contents`."""
