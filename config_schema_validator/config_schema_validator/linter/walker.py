# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Project tree traversal."""

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Set, Union

from ..config import ValidatorConfig


def default_excludes(root: Path, config: ValidatorConfig) -> List[Path]:
    """Directories never scanned: build artifacts and the framework itself."""
    excludes = [root / config.artifacts_dir]
    excludes.extend(root / "node_modules" / package for package in config.framework_packages)
    excludes.extend(root / extra for extra in config.extra_excludes)
    return excludes


def walk(root: Union[str, Path], excludes: Iterable[Union[str, Path]] = ()) -> Iterator[Path]:
    """Yield every file below ``root``, depth first in name order.

    Directories listed in ``excludes`` are not entered. Errors reading a
    directory (e.g. permission denied) are raised to the caller.
    """
    excluded: Set[str] = {os.path.abspath(path) for path in excludes}
    yield from _walk(os.path.abspath(root), excluded)


def _walk(directory: str, excluded: Set[str]) -> Iterator[Path]:
    for name in sorted(os.listdir(directory)):
        path = os.path.join(directory, name)
        if os.path.isdir(path):
            if path not in excluded:
                yield from _walk(path, excluded)
        else:
            yield Path(path)
