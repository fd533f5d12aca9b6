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

"""Registry of the JSON Schema documents shipped with the host framework."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..exceptions import FileReadError, SchemaParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaSource:
    """A schema file found on disk and the name it is registered under."""
    name: str
    path: Path


def schema_name_for(file_path: Union[str, Path]) -> str:
    """Return the schema name of a file: its base name up to the first dot.

    ``/app/application.json`` and ``/app/application.dev.yaml`` both map to
    ``application``.
    """
    return Path(file_path).name.split(".")[0]


def discover_schemas(framework_path: Union[str, Path], schema_dir_name: str = "schemas") -> List[SchemaSource]:
    """List the schema files under ``<framework_path>/<schema_dir_name>``.

    Args:
        framework_path: Installation directory of the host framework
        schema_dir_name: Name of the schema subdirectory

    Returns:
        Schema sources sorted by file name. Empty when the directory does not
        exist, which older framework releases without schemas are allowed to do.
    """
    schema_dir = Path(framework_path).resolve() / schema_dir_name

    if not schema_dir.is_dir():
        logger.debug("no schemas found at %s", schema_dir)
        return []

    return [
        SchemaSource(name=schema_name_for(entry), path=entry)
        for entry in sorted(schema_dir.iterdir())
        if entry.is_file()
    ]


class SchemaRegistry:
    """Mapping from schema name to decoded schema document.

    Each validation run builds its own registry; registration is finished
    before the first lookup.
    """

    def __init__(self):
        self._schemas: Dict[str, dict] = {}

    @classmethod
    def from_sources(cls, sources: Iterable[SchemaSource]) -> 'SchemaRegistry':
        registry = cls()
        for source in sources:
            registry.register(source.name, source.path)
        return registry

    def register(self, name: str, schema_path: Union[str, Path]) -> None:
        """Load a schema file and store it under ``name``.

        A schema registered under an existing name replaces the previous one.

        Raises:
            FileReadError: If the schema file is missing or unreadable
            SchemaParseError: If the schema file is invalid JSON
        """
        path = Path(schema_path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(f"Failed to read schema file {path}: {e}") from e

        try:
            schema = json.loads(content)
        except json.JSONDecodeError as e:
            raise SchemaParseError(f"Invalid JSON in schema file {path}: {e}") from e

        if name in self._schemas:
            logger.debug(f"Schema '{name}' overridden by {path}")
        self._schemas[name] = schema

    def lookup(self, name: str) -> Optional[dict]:
        return self._schemas.get(name)

    def names(self) -> List[str]:
        return sorted(self._schemas)

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)
