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

"""Match project files to the framework schema that describes them."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .schema_registry import SchemaRegistry, schema_name_for


class ConfigFormat:
    """Supported config file extensions."""
    JSON = ".json"
    YAML = ".yaml"

    @classmethod
    def get_all_formats(cls) -> tuple:
        return (cls.JSON, cls.YAML)


@dataclass(frozen=True)
class ConfigFile:
    file_path: Path
    extension: str
    schema_name: str
    schema: dict


def classify(file_path: Union[str, Path], registry: SchemaRegistry) -> Optional[ConfigFile]:
    """Classify a file for validation.

    Only files in a framework-recognized category are checked: the extension
    must be ``.json`` or ``.yaml`` and the base name must match a registered
    schema. Anything else returns None and is ignored without output.
    """
    path = Path(file_path)
    extension = path.suffix
    if extension not in ConfigFormat.get_all_formats():
        return None

    schema_name = schema_name_for(path)
    schema = registry.lookup(schema_name)
    if schema is None:
        return None

    return ConfigFile(file_path=path, extension=extension, schema_name=schema_name, schema=schema)
