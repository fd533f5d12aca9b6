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

"""YAML config parser."""

import yaml
import base64
import datetime
import logging
from pathlib import Path
from typing import Any, Optional, Union

from .instance import ParsedInstance

logger = logging.getLogger(__name__)


def _json_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    if isinstance(key, (datetime.date, datetime.datetime)):
        return key.isoformat()
    return str(key)


def to_json_compatible(value: Any) -> Any:
    """Convert safe_load output to the JSON data model.

    Mapping keys become strings, dates and timestamps become ISO 8601
    strings, ``!!set`` becomes a list and ``!!binary`` a base64 string.
    """
    if isinstance(value, dict):
        return {_json_key(k): to_json_compatible(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_compatible(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return sorted((to_json_compatible(item) for item in value), key=str)
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    return value


def load_yaml_string(content: str) -> Any:
    """Decode YAML content. An empty document decodes to an empty mapping."""
    config_data = yaml.safe_load(content)
    if config_data is None:
        config_data = {}
    return to_json_compatible(config_data)


def parse_yaml(file_path: Union[str, Path]) -> Optional[ParsedInstance]:
    """Parse a YAML config file.

    Unlike JSON there is no second diagnosis pass: PyYAML's error message
    already carries the problem mark (line and column) and is logged as-is.
    Constructor failures outside the YAMLError family (an impossible implicit
    timestamp such as ``2020-13-45`` raises ValueError) and documents nested
    too deeply to compose are reported the same way.

    Args:
        file_path: Path to the YAML file

    Returns:
        The parsed instance, or None if the file could not be decoded

    Raises:
        OSError: If the file cannot be read
    """
    path = Path(file_path)
    logger.debug(f"Loading YAML config file: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        config_data = load_yaml_string(content)
    except (yaml.YAMLError, ValueError, RecursionError) as exc:
        logger.error(f"YAML parse error in file: {path}")
        if isinstance(exc, RecursionError):
            logger.warning(f"nesting too deep ({exc})")
        else:
            logger.warning(str(exc))
        return None

    return ParsedInstance(file_path=path, value=config_data)
