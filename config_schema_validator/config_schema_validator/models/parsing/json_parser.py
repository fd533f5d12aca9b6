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

"""JSON config parser with syntax error diagnosis."""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from .instance import ParsedInstance

logger = logging.getLogger(__name__)


class _RejectedConstant(ValueError):
    def __init__(self, name: str):
        super().__init__(f"Invalid JSON literal: {name}")
        self.name = name


def _reject_constant(name: str):
    # NaN, Infinity and -Infinity are not JSON
    raise _RejectedConstant(name)


def find_bare_token(content: str, token: str) -> int:
    """Return the offset of the first ``token`` outside a JSON string, or -1."""
    in_string = False
    escaped = False
    for index, char in enumerate(content):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif content.startswith(token, index):
            return index
    return -1


def loads_strict(content: str):
    """Decode ``content`` as strict JSON.

    Raises:
        json.JSONDecodeError: For syntax errors, including non-finite literals,
            positioned at the offending token
    """
    try:
        return json.loads(content, parse_constant=_reject_constant)
    except _RejectedConstant as e:
        position = max(find_bare_token(content, e.name), 0)
        raise json.JSONDecodeError(str(e), content, position) from e


def format_syntax_error(content: str, error: json.JSONDecodeError) -> str:
    """Render a decode error with its position and the offending line.

    Example::

        Parse error on line 3, column 1: Illegal trailing comma before end of object
        }
        ^
    """
    message = f"Parse error on line {error.lineno}, column {error.colno}: {error.msg}"
    lines = content.splitlines()
    if 0 < error.lineno <= len(lines):
        source_line = lines[error.lineno - 1]
        message += f"\n{source_line}\n{'-' * (error.colno - 1)}^"
    return message


def format_encoding_error(data: bytes, error: UnicodeDecodeError) -> str:
    """Render an undecodable byte sequence with its line and (byte) column."""
    line = data.count(b"\n", 0, error.start) + 1
    column = error.start - (data.rfind(b"\n", 0, error.start) + 1) + 1
    return (
        f"Parse error on line {line}, column {column}: {error.reason} "
        f"(byte 0x{data[error.start]:02x}, expected UTF-8)"
    )


def diagnose_json(content: str, primary_error: Exception) -> str:
    """Build a detailed syntax-error message for content that failed to parse.

    A second, more permissive decode (control characters and non-finite
    literals allowed) reports the line and column of the first real syntax
    error. When the permissive decode succeeds, the strict failure itself is
    the most specific description available.
    """
    if isinstance(primary_error, RecursionError):
        return f"Parse error: nesting too deep ({primary_error})"

    try:
        json.JSONDecoder(strict=False).decode(content)
    except json.JSONDecodeError as e:
        return format_syntax_error(content, e)
    except RecursionError:
        pass

    if isinstance(primary_error, json.JSONDecodeError):
        return format_syntax_error(content, primary_error)
    return str(primary_error)


def parse_json(file_path: Union[str, Path]) -> Optional[ParsedInstance]:
    """Parse a JSON config file.

    Args:
        file_path: Path to the JSON file

    Returns:
        The parsed instance, or None if the file is not valid JSON. Syntax
        errors are logged (an error naming the file followed by a warning
        with the details) and never raised.

    Raises:
        OSError: If the file cannot be read
    """
    path = Path(file_path)
    logger.debug(f"Loading JSON config file: {path}")

    data = path.read_bytes()
    try:
        content = data.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.error(f"JSON parse error in file: {path}")
        logger.warning(format_encoding_error(data, e))
        return None

    try:
        value = loads_strict(content)
    except (ValueError, RecursionError) as e:
        logger.error(f"JSON parse error in file: {path}")
        logger.warning(diagnose_json(content, e))
        return None

    return ParsedInstance(file_path=path, value=value)
