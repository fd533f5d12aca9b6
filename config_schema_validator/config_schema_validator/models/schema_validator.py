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

"""Structural validation of config instances against framework schemas.

Framework schemas are written against JSON Schema draft-03. A schema that
declares another draft through ``$schema`` is checked with that draft's rules.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from jsonschema import Draft3Validator
from jsonschema.exceptions import ValidationError
from jsonschema.validators import validator_for

JsonPointer = str

ENUM_KEYWORD = "enum"
ENUM_MESSAGE = "Instance is not one of the possible values"


@dataclass(frozen=True)
class ViolationRecord:
    pointer: JsonPointer
    message: str
    keyword: Optional[str] = None
    details: Any = None

    @property
    def is_enum(self) -> bool:
        return self.keyword == ENUM_KEYWORD


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def to_pointer(segments: Iterable[Any]) -> JsonPointer:
    """Join instance path segments into a JSON pointer ("" for the root)."""
    return "".join(f"/{_jp_escape(str(segment))}" for segment in segments)


def _error_segments(error: ValidationError) -> List[Any]:
    segments = list(error.absolute_path)

    # Draft-03 marks a property as required inside its own subschema
    # (``"required": true``) and reports the error on the parent object with a
    # trailing "required" segment. Point at the missing property instead.
    if error.validator == "required" and isinstance(error.validator_value, bool):
        if segments and segments[-1] == "required":
            segments.pop()
        if len(error.relative_schema_path) >= 2:
            segments.append(error.relative_schema_path[-2])

    return segments


def to_violation(error: ValidationError) -> ViolationRecord:
    pointer = to_pointer(_error_segments(error))

    if error.validator == ENUM_KEYWORD:
        return ViolationRecord(
            pointer=pointer,
            message=ENUM_MESSAGE,
            keyword=ENUM_KEYWORD,
            details=list(error.validator_value),
        )

    return ViolationRecord(pointer=pointer, message=error.message, keyword=error.validator)


def validate(instance: Any, schema: dict) -> List[ViolationRecord]:
    """Validate an instance against a schema.

    Args:
        instance: Decoded config value
        schema: Schema document from the registry

    Returns:
        One ViolationRecord per violated constraint, in the order the
        validator reports them. An empty list means the instance is valid.
    """
    validator_cls = validator_for(schema, default=Draft3Validator)
    validator = validator_cls(schema)
    return [to_violation(error) for error in validator.iter_errors(instance)]
