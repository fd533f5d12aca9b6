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

"""Error reporting for the config validator."""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..models.schema_validator import ViolationRecord

logger = logging.getLogger(__name__)

CONTEXT_ROOT = "context"
_INDEX_SEGMENT = re.compile(r"[0-9]*")


def _jp_unescape(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


def render_config_path(pointer: Optional[str]) -> str:
    """Turn a violation pointer into a readable config trail.

    The first segment (empty for an absolute pointer) is the document root and
    renders as ``context``. Numeric segments become index suffixes, any other
    segment becomes an arrow-separated field name::

        ""               -> context
        "/name"          -> context -> name
        "/specs/0/type"  -> context -> specs[0] -> type
    """
    config = CONTEXT_ROOT
    for segment in (pointer or "").split("/")[1:]:
        if _INDEX_SEGMENT.fullmatch(segment):
            config += f"[{segment}]"
        else:
            config += f" -> {_jp_unescape(segment)}"
    return config


def format_details(details: Any) -> str:
    if isinstance(details, (list, tuple)):
        return ", ".join(json.dumps(value) for value in details)
    return str(details)


def format_violation_message(violation: ViolationRecord) -> str:
    """Return the violation message, with the allowed values for enum failures."""
    if violation.is_enum:
        return f"{violation.message}: {format_details(violation.details)}"
    return violation.message


def report_violations(violations: Sequence[ViolationRecord], file_path: Path) -> List[Dict[str, str]]:
    """Log the outcome of validating one file.

    Args:
        violations: Violations in the order the validator produced them
        file_path: Path of the validated file

    Returns:
        The warning records that were logged, one per violation
    """
    if not violations:
        logger.info(f"config validation passed ({file_path}).")
        return []

    logger.error(f"Possible errors in config file: {file_path}")

    records = []
    for violation in violations:
        info = {
            'config': render_config_path(violation.pointer),
            'message': format_violation_message(violation),
        }
        logger.warning(info)
        records.append(info)
    return records


class ValidationReport:
    """Container for the validation result of a single file."""

    def __init__(self, file_path: Path, violations: Optional[List[ViolationRecord]] = None):
        """Initialize validation report.

        Args:
            file_path: Path to the validated file
            violations: Violations found, empty when the file passed
        """
        self.file_path = file_path
        self.violations: List[ViolationRecord] = list(violations or [])

    @property
    def passed(self) -> bool:
        return not self.violations

    def emit(self) -> List[Dict[str, str]]:
        return report_violations(self.violations, self.file_path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file': str(self.file_path),
            'passed': self.passed,
            'violations': [
                {
                    'pointer': v.pointer,
                    'config': render_config_path(v.pointer),
                    'message': format_violation_message(v),
                }
                for v in self.violations
            ],
        }
