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

"""Validation pipeline for framework config files."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..models.file_classifier import classify
from ..models.parsing import parser_for
from ..models.schema_registry import SchemaRegistry
from ..models.schema_validator import validate
from .report import ValidationReport

__all__ = ['ConfigValidator', 'ValidationReport', 'validate_files']

logger = logging.getLogger(__name__)


class ConfigValidator:
    """Classify, parse, validate and report a single config file."""

    def __init__(self, registry: SchemaRegistry):
        self.registry = registry

    def validate(self, file_path: Union[str, Path]) -> Optional[ValidationReport]:
        """Validate one file against its framework schema.

        Returns:
            The emitted report, or None when the file is not a recognized
            config file or could not be parsed
        """
        config_file = classify(file_path, self.registry)
        if config_file is None:
            return None

        parse = parser_for(config_file.extension)
        instance = parse(config_file.file_path)
        if instance is None:
            return None

        logger.debug(f"Validating {config_file.file_path} against schema '{config_file.schema_name}'")
        report = ValidationReport(config_file.file_path, validate(instance.value, config_file.schema))
        report.emit()
        return report


def validate_files(file_paths: Iterable[Union[str, Path]], registry: SchemaRegistry) -> List[ValidationReport]:
    """Validate a sequence of files.

    Args:
        file_paths: Candidate files, in scan order
        registry: Registered framework schemas

    Returns:
        List of ValidationReport objects, one per validated file
    """
    validator = ConfigValidator(registry)
    results = []
    for file_path in file_paths:
        report = validator.validate(file_path)
        if report is not None:
            results.append(report)
    return results
