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

"""Custom exceptions for the config schema validator."""


class ConfigValidatorError(Exception):
    """Base exception for config-validator related errors."""
    pass


class SchemaError(ConfigValidatorError):
    """Exception raised when a framework schema cannot be registered."""
    pass


class FileReadError(SchemaError):
    """Exception raised when a schema file is missing or unreadable."""
    pass


class SchemaParseError(SchemaError):
    """Exception raised when a schema file is not valid JSON."""
    pass


class ValidationRunError(ConfigValidatorError):
    """Exception raised when a validation run cannot start.

    The exception message is the operator-facing reason, e.g.
    ``Cannot find mojito.``.
    """
    pass
