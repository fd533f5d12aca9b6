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

"""Configuration management for the config schema validator."""

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .utils.logging_utils import DEFAULT_FORMAT, ViolationFormatter, configure_split_stream_logging, resolve_level

ENV_PREFIX = "CONFIG_SCHEMA_VALIDATOR_"


def _split_list(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class ValidatorConfig:
    """Configuration class for a validation run."""
    log_level: str = "INFO"
    print_level: str = "WARNING"

    # host framework
    framework_name: str = "mojito"
    framework_path: Optional[str] = None
    schema_dir_name: str = "schemas"

    # scan
    artifacts_dir: str = "artifacts"
    framework_packages: List[str] = field(default_factory=lambda: ["mojito", "mojito-shaker"])
    extra_excludes: List[str] = field(default_factory=list)
    extensions: tuple = (".json", ".yaml")

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        framework_name = os.getenv(ENV_PREFIX + 'FRAMEWORK_NAME', 'mojito')
        return cls(
            log_level=os.getenv(ENV_PREFIX + 'LOG_LEVEL', 'INFO'),
            print_level=os.getenv(ENV_PREFIX + 'PRINT_LEVEL', 'WARNING'),
            framework_name=framework_name,
            framework_path=os.getenv(ENV_PREFIX + 'FRAMEWORK_PATH') or None,
            schema_dir_name=os.getenv(ENV_PREFIX + 'SCHEMA_DIR', 'schemas'),
            framework_packages=[framework_name, f"{framework_name}-shaker"],
            extra_excludes=_split_list(os.getenv(ENV_PREFIX + 'EXCLUDES')),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = resolve_level(self.log_level, logging.INFO)
        stderr_level = resolve_level(self.print_level, logging.WARNING)

        formatter = ViolationFormatter(DEFAULT_FORMAT)
        configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)

        return logging.getLogger('config_schema_validator')


# Global configuration instance
validator_config = ValidatorConfig.from_env()
