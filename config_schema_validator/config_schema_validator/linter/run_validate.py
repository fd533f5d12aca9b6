#!/usr/bin/env python3
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

"""CLI entry point for validating a project's framework config files."""

import argparse
import json
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..config import ValidatorConfig, validator_config
from ..exceptions import ValidationRunError
from ..models.schema_registry import SchemaRegistry, discover_schemas
from . import ValidationReport, validate_files
from .walker import default_excludes, walk

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class RunResult:
    """Outcome of a completed run."""
    message: str
    reports: List[ValidationReport] = field(default_factory=list)


def locate_framework(
    root: Path,
    config: ValidatorConfig,
    explicit: Optional[PathLike] = None,
) -> Optional[Path]:
    """Find the host framework installation.

    Lookup order: explicit path, configured path, then
    ``<root>/node_modules/<framework_name>``.
    """
    for candidate in (explicit, config.framework_path):
        if candidate:
            path = Path(candidate)
            return path.resolve() if path.is_dir() else None

    installed = root / "node_modules" / config.framework_name
    if installed.is_dir():
        return installed.resolve()
    return None


def check_arguments(args: Sequence[str]) -> None:
    if args:
        raise ValidationRunError("Unknown extra parameters.")


def scan(
    root: Optional[PathLike] = None,
    framework_path: Optional[PathLike] = None,
    config: Optional[ValidatorConfig] = None,
) -> List[ValidationReport]:
    """Validate every recognized config file under ``root``.

    Raises:
        ValidationRunError: If the framework or its schemas cannot be found
        SchemaError: If a framework schema cannot be loaded
        OSError: If the project tree cannot be traversed
    """
    config = config or validator_config
    root = Path(root or os.getcwd()).resolve()

    framework = locate_framework(root, config, framework_path)
    if framework is None:
        raise ValidationRunError(f"Cannot find {config.framework_name}.")

    sources = discover_schemas(framework, config.schema_dir_name)
    if not sources:
        raise ValidationRunError(f"Cannot find {config.framework_name} configuration schemas.")

    registry = SchemaRegistry.from_sources(sources)
    logger.debug(f"Registered {len(registry)} schemas: {', '.join(registry.names())}")

    candidates = (
        path for path in walk(root, default_excludes(root, config))
        if path.suffix in config.extensions
    )
    return validate_files(candidates, registry)


def run(
    args: Sequence[str] = (),
    root: Optional[PathLike] = None,
    framework_path: Optional[PathLike] = None,
    config: Optional[ValidatorConfig] = None,
) -> RunResult:
    """Run a full validation.

    Returns:
        The completion message and the report of every validated file

    Raises:
        ValidationRunError: With the operator-facing reason when the run
            cannot start
    """
    config = config or validator_config
    check_arguments(args)
    reports = scan(root, framework_path, config)
    return RunResult(message=f"{config.framework_name} validate done.", reports=reports)


def _print_json(reports: List[ValidationReport]) -> None:
    output = {
        'files': len(reports),
        'failed': sum(1 for r in reports if not r.passed),
        'violations': sum(len(r.violations) for r in reports),
        'results': [r.to_dict() for r in reports],
    }
    print(json.dumps(output, indent=2))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the validator CLI."""
    parser = argparse.ArgumentParser(
        description='Validate framework configuration files (JSON and YAML) against the framework schemas',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'extra',
        nargs='*',
        help=argparse.SUPPRESS,
    )
    parser.add_argument(
        '--root',
        default=None,
        help='Project root to scan (default: current directory)',
    )
    parser.add_argument(
        '--framework-path',
        default=None,
        help='Framework installation directory (default: <root>/node_modules/<framework>)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Log level (default: from environment, INFO)',
    )

    args = parser.parse_args(argv)

    config = ValidatorConfig.from_env()
    if args.log_level:
        config.log_level = args.log_level
    config.set_logging()

    try:
        result = run(args.extra, args.root, args.framework_path, config)
    except ValidationRunError as e:
        print(str(e), file=sys.stderr)
        return 1

    if args.format == 'json':
        _print_json(result.reports)
    else:
        print(result.message)
    return 0


if __name__ == '__main__':
    sys.exit(main())
