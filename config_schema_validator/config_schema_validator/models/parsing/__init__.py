"""Format-specific parsers for config files.

Every parser takes a path and returns a ParsedInstance, or None when the
content could not be decoded. Decode failures are logged by the parser and
never raised, so one broken file does not stop a scan.
"""

from pathlib import Path
from typing import Callable, Optional, Union

from .instance import ParsedInstance
from .json_parser import parse_json
from .yaml_parser import parse_yaml

Parser = Callable[[Union[str, Path]], Optional[ParsedInstance]]

_PARSERS = {
    ".json": parse_json,
    ".yaml": parse_yaml,
}


def parser_for(extension: str) -> Optional[Parser]:
    """Return the parser registered for a file extension, if any."""
    return _PARSERS.get(extension)


__all__ = ['ParsedInstance', 'parse_json', 'parse_yaml', 'parser_for']
