"""Module entrypoint for `python -m config_schema_validator.linter`.

Delegates to the validator CLI implementation.
"""

import sys

from .run_validate import main


if __name__ == "__main__":
    sys.exit(main())
