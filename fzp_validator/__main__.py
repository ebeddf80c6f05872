"""Module entrypoint for `python -m fzp_validator`.

Delegates to the validator CLI implementation.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
