"""Allow ``python -m costura``."""

import sys

from costura.cli import main

if __name__ == "__main__":
    sys.exit(main())
