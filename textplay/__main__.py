"""Allow ``python -m textplay`` to launch the application."""

import sys

from textplay.main import main

if __name__ == "__main__":
    sys.exit(main())
