"""Allow ``python -m groupmixer``."""

import sys

from groupmixer.cli import main

if __name__ == "__main__":
    sys.exit(main())
