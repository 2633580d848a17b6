"""Allow ``python -m credname``."""

import sys

from credname.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
