"""Allow ``python -m consoler``."""

import sys

from consoler.cli import main

sys.exit(main())
