"""Allow running as ``python -m dtheader``."""

import sys

from dtheader.cli import main

sys.exit(main())
