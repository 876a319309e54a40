"""Allow ``python -m fair_rps``."""

import sys

from .cli import main

sys.exit(main())
