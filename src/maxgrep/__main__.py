"""Allow ``python -m maxgrep``."""

import sys

from maxgrep.cli import main

sys.exit(main())
