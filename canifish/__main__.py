"""Allow ``python -m canifish``."""

import sys

from canifish.cli import main

sys.exit(main())
