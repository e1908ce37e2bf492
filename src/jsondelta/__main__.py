"""Allow ``python -m jsondelta``."""

import sys

from .main import main

sys.exit(main())
