"""Allow ``python -m sasacalc``."""

import sys

from sasacalc.cli.main import main

sys.exit(main())
