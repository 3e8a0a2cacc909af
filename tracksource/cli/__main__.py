"""Allow ``python -m tracksource.cli`` execution."""

import sys

from tracksource.cli.search import main

sys.exit(main())
