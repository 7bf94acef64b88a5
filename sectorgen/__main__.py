"""Run the sectorgen command line: python -m sectorgen."""

import sys

from .cli import main

sys.exit(main())
