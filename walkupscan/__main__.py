"""Run the WalkupScan watcher with ``python -m walkupscan``."""

import sys

from .cli import main

sys.exit(main())
