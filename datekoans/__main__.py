"""Allow ``python -m datekoans``."""

from __future__ import annotations

import sys

from datekoans.cli import main

sys.exit(main())
