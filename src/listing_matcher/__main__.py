"""Allow running with: python -m listing_matcher"""

import sys

from .cli import main

sys.exit(main())
