# =============================================================================
# MM PERFORMANCE SCORING - ENTRY POINT
# =============================================================================
#
# Allows running: python -m reporting --data <file>
#
# =============================================================================

import sys

from .run import main

if __name__ == "__main__":
    sys.exit(main())
