"""Allow running as: python -m badmoney"""

import sys

from badmoney.cli import main

sys.exit(main())
