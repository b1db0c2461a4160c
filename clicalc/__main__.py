"""CLI: python -m clicalc [--debug] [--expr TEXT]"""

import sys

from clicalc.shell import main

if __name__ == "__main__":
    sys.exit(main())
