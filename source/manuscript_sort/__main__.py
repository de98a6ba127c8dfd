# source/manuscript_sort/__main__.py

import sys

from .experiments import main

if __name__ == "__main__":
    # python -m manuscript_sort input.txt
    sys.exit(main())
