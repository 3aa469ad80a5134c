# Filename: __main__.py
# Author: Rich Lewis @RichLewis007
# Description: Allows running Target Sweeper with ``python -m sweeper``.

from __future__ import annotations

import sys

from .app import main

if __name__ == "__main__":
    sys.exit(main())
