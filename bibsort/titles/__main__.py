#!/usr/bin/env python3
"""Allow running as: python3 -m bibsort.titles <command>"""

from bibsort.titles.cli import main
import sys

sys.exit(main() or 0)
