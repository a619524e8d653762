# -*- coding: utf-8 -*-

"""
Main entry point for launching the Catalog Toolkit command line.
"""

import sys

from catalog_toolkit.cli import main

if __name__ == '__main__':
    sys.exit(main())
