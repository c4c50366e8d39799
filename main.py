#!/usr/bin/env python3
"""
HTML Structure Diff
Main entry point for the application.
"""

import sys

from htmldiff.cli import main

if __name__ == "__main__":
    sys.exit(main())
