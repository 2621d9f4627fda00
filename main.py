#!/usr/bin/env python3
"""
Main entry point for the ircwire line reader
"""

import sys

from ircwire.main import main

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
