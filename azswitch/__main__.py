#!/usr/bin/env python3
"""
AZSwitch entry point for running as a module: python3 -m azswitch
"""

import sys
from azswitch.cli import main

if __name__ == '__main__':
    sys.exit(main())
