#!/usr/bin/env python3
"""Entry point script for Vibe Finder."""

import asyncio
import sys
from vibe_finder.app import main

if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
