#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
__main__.py - Entry point for the auto_moc_linker package

This file allows the package to be run directly with:
python -m auto_moc_linker
"""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
