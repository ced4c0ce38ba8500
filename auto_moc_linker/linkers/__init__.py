#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Linkers package - Link generation modules for Auto MOC Linker

This package contains the link generation strategies:
- MOC linking: links tagged notes into their Maps of Content
"""

# Import linkers to register them
from . import moc

# Import the registry for easy access
from .base_linker import linker_registry, BaseLinker
