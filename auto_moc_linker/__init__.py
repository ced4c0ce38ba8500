#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Auto MOC Linker - Link tagged Obsidian notes into their Maps of Content

This package provides functionality for:
- Extracting tags from note frontmatter and inline #tags
- Mapping tags to MOC (hub) notes
- Appending a link to each tagged note under a MOC section heading, once
"""

__version__ = "0.1.0"

# Import core modules
from .core.config import config, Config, ConfigError
from .core.storage import VaultStorage, ReadError, WriteError
from .core.note import Note, NoteFile, Hub

# Import linkers
from .linkers.base_linker import linker_registry
from . import linkers
