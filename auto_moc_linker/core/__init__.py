#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Core package - Core functionality for Auto MOC Linker

This package contains the core functionality:
- Note: Data model for notes and MOC notes
- Config: Configuration management
- Mapping: Tag to MOC mappings
- Storage: Vault file access
"""

from .note import Note, NoteFile, Hub
from .config import config, Config, ConfigError
from .mapping import TagMapping, resolve_mappings, ensure_md_extension, strip_hash
from .storage import VaultStorage, StorageError, ReadError, WriteError
