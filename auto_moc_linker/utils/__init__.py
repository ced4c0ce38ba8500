#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Utils package - Utility functions for Auto MOC Linker

This package contains the Markdown helpers used for linking:
- Tag and wiki link extraction
- Inserting links under a section heading
"""

from .markdown import (
    extract_frontmatter,
    extract_tags,
    extract_links,
    format_link_line,
    merge_section,
)
