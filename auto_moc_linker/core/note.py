#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
note.py - Note data model for Auto MOC Linker

This module defines the objects the linker works with:
- NoteFile: a handle on a Markdown file inside the vault
- Note: a note's content and the tags extracted from it
- Hub: a MOC note's content and the note names it already links to
"""

import os
import posixpath
from typing import List, Set

from ..utils.markdown import extract_links, extract_tags


class NoteFile:
    """
    Handle on a file in the vault.

    Attributes:
        path: Vault-relative path using '/' separators (e.g., "Maths/MOC.md")
        abs_path: Absolute path on disk
        basename: File name without extension, used as the link target
        extension: Extension without the dot (e.g., "md")
    """

    def __init__(self, path: str, abs_path: str):
        self.path = path
        self.abs_path = abs_path
        filename = posixpath.basename(path)
        self.basename, extension = os.path.splitext(filename)
        self.extension = extension[1:]

    def __eq__(self, other) -> bool:
        return isinstance(other, NoteFile) and other.path == self.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        return f"NoteFile({self.path!r})"


class Note:
    """
    A note read during a linking run.

    Tags are extracted once when the note is created; the content is never
    modified.
    """

    def __init__(self, file: NoteFile, content: str):
        self.file = file
        self.content = content
        self.tags: List[str] = extract_tags(content)

    @property
    def path(self) -> str:
        return self.file.path

    @property
    def basename(self) -> str:
        return self.file.basename


class Hub:
    """
    A MOC note and the set of note names it already links to.
    """

    def __init__(self, file: NoteFile, content: str):
        self.file = file
        self.content = content
        self.links: Set[str] = extract_links(content)

    def has_link(self, note_name: str) -> bool:
        """Check whether the hub already links to a note."""
        return note_name in self.links

    def update(self, content: str, note_name: str) -> None:
        """
        Record a successful insertion without re-parsing the hub.

        Args:
            content: Hub content as written to disk
            note_name: Name of the note that was linked
        """
        self.content = content
        self.links.add(note_name)
