#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
storage.py - Vault storage for Auto MOC Linker

This module handles access to the notes on disk:
- Listing Markdown notes in the whole vault or a folder of it
- Reading and writing note content
- Resolving vault-relative paths to note handles
"""

import os
from typing import List, Optional

from .note import NoteFile


MARKDOWN_EXTENSION = "md"
VAULT_ROOT = "/"


class StorageError(Exception):
    """Base class for vault access failures."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ReadError(StorageError):
    """A note could not be read."""


class WriteError(StorageError):
    """A note could not be written."""


class VaultStorage:
    """
    Access to the Markdown notes of an Obsidian vault.

    Paths handed to and returned by this class are relative to the vault root
    and use '/' as separator, the way Obsidian names files.
    """

    def __init__(self, vault_path: str):
        """
        Initialize the storage.

        Args:
            vault_path: Path to the Obsidian vault
        """
        if not vault_path:
            raise ValueError("No vault path provided")
        self.vault_path = os.path.abspath(os.path.expanduser(vault_path))

    @staticmethod
    def normalize_path(path: str) -> str:
        """Turn a user-supplied path into a vault-relative '/' path."""
        return path.replace("\\", "/").strip().strip("/")

    def _abs_path(self, path: str) -> str:
        return os.path.join(self.vault_path, *path.split("/"))

    def _make_file(self, abs_path: str) -> NoteFile:
        rel_path = os.path.relpath(abs_path, self.vault_path).replace(os.sep, "/")
        return NoteFile(rel_path, abs_path)

    def list_notes(self, root: str = VAULT_ROOT) -> List[NoteFile]:
        """
        List all Markdown notes under a folder.

        Args:
            root: Vault-relative folder, or "/" for the entire vault

        Returns:
            Note handles sorted by path (empty if the folder does not exist)
        """
        folder = self.normalize_path(root or VAULT_ROOT)
        start = self._abs_path(folder) if folder else self.vault_path

        if not os.path.isdir(start):
            return []

        notes = []
        for dirpath, dirs, files in os.walk(start):
            # Skip hidden directories (.obsidian, .trash, ...)
            dirs[:] = [d for d in dirs if not d.startswith('.')]

            for file in files:
                if file.endswith("." + MARKDOWN_EXTENSION):
                    notes.append(self._make_file(os.path.join(dirpath, file)))

        notes.sort(key=lambda note: note.path)
        return notes

    def resolve(self, path: str) -> Optional[NoteFile]:
        """
        Find the file at a vault-relative path.

        Args:
            path: Vault-relative path, including the extension

        Returns:
            A note handle, or None if no such file exists
        """
        rel_path = self.normalize_path(path)
        if not rel_path:
            return None

        abs_path = self._abs_path(rel_path)
        if not os.path.isfile(abs_path):
            return None

        return NoteFile(rel_path, abs_path)

    def read(self, note: NoteFile) -> str:
        """
        Read a note's content.

        Raises:
            ReadError: If the file is missing, unreadable or not valid UTF-8
        """
        try:
            with open(note.abs_path, 'r', encoding='utf-8', newline='') as f:
                return f.read()
        except (OSError, UnicodeError) as e:
            raise ReadError(note.path, str(e)) from e

    def write(self, note: NoteFile, content: str) -> None:
        """
        Replace a note's content.

        Raises:
            WriteError: If the file cannot be written
        """
        try:
            with open(note.abs_path, 'w', encoding='utf-8', newline='') as f:
                f.write(content)
        except OSError as e:
            raise WriteError(note.path, str(e)) from e
