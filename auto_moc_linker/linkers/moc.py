#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
moc.py - Tag to MOC linking for Auto MOC Linker

This module links notes into Maps of Content: every note carrying a mapped
tag gets a link line under the configured heading of the mapped MOC note.
Running it again over an unchanged vault adds nothing.
"""

import logging
from typing import Dict, List, Optional

from tqdm import tqdm

from ..core.config import Config
from ..core.mapping import TagMapping, ensure_md_extension, resolve_mappings
from ..core.note import Hub, Note, NoteFile
from ..core.storage import MARKDOWN_EXTENSION, ReadError, VaultStorage, WriteError
from ..utils.markdown import DEFAULT_SECTION_HEADING, format_link_line, merge_section
from .base_linker import BaseLinker, Notifier, linker_registry


logger = logging.getLogger(__name__)


class MOCLinker(BaseLinker):
    """
    Linker that appends links to tagged notes in their MOC notes.
    """

    TYPE = "moc"

    def __init__(
        self,
        vault_path: Optional[str] = None,
        settings: Optional[Config] = None,
        storage: Optional[VaultStorage] = None,
        notify: Optional[Notifier] = None,
        progress_bar: bool = False,
    ):
        """
        Initialize the MOC linker.

        Args:
            vault_path: Path to the Obsidian vault
            settings: Configuration to use (defaults to the global config)
            storage: Vault storage (created from vault_path if omitted)
            notify: Callable receiving human-readable progress messages
            progress_bar: Show a tqdm progress bar over the batches
        """
        super().__init__(vault_path, settings, storage, notify)
        self.progress_bar = progress_bar

        # Notes stay cached until invalidated; MOCs are re-read every run
        self.note_cache: Dict[str, Note] = {}
        self.hub_cache: Dict[str, Hub] = {}

    @property
    def tag_mappings(self) -> List[TagMapping]:
        return self.settings["tag_mappings"] or []

    @property
    def section_heading(self) -> str:
        return self.settings["section_heading"] or DEFAULT_SECTION_HEADING

    @property
    def batch_size(self) -> int:
        batch_size = self.settings["batch_size"]
        if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size < 1:
            logger.warning("Invalid batch_size %r, using %d", batch_size, Config.DEFAULTS["batch_size"])
            return Config.DEFAULTS["batch_size"]
        return batch_size

    def invalidate(self, path: str) -> None:
        """
        Forget a cached note after it was modified or deleted.

        Args:
            path: Vault-relative path of the note
        """
        self.note_cache.pop(VaultStorage.normalize_path(path), None)

    def process_notes(self) -> int:
        """
        Link every tagged note under the configured folder into its MOCs.

        Returns:
            Number of links added during this run
        """
        files = self.storage.list_notes(self.settings["default_path"])
        total = len(files)
        batch_size = self.batch_size

        self.notify(f"Auto MOC Linker: Processing {total} notes...")

        self.hub_cache = {}
        added = 0
        processed = 0

        batches = range(0, total, batch_size)
        for start in tqdm(batches, desc="Linking notes", unit="batch", disable=not self.progress_bar):
            batch = files[start:start + batch_size]
            added += self.process_batch(batch)

            processed += len(batch)
            self.notify(f"Auto MOC Linker: Processed {processed}/{total} notes...")

        self.hub_cache = {}

        self.notify(f"Auto MOC Linker complete: Added {added} notes to MOCs")
        return added

    def process_batch(self, files: List[NoteFile]) -> int:
        """
        Link a batch of notes into their MOCs.

        Args:
            files: Notes to process

        Returns:
            Number of links added
        """
        added = 0

        for file in files:
            if file.extension != MARKDOWN_EXTENSION:
                continue

            note = self._load_note(file)
            if note is None or not note.tags:
                continue

            for tag in note.tags:
                mappings = resolve_mappings(tag, self.tag_mappings)
                if not mappings:
                    continue

                added += self.process_tag_mappings(note, mappings)

        return added

    def _load_note(self, file: NoteFile) -> Optional[Note]:
        note = self.note_cache.get(file.path)
        if note is not None:
            return note

        try:
            content = self.storage.read(file)
        except ReadError as e:
            logger.error("Failed to read note %s: %s", file.path, e.reason)
            return None

        note = Note(file, content)
        self.note_cache[file.path] = note
        return note

    def _load_hub(self, hub_path: str) -> Optional[Hub]:
        hub = self.hub_cache.get(hub_path)
        if hub is not None:
            return hub

        hub_file = self.storage.resolve(hub_path)
        if hub_file is None:
            logger.info("MOC note not found at: %s", hub_path)
            return None

        try:
            content = self.storage.read(hub_file)
        except ReadError as e:
            logger.error("Failed to read MOC %s: %s", hub_path, e.reason)
            return None

        hub = Hub(hub_file, content)
        self.hub_cache[hub_path] = hub
        return hub

    def process_tag_mappings(self, note: Note, mappings: List[TagMapping]) -> int:
        """
        Add a link to a note in each mapped MOC that lacks one.

        Args:
            note: The tagged note
            mappings: Mappings matching one of the note's tags

        Returns:
            Number of links added
        """
        added = 0

        for mapping in mappings:
            if not mapping["hub_path"]:
                continue

            hub_path = ensure_md_extension(VaultStorage.normalize_path(mapping["hub_path"]))
            hub = self._load_hub(hub_path)
            if hub is None:
                continue

            if hub.has_link(note.basename):
                continue

            link_line = format_link_line(self.settings["append_format"], note.basename)
            updated = merge_section(hub.content, self.section_heading, link_line)

            try:
                self.storage.write(hub.file, updated)
            except WriteError as e:
                logger.error("Failed to update MOC %s: %s", hub_path, e.reason)
                continue

            hub.update(updated, note.basename)
            added += 1
            logger.debug("Added link to %s in %s", note.basename, hub_path)

        return added


# Register the linker
linker_registry["moc"] = MOCLinker
