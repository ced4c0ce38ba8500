#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
base_linker.py - Abstract base class for all linker implementations

This module defines the BaseLinker class, which provides the common interface
and shared functionality for note linking strategies.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Type

from ..core.config import Config, config as default_config
from ..core.storage import VaultStorage


logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]


class BaseLinker(ABC):
    """
    Abstract base class for all note linkers.

    Linking strategies inherit from this class and implement process_notes().
    """

    # Type of the linker - subclasses should override
    TYPE = "base"

    def __init__(
        self,
        vault_path: Optional[str] = None,
        settings: Optional[Config] = None,
        storage: Optional[VaultStorage] = None,
        notify: Optional[Notifier] = None,
    ):
        """
        Initialize the linker.

        Args:
            vault_path: Path to the Obsidian vault (defaults to config value)
            settings: Configuration to use (defaults to the global config)
            storage: Vault storage (created from vault_path if omitted)
            notify: Callable receiving human-readable progress messages
        """
        self.settings = settings if settings is not None else default_config

        if storage is None:
            storage = VaultStorage(vault_path or self.settings["vault_path"])
        self.storage = storage
        self.vault_path = storage.vault_path

        self.notify: Notifier = notify or (lambda message: logger.info(message))

    def run(self) -> int:
        """
        Run the linker over the vault.

        Returns:
            The number of links added
        """
        start_time = time.time()

        added = self.process_notes()

        elapsed_time = time.time() - start_time
        logger.debug("%s linking completed in %.2fs - added %d links",
                     self.TYPE.upper(), elapsed_time, added)

        return added

    @abstractmethod
    def process_notes(self) -> int:
        """
        Process notes to generate links.

        Returns:
            Number of links added
        """


# Registry of linker implementations
linker_registry: Dict[str, Type[BaseLinker]] = {}
