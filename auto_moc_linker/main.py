#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
main.py - Entry point for Auto MOC Linker

This script parses the command line, builds the configuration and runs the
MOC linker over the vault.
"""

import logging
import signal
import sys
import time
from datetime import datetime
from typing import Optional, Sequence

from tqdm import tqdm

from .core.config import Config, ConfigError
from .linkers.base_linker import linker_registry


logger = logging.getLogger(__name__)


def signal_handler(sig, frame):
    """Handle interrupt signals."""
    print("\nInterrupted by user. Exiting...")
    # Standard exit code for SIGINT
    sys.exit(130)


def setup_logging(verbose: bool) -> None:
    """Configure logging for command line use."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None, settings: Optional[Config] = None) -> int:
    """
    Main entry point for the Auto MOC Linker tool.

    Args:
        argv: Command line arguments (defaults to sys.argv)
        settings: Configuration to start from (defaults to a new Config read
            from the default config file locations and the environment)

    Returns:
        Process exit code
    """
    # Register signal handlers for clean exit on Ctrl+C
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        if settings is None:
            settings = Config()
        args = settings.load_from_args(argv)
        settings.validate()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(bool(settings["verbose"]))

    if args.save_config:
        try:
            settings.save_to_file(args.save_config)
        except ConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(f"Starting Auto MOC Linker at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"Using vault path: {settings['vault_path']}")
    start_time = time.time()

    if not settings["tag_mappings"]:
        print("No tag mappings configured. Add tag_mappings to the config file or use --map TAG=MOC")

    linker = linker_registry["moc"](settings=settings, notify=tqdm.write, progress_bar=True)
    added = linker.run()

    elapsed_time = time.time() - start_time
    print(f"\nLinking completed in {elapsed_time:.2f} seconds - added {added} links")
    return 0


if __name__ == "__main__":
    sys.exit(main())
