#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
mapping.py - Tag to MOC mappings for Auto MOC Linker

A mapping ties a tag to the hub note (Map of Content) that should collect
links to every note carrying that tag.
"""

from typing import Any, Dict, Iterable, List, TypedDict


MARKDOWN_SUFFIX = ".md"


class TagMapping(TypedDict):
    """A single tag -> hub note association"""
    tag: str
    hub_path: str


def strip_hash(tag: str) -> str:
    """Remove a single leading '#' from a tag."""
    return tag[1:] if tag.startswith("#") else tag


def ensure_md_extension(path: str) -> str:
    """
    Make sure a hub path points at a Markdown file.

    Args:
        path: Hub path, with or without the .md extension

    Returns:
        The path with a .md extension
    """
    if not path or path.lower().endswith(MARKDOWN_SUFFIX):
        return path
    return path + MARKDOWN_SUFFIX


def resolve_mappings(tag: str, mappings: Iterable[TagMapping]) -> List[TagMapping]:
    """
    Find the mappings that apply to a tag.

    Matching is exact and case-sensitive, but ignores the '#' prefix on
    either side, so "#maths" and "maths" are the same tag.

    Args:
        tag: Tag found in a note
        mappings: Configured tag mappings

    Returns:
        List of matching mappings (empty if none match)
    """
    wanted = strip_hash(tag)
    return [mapping for mapping in mappings if strip_hash(mapping["tag"]) == wanted]


def make_mapping(data: Dict[str, Any]) -> TagMapping:
    """
    Build a mapping from a config entry.

    Accepts the snake_case "hub_path" key as well as the "hubPath" and
    "mocPath" keys used by the Obsidian plugin settings.

    Raises:
        ValueError: If the entry is not a mapping or has no tag
    """
    if not isinstance(data, dict):
        raise ValueError(f"Invalid tag mapping: {data!r}")

    tag = data.get("tag")
    if not isinstance(tag, str) or not tag.strip():
        raise ValueError(f"Tag mapping has no tag: {data!r}")

    hub_path = data.get("hub_path", data.get("hubPath", data.get("mocPath", "")))
    return TagMapping(tag=tag.strip(), hub_path=str(hub_path or "").strip())


def parse_mapping(text: str) -> TagMapping:
    """
    Parse a command line mapping of the form "tag=Hub/Path".

    Raises:
        ValueError: If the text has no '=' separator or an empty side
    """
    tag, sep, hub_path = text.partition("=")
    if not sep or not tag.strip() or not hub_path.strip():
        raise ValueError(f"Expected TAG=HUB_PATH, got {text!r}")
    return TagMapping(tag=tag.strip(), hub_path=hub_path.strip())
