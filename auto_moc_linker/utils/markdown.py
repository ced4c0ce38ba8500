#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
markdown.py - Utilities for working with Obsidian-flavored Markdown

This module provides the text handling behind MOC linking:
- Extracting tags from YAML frontmatter and inline #tags
- Extracting existing [[wiki links]] from a hub note
- Inserting a link line under a section heading
"""

import re
from typing import List, Optional, Set


DEFAULT_SECTION_HEADING = "## Links"
FILENAME_PLACEHOLDER = "{{fileName}}"

# Frontmatter must open the note; the closing delimiter is a line of its own
FRONTMATTER_PATTERN = re.compile(r'\A---\n(.*?)\n---[ \t]*$', re.DOTALL | re.MULTILINE)

SCALAR_TAG_PATTERN = re.compile(r'^[ \t]*tags[ \t]*:[ \t]*([^\n\[\]]+)$', re.MULTILINE)
INLINE_LIST_TAG_PATTERN = re.compile(r'^[ \t]*tags[ \t]*:[ \t]*\[(.*?)\]', re.MULTILINE)
BLOCK_TAGS_KEY_PATTERN = re.compile(r'^\s*tags\s*:\s*$')
BLOCK_TAG_ITEM_PATTERN = re.compile(r'^\s*-\s*(\S.*?)\s*$')

INLINE_TAG_PATTERN = re.compile(r'#([A-Za-z0-9_-]+)')


def extract_frontmatter(content: str) -> Optional[str]:
    """
    Return the raw frontmatter block of a note.

    Args:
        content: Full note content

    Returns:
        Text between the opening and closing '---' lines, or None
    """
    match = FRONTMATTER_PATTERN.match(content)
    if match:
        return match.group(1)
    return None


def _frontmatter_tags(frontmatter: str) -> List[str]:
    tags = []

    # Scalar form: tags: value
    scalar_match = SCALAR_TAG_PATTERN.search(frontmatter)
    if scalar_match:
        tag = scalar_match.group(1).strip()
        if tag:
            tags.append(tag)

    # Inline list form: tags: [a, b, c]
    list_match = INLINE_LIST_TAG_PATTERN.search(frontmatter)
    if list_match:
        tags.extend(tag.strip() for tag in list_match.group(1).split(",") if tag.strip())

    # Block list form: tags: followed by "- value" lines
    in_block = False
    for line in frontmatter.split("\n"):
        if BLOCK_TAGS_KEY_PATTERN.match(line):
            in_block = True
            continue

        if in_block:
            item_match = BLOCK_TAG_ITEM_PATTERN.match(line)
            if item_match:
                tags.append(item_match.group(1))
            else:
                in_block = False

    return tags


def extract_tags(content: str) -> List[str]:
    """
    Extract tags from Markdown content.

    Frontmatter tags come first (scalar, inline list and block list forms are
    checked independently, so a note may match more than one of them),
    followed by every inline #tag found anywhere in the content. Order is
    preserved and duplicates are kept.

    Args:
        content: Markdown content to extract tags from

    Returns:
        List of tags, without the # prefix for inline tags
    """
    tags = []

    frontmatter = extract_frontmatter(content)
    if frontmatter is not None:
        tags.extend(_frontmatter_tags(frontmatter))

    tags.extend(INLINE_TAG_PATTERN.findall(content))

    return tags


def extract_links(content: str) -> Set[str]:
    """
    Extract wiki link targets from Markdown content.

    Args:
        content: Markdown content to extract links from

    Returns:
        Set of link targets (without brackets and aliases)
    """
    links = set()

    # Everything after the first "[[" is a candidate; unterminated ones are ignored
    for section in content.split("[[")[1:]:
        end = section.find("]]")
        if end == -1:
            continue
        links.add(section[:end].split("|", 1)[0].strip())

    return links


def format_link_line(template: str, note_name: str) -> str:
    """Fill the link template's {{fileName}} placeholder with a note name."""
    return template.replace(FILENAME_PLACEHOLDER, note_name, 1)


def merge_section(content: str, heading: str, link_line: str) -> str:
    """
    Insert a link line directly under a section heading.

    The heading is matched as a whole line (trailing whitespace allowed). When
    it is missing, the heading and link line are appended to the end of the
    note. No duplicate check is made here; use extract_links() first.

    Args:
        content: Hub note content
        heading: Section heading (e.g., "## Links")
        link_line: Line to insert (e.g., "- [[Note]]")

    Returns:
        Updated hub note content
    """
    heading_pattern = re.compile(r'^' + re.escape(heading) + r'\s*$', re.MULTILINE)

    if heading_pattern.search(content):
        replacement = f"{heading}\n{link_line}"
        return heading_pattern.sub(lambda match: replacement, content, count=1)

    return content + f"\n\n{heading}\n{link_line}"
