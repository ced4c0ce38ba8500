#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
test_mapping.py - Unit tests for tag to MOC mappings
"""

import sys
import os
import unittest

# Add the parent directory to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from auto_moc_linker.core.mapping import (
    TagMapping,
    ensure_md_extension,
    make_mapping,
    parse_mapping,
    resolve_mappings,
    strip_hash,
)


class TestResolveMappings(unittest.TestCase):
    """Test cases for mapping resolution."""

    def setUp(self):
        self.mappings = [
            TagMapping(tag="maths", hub_path="MOCs/Maths"),
            TagMapping(tag="#physics", hub_path="MOCs/Physics"),
            TagMapping(tag="maths", hub_path="MOCs/Science"),
            TagMapping(tag="Art", hub_path="MOCs/Art"),
        ]

    def test_hash_prefix_is_ignored(self):
        """A mapping for "maths" matches "#maths" and "maths" alike."""
        with_hash = resolve_mappings("#maths", self.mappings)
        without_hash = resolve_mappings("maths", self.mappings)
        self.assertEqual(with_hash, without_hash)
        self.assertEqual([m["hub_path"] for m in with_hash], ["MOCs/Maths", "MOCs/Science"])

        self.assertEqual(len(resolve_mappings("physics", self.mappings)), 1)
        self.assertEqual(len(resolve_mappings("#physics", self.mappings)), 1)

    def test_case_sensitive(self):
        self.assertEqual(resolve_mappings("art", self.mappings), [])
        self.assertEqual(len(resolve_mappings("Art", self.mappings)), 1)

    def test_no_partial_matches(self):
        self.assertEqual(resolve_mappings("math", self.mappings), [])
        self.assertEqual(resolve_mappings("maths/algebra", self.mappings), [])

    def test_no_mappings(self):
        self.assertEqual(resolve_mappings("maths", []), [])


class TestMappingHelpers(unittest.TestCase):
    """Test cases for mapping helpers."""

    def test_strip_hash(self):
        self.assertEqual(strip_hash("#maths"), "maths")
        self.assertEqual(strip_hash("maths"), "maths")
        self.assertEqual(strip_hash("##maths"), "#maths")

    def test_ensure_md_extension(self):
        self.assertEqual(ensure_md_extension("MOC"), "MOC.md")
        self.assertEqual(ensure_md_extension("MOCs/Maths.md"), "MOCs/Maths.md")
        self.assertEqual(ensure_md_extension("MOCs/Maths.MD"), "MOCs/Maths.MD")
        self.assertEqual(ensure_md_extension("v1.2"), "v1.2.md")
        self.assertEqual(ensure_md_extension(""), "")

    def test_make_mapping_accepts_plugin_keys(self):
        self.assertEqual(make_mapping({"tag": "maths", "mocPath": "MOC"}),
                         {"tag": "maths", "hub_path": "MOC"})
        self.assertEqual(make_mapping({"tag": " maths ", "hubPath": "MOC "}),
                         {"tag": "maths", "hub_path": "MOC"})
        self.assertEqual(make_mapping({"tag": "maths"}), {"tag": "maths", "hub_path": ""})

    def test_make_mapping_rejects_invalid_entries(self):
        with self.assertRaises(ValueError):
            make_mapping({"hub_path": "MOC"})
        with self.assertRaises(ValueError):
            make_mapping("maths=MOC")

    def test_parse_mapping(self):
        self.assertEqual(parse_mapping("#maths=MOCs/Maths"), {"tag": "#maths", "hub_path": "MOCs/Maths"})
        for text in ["maths", "=MOC", "maths="]:
            with self.assertRaises(ValueError):
                parse_mapping(text)


if __name__ == '__main__':
    unittest.main()
