"""Test helpers package."""

from tests.helpers.prefs import legacy_opener, read_prefs_file, write_prefs_file

__all__ = ["legacy_opener", "read_prefs_file", "write_prefs_file"]
