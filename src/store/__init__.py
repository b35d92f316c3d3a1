"""Local persistence layer.

This module reads and atomically writes the manifest and merges,
compresses, and decompresses the archive files it tracks.
"""
