"""Minimal perfect hash functions (BDZ), a hash map built on them, and MurmurHash3."""

__version__ = "0.1.0"