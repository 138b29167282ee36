# oyster/__init__.py
"""
Oyster — URL-safe binary-to-text and big-integer encodings.
btt64 packs bytes 3-to-4 into a 64-symbol alphabet without padding; radix64 and
radix256 write arbitrary-precision unsigned integers as base-64 text or base-256 bytes.

Meant for large numeric identifiers and opaque blobs inside URLs and JSON fields.
"""

__version__ = "0.1.0.dev0"
