"""Utility building blocks: base64 codecs, memory-mapped file views, zipped ranges, enum reflection and signals."""

__version__ = "0.1.0"

__all__ = ["base64", "enums", "file_view", "signal", "zip"]