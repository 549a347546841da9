"""Document extraction: files and pasted text to item lists."""

from .extract import (
    FileType,
    describe_file_type,
    detect_file_type,
    extract_bytes,
    extract_items,
    extract_text,
    is_supported,
)

__all__ = [
    "FileType",
    "describe_file_type",
    "detect_file_type",
    "extract_bytes",
    "extract_items",
    "extract_text",
    "is_supported",
]
